import logging
import smtplib
from email.mime.text import MIMEText
from app.core.config import Settings

logger = logging.getLogger(__name__)


class Mailer:
    """Отправка plaintext-писем через SMTP"""

    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        password: str,
        sender: str,
        use_tls: bool = True,
        timeout: float = 10,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender
        self.use_tls = use_tls
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "Mailer":
        return cls(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            user=settings.SMTP_USER,
            password=settings.SMTP_PASSWORD,
            sender=settings.mail_sender,
            use_tls=settings.SMTP_USE_TLS,
        )

    def send(self, recipient: str, subject: str, body: str) -> None:
        msg = MIMEText(body)
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = recipient

        # Порт 465 - сразу SSL, остальные - STARTTLS если сервер умеет
        if self.port == 465:
            with smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout) as server:
                server.login(self.user, self.password)
                server.send_message(msg)
        else:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                server.ehlo()
                if self.use_tls and server.has_extn("starttls"):
                    server.starttls()
                    server.ehlo()
                server.login(self.user, self.password)
                server.send_message(msg)

        logger.info("Email sent to %s: %s", recipient, subject)

    def send_otp(self, recipient: str, otp: str, expires_minutes: int) -> None:
        self.send(
            recipient,
            "Klara Coffee OTP",
            f"Your OTP is {otp}. It expires in {expires_minutes} minutes."
        )
