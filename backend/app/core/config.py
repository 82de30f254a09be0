from pydantic_settings import BaseSettings
from typing import List, Optional
from datetime import timedelta


class Settings(BaseSettings):
    ENV: str = "development"
    # Обязательно: без секрета приложение не стартует
    SECRET_KEY: str
    DATABASE_URL: str = "sqlite:///./klara.db"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # JWT
    JWT_ACCESS_EXPIRES_MINUTES: int = 60 * 24

    # OTP для сброса пароля
    OTP_EXPIRES_MINUTES: int = 10

    # SMTP
    SMTP_HOST: str
    SMTP_PORT: int = 587
    SMTP_USER: str
    SMTP_PASSWORD: str
    SMTP_FROM_EMAIL: Optional[str] = None
    SMTP_USE_TLS: bool = True

    # Logging / errors
    LOG_LEVEL: str = "INFO"
    EXPOSE_ERRORS: Optional[bool] = None

    # Admin seed
    ADMIN_USERNAME: str = "admin"
    ADMIN_EMAIL: Optional[str] = "admin@klara.coffee"
    ADMIN_PHONE: Optional[str] = "+10000000000"
    ADMIN_PASSWORD: Optional[str] = None

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def jwt_expires_delta(self) -> timedelta:
        return timedelta(minutes=self.JWT_ACCESS_EXPIRES_MINUTES)

    @property
    def otp_expires_delta(self) -> timedelta:
        return timedelta(minutes=self.OTP_EXPIRES_MINUTES)

    @property
    def mail_sender(self) -> str:
        return self.SMTP_FROM_EMAIL or self.SMTP_USER

    @property
    def expose_errors(self) -> bool:
        if self.EXPOSE_ERRORS is not None:
            return self.EXPOSE_ERRORS
        return self.ENV != "production"

    class Config:
        env_file = ".env"


settings = Settings()
