from datetime import datetime, timezone
import logging
import secrets
from fastapi import HTTPException, status
from sqlalchemy import delete
from sqlmodel import Session, select
from app.core.config import settings
from app.core.security import hash_password
from app.models.user import User, PasswordReset

logger = logging.getLogger(__name__)

OTP_LENGTH = 6


def generate_otp() -> str:
    """6-значный код, равномерно случайный, с ведущими нулями"""
    return f"{secrets.randbelow(10 ** OTP_LENGTH):0{OTP_LENGTH}d}"


def get_user_by_phone(db: Session, phone: str) -> User:
    user = db.exec(select(User).where(User.phone == phone)).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


def new_reset_challenge(db: Session, user: User) -> PasswordReset:
    """Создать OTP для сброса пароля (просроченные коды пользователя удаляются)"""
    now = datetime.now(timezone.utc)
    db.execute(
        delete(PasswordReset).where(
            PasswordReset.user_id == user.id,
            PasswordReset.expires_at <= now,
        )
    )

    challenge = PasswordReset(
        user_id=user.id,
        otp=generate_otp(),
        expires_at=now + settings.otp_expires_delta,
    )
    db.add(challenge)
    db.commit()
    db.refresh(challenge)

    logger.info("Password reset OTP issued for user %s", user.id)
    return challenge


def consume_reset_challenge(db: Session, user: User, otp: str, new_password: str) -> None:
    """Сменить пароль по OTP; смена пароля и удаление кода - одна транзакция"""
    challenge = db.exec(
        select(PasswordReset).where(
            PasswordReset.user_id == user.id,
            PasswordReset.otp == otp,
            PasswordReset.expires_at > datetime.now(timezone.utc),
        )
    ).first()

    if not challenge:
        logger.info("Invalid or expired OTP for user %s", user.id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid or expired OTP")

    user.password_hash = hash_password(new_password)
    user.updated_at = datetime.now(timezone.utc)

    try:
        db.add(user)
        db.delete(challenge)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Password reset completed for user %s", user.id)
