import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, or_
from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime
from app.api.deps import get_db, get_mailer, create_token, get_current_user, TokenUser
from app.core.config import settings
from app.core.security import hash_password, verify_password
from app.models.user import User, UserRole
from app.schemas.base import CamelModel
from app.services.auth import get_user_by_phone, new_reset_challenge, consume_reset_challenge
from app.services.mailer import Mailer

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


# === Schemas ===

class SignupRequest(CamelModel):
    username: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)
    role: UserRole = UserRole.USER


class LoginRequest(CamelModel):
    phone: Optional[str] = None
    # EmailStr нормализует адрес так же, как при регистрации
    email: Optional[EmailStr] = None
    password: str


class ForgotPasswordRequest(CamelModel):
    phone: str


class ResetPasswordRequest(CamelModel):
    phone: str
    otp: str
    new_password: str = Field(min_length=1)


class UserResponse(CamelModel):
    id: int
    username: str
    phone: str
    email: str
    role: UserRole
    disabled: bool
    created_at: Optional[datetime] = None


# === Routes ===

def find_registered(db: Session, phone: str, email: str) -> User | None:
    return db.exec(
        select(User).where(or_(User.phone == phone, User.email == email))
    ).first()


@router.post("/signup")
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    """Регистрация нового пользователя"""
    # Проверка уникальности
    existing = find_registered(db, data.phone, data.email)
    if existing:
        field = "Phone" if existing.phone == data.phone else "Email"
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{field} already registered"
        )

    user = User(
        username=data.username,
        phone=data.phone,
        email=data.email,
        password_hash=hash_password(data.password),
        role=data.role
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Параллельная регистрация с тем же телефоном или email
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Phone or email already registered"
        )
    db.refresh(user)

    logger.info("User %s registered with role %s", user.id, user.role.value)
    return {"message": "User registered successfully", "userId": user.id}


@router.post("/login")
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """Вход по телефону или email (телефон в приоритете)"""
    if data.phone:
        stmt = select(User).where(User.phone == data.phone)
    elif data.email:
        stmt = select(User).where(User.email == data.email)
    else:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Phone or email required"
        )

    user = db.exec(stmt).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    if user.disabled:
        logger.info("Login refused for disabled user %s", user.id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account disabled")

    if not verify_password(data.password, user.password_hash):
        logger.info("Invalid credentials for user %s", user.id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return {"token": create_token(user.id, user.role)}


@router.post("/forgot-password")
def forgot_password(
    data: ForgotPasswordRequest,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer)
):
    """Запрос сброса пароля: OTP уходит на email"""
    user = get_user_by_phone(db, data.phone)
    challenge = new_reset_challenge(db, user)

    # Ошибка SMTP уходит в общий обработчик (500)
    mailer.send_otp(user.email, challenge.otp, settings.OTP_EXPIRES_MINUTES)

    return {"message": "OTP sent to email address"}


@router.post("/reset-password")
def reset_password(data: ResetPasswordRequest, db: Session = Depends(get_db)):
    """Сброс пароля по OTP"""
    user = get_user_by_phone(db, data.phone)
    consume_reset_challenge(db, user, data.otp, data.new_password)
    return {"message": "Password reset successful"}


@router.get("/me", response_model=UserResponse)
def me(current_user: TokenUser = Depends(get_current_user), db: Session = Depends(get_db)):
    user = db.get(User, current_user.id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
