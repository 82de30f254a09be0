from dataclasses import dataclass
from fastapi import Depends, Header, HTTPException, status, Request
from typing import Optional
from fastapi_jwt import JwtAccessBearer, JwtAuthorizationCredentials
from sqlmodel import Session
from app.models.user import UserRole
from app.core.config import settings
from app.services.mailer import Mailer

# JWT в заголовке Authorization: Bearer <token>
access_security = JwtAccessBearer(
    secret_key=settings.SECRET_KEY,
    auto_error=False,
    access_expires_delta=settings.jwt_expires_delta
)


@dataclass(frozen=True)
class TokenUser:
    """Пользователь из claims токена"""
    id: int
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def get_db(request: Request):
    with Session(request.app.state.engine) as session:
        yield session


def get_mailer() -> Mailer:
    return Mailer.from_settings(settings)


def create_token(user_id: int, role: UserRole) -> str:
    subject = {"id": user_id, "role": role.value}
    return access_security.create_access_token(subject=subject)


async def get_current_user(
    credentials: JwtAuthorizationCredentials = Depends(access_security),
    authorization: Optional[str] = Header(None)
) -> TokenUser:
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided"
        )

    # Заголовок есть, но токен не прошёл проверку (подпись, срок, схема)
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )

    user_id = credentials.subject.get("id")
    role = credentials.subject.get("role")
    if not user_id or role not in {r.value for r in UserRole}:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )

    return TokenUser(id=int(user_id), role=UserRole(role))


async def admin_required(
    current_user: TokenUser = Depends(get_current_user)
) -> TokenUser:
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin only"
        )
    return current_user
