"""
Seed-скрипт: создание таблиц и админа из ENV, если его ещё нет
Запуск: python -m app.scripts.seed_admin
"""
import logging
from sqlalchemy.engine import Engine
from sqlmodel import Session, select, or_
from app.db.session import create_db_engine, create_tables
from app.models.user import User, UserRole
from app.core.security import hash_password
from app.core.config import settings

logger = logging.getLogger(__name__)


def seed_admin(engine: Engine) -> User | None:
    """Создание админа если не существует"""
    if not settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_PASSWORD not set, skipping admin seed")
        return None

    if not settings.ADMIN_PHONE or not settings.ADMIN_EMAIL:
        logger.warning("ADMIN_PHONE and ADMIN_EMAIL are required, skipping admin seed")
        return None

    with Session(engine) as session:
        stmt = select(User).where(
            or_(User.email == settings.ADMIN_EMAIL, User.phone == settings.ADMIN_PHONE)
        )
        existing = session.exec(stmt).first()

        if existing:
            logger.info("Admin already exists: %s", existing.email or existing.phone)
            return existing

        admin = User(
            username=settings.ADMIN_USERNAME,
            email=settings.ADMIN_EMAIL,
            phone=settings.ADMIN_PHONE,
            password_hash=hash_password(settings.ADMIN_PASSWORD),
            role=UserRole.ADMIN,
        )
        session.add(admin)
        session.commit()
        session.refresh(admin)
        logger.info("Admin created: %s", admin.email)
        return admin


def main():
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    engine = create_db_engine(settings.DATABASE_URL)
    try:
        logger.info("Creating tables...")
        create_tables(engine)
        seed_admin(engine)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
