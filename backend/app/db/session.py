from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str) -> Engine:
    """Создание engine; для SQLite нужен check_same_thread=False"""
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    # In-memory база живёт только в одном соединении
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(database_url, connect_args=connect_args)


def create_tables(engine: Engine) -> None:
    # Регистрация всех таблиц в metadata
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
