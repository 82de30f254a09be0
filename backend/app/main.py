import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.db.session import create_db_engine, create_tables

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Пул соединений живёт всё время работы процесса
    engine = create_db_engine(settings.DATABASE_URL)
    create_tables(engine)
    app.state.engine = engine
    logger.info("Database ready (%s)", engine.url.render_as_string(hide_password=True))
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database engine disposed")


app = FastAPI(
    title="Klara Coffee API",
    description="API documentation for Klara Coffee project",
    version="1.0.0",
    docs_url="/api-docs",
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Import routers after app creation to avoid circular imports
from app.api import (  # noqa: E402
    auth,
    menu,
    orders,
    admin,
)

# Routers - all already have /api prefix
app.include_router(auth.router)
app.include_router(menu.router)
app.include_router(orders.router)
app.include_router(admin.router)


@app.get("/")
def root():
    return {"status": "ok", "service": "klara-coffee-api"}


@app.get("/api/health")
def health_check():
    return {
        "status": "healthy",
        "env": settings.ENV
    }
