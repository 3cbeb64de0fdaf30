"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
import src.domain  # noqa: F401  registers all tables on SQLModel.metadata
from src.api.error import register_error_handlers
from src.api.routes import charges, clients

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from src.depends import engine

        if config.AUTO_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")

        yield

        await engine.dispose()

    app = FastAPI(
        title="Warehouse Capacity Billing",
        description="Client code allocation, sales assignment and monthly capacity charges",
        version="1.0.0",
        lifespan=lifespan,
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    app.include_router(charges.router)
    app.include_router(clients.router)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
