from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from resource_hub.core.config import settings
from resource_hub.core.errors import register_error_handlers
from resource_hub.core.logging import configure_logging, logger
from resource_hub.api.router import api_router
from resource_hub.db.session import engine
from resource_hub.db.base import Base
from resource_hub.db import models  # noqa: F401
from resource_hub.services.seed import seed_demo


def _cors_origins() -> list[str]:
    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    return origins or ["*"]


def create_app() -> FastAPI:
    configure_logging(settings.ENV, settings.LOG_LEVEL)
    app = FastAPI(title="Resource Hub for Exhibitors", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.on_event("startup")
    def _startup():
        # dev only; other environments are migrated with alembic
        if settings.ENV != "dev":
            return
        Base.metadata.create_all(bind=engine)
        if settings.SEED_DEMO:
            seed_demo()

    app.include_router(api_router, prefix=settings.API_PREFIX)
    logger.info("app_started", env=settings.ENV, api_prefix=settings.API_PREFIX)
    return app


app = create_app()
