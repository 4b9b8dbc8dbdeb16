from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from typing import Optional

from routers import geofences
from core.config import settings
from core.errors import register_error_handlers
from core.logging_config import setup_logging
from services.geofence_service import GeofenceService
import logging

logger = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "Geofences", "description": "The geofence managing API"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s %s started; docs at %s", settings.APP_NAME, settings.APP_VERSION, settings.DOCS_URL)
    yield
    # shutdown: records live only in memory and are dropped with the process
    logger.info("Shutting down with %d geofences in memory", len(app.state.geofence_service))


def create_app(service: Optional[GeofenceService] = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        openapi_tags=TAGS_METADATA,
        servers=[{"url": f"http://localhost:{settings.PORT}"}],
        docs_url=settings.DOCS_URL,
        lifespan=lifespan,
    )
    # the store is owned by this app instance, never shared through a module global
    app.state.geofence_service = service if service is not None else GeofenceService()

    register_error_handlers(app)
    app.include_router(geofences.router)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def root():
        return settings.GREETING

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running on http://localhost:%d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
