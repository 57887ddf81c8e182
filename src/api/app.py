"""
FastAPI application factory.

* Registers the distance route under ``/api``.
* Applies rate-limiting and the ``ErrorResponse`` exception handlers.
* Swagger / OpenAPI UI available at ``/docs`` in development only.
"""

import logging

from fastapi import FastAPI

from src.api.middleware import register_error_handlers
from src.api.routes import distance
from src.config import settings

logging.basicConfig(level=settings.effective_log_level)


def create_app() -> FastAPI:
    docs_enabled = settings.is_development
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Calculates the great-circle distance in kilometres between two "
            "geographic coordinates using the Haversine formula."
        ),
        version="1.0.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    register_error_handlers(app)

    # Routers
    app.include_router(distance.router, prefix="/api")

    return app
