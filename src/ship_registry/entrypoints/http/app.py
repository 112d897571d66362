from fastapi import FastAPI

from ship_registry.entrypoints.http.exception_handlers import register_exception_handlers
from ship_registry.entrypoints.http.routes.health import router as health_router
from ship_registry.entrypoints.http.routes.ships import router as ships_router
from ship_registry.infra.config import log_json, log_level
from ship_registry.infra.logging_config import configure_logging


def build_app() -> FastAPI:
    app = FastAPI(
        title="Ship Registry API",
        description="""
        Registry of space ships: browse, filter, create, update and delete.

        ## Features
        - List ships with filters, sorting and pagination
        - Count ships matching filters
        - Create, read, partially update and delete ships
        - Ratings are computed server-side from speed, usage and production year

        ## Authentication
        No authentication required.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(ships_router, prefix="/rest")

    return app


configure_logging(level=log_level(), json_logs=log_json())
app = build_app()
