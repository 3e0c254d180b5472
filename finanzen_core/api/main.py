"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finanzen_core.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finanzen_core.api.v1 import expenses, goals, investments, projection, score
from finanzen_core.infrastructure.observability.logging import setup_logging
from finanzen_core.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FinanZen Core",
        description="Financial health score, expense aggregation and growth projection service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(score.router, prefix="/v1", tags=["score"])
    app.include_router(expenses.router, prefix="/v1", tags=["expenses"])
    app.include_router(investments.router, prefix="/v1", tags=["investments"])
    app.include_router(projection.router, prefix="/v1", tags=["projection"])
    app.include_router(goals.router, prefix="/v1", tags=["goals"])

    return app


app = create_app()
