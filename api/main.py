"""
Main FastAPI application for the lead qualification engine.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import leads, tax, webhooks
from .services import get_services, initialize_services
from .middleware.metrics import MetricsMiddleware, metrics_endpoint
from config.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Lead qualification engine starting up...")
    initialize_services()
    logger.info("Lead qualification engine ready")
    yield
    logger.info("Lead qualification engine shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.api_title,
        description="Deterministic lead scoring and transfer tax calculation for realtor chat widgets.",
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics middleware
    app.add_middleware(MetricsMiddleware)

    app.include_router(leads.router, prefix="/api/v1", tags=["Leads"])
    app.include_router(tax.router, prefix="/api/v1", tags=["Tax"])
    app.include_router(webhooks.router, prefix="/api/v1", tags=["Webhooks"])

    app.get("/metrics", tags=["Monitoring"])(metrics_endpoint)

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "service": settings.brand_name,
            "version": settings.api_version,
            "status": "operational",
            "docs": "/docs",
        }

    # Health check
    @app.get("/health")
    async def health():
        services = get_services()
        return {
            "status": "healthy" if services.is_ready else "degraded",
            "services": services.health(),
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
