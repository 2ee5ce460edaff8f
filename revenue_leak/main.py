"""
FastAPI application entry point for the Revenue Leak API.

This module wires the calculation engine to HTTP: it configures logging and
CORS, registers the API routers, and starts the ASGI server when run
directly. The engine holds no resources, so startup and shutdown only log.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from revenue_leak import __version__
from revenue_leak.api import api_router
from revenue_leak.core.config import get_settings


settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for FastAPI application startup and shutdown events.
    """
    logger.info(f"{settings.app_name} starting (version {__version__})")
    yield
    logger.info(f"{settings.app_name} shutting down")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description=(
        "Revenue leak calculation engine. Converts a service business's "
        "operational metrics into ranked monthly revenue leaks, a live "
        "cockpit exposure figure, and a reactivation opportunity estimate."
    ),
    lifespan=lifespan,
)

# Configure CORS middleware for the calculator front-end
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
app.include_router(api_router)


@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring and load balancer probes.

    Returns:
        Dict with status 'healthy'
    """
    return {"status": "healthy"}


@app.get("/")
async def root():
    """
    Root endpoint providing API information.

    Returns:
        Dict with API name and version
    """
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


# Run with uvicorn when executed directly
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "revenue_leak.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
