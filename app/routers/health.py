"""Service status endpoints."""

from fastapi import APIRouter

from app import __version__
from config import settings

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    """Root endpoint - basic service status."""
    return {"service": "intake", "status": "running"}


@router.get("/health")
async def health_check():
    """Health check endpoint for monitoring and load balancer probes."""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.environment,
    }
