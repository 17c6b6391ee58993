"""Health check endpoints."""

from fastapi import APIRouter

from app.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "clinical-note-scribe",
        "environment": settings.ENVIRONMENT,
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check for Kubernetes/Docker."""
    return {
        "status": "ready",
        "note_generation_configured": bool(settings.OPENAI_API_KEY),
    }
