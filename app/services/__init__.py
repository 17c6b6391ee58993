"""Business logic services."""

from app.services.generation_service import GenerationService, GenerationError

__all__ = ["GenerationService", "GenerationError"]
