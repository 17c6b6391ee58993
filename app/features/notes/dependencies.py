# Notes Feature - Dependencies

from app.services.generation_service import GenerationService


def get_generation_service() -> GenerationService:
    """Dependency providing the text generator for note generation."""
    return GenerationService()
