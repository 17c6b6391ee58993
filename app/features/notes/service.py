# Notes Feature - Service

from typing import Optional
from app.features.notes.prompts import compose_prompt
from app.features.notes.schemas import GenerateNoteRequest, GenerateNoteResponse
from app.services.generation_service import GenerationService
from app.core.logging import logger
from app.shared.exceptions import (
    TranscriptRequiredException,
    GeneratorNotConfiguredException,
    NoteGenerationFailedException,
)


class NoteService:
    """Service class for clinical note generation."""

    @staticmethod
    async def generate_note(
        request: GenerateNoteRequest,
        generator: GenerationService,
        default_context: Optional[str] = None,
    ) -> GenerateNoteResponse:
        """
        Generate a clinical note from a visit transcript.

        Args:
            request: Transcript, context, optional previous note and patient snapshot
            generator: Text generator to call once with the composed prompt
            default_context: Context used when the request names none

        Returns:
            The generator's text, unmodified, with the echoed patient snapshot

        Raises:
            TranscriptRequiredException: Transcript missing or blank
            GeneratorNotConfiguredException: No generator API key configured
            NoteGenerationFailedException: The generator call failed
        """
        if not request.transcript or not request.transcript.strip():
            raise TranscriptRequiredException()

        if not generator.is_configured:
            logger.error("Note generation requested but OPENAI_API_KEY is not set")
            raise GeneratorNotConfiguredException()

        context = request.context or default_context
        prompt = compose_prompt(
            context=context,
            transcript=request.transcript,
            previous_note=request.previous_note,
            patient=request.patient_context,
        )

        try:
            note = await generator.generate(prompt)
        except Exception as e:
            # Type and message only, never the prompt
            logger.error(f"Error generating note (context={context}): {type(e).__name__}: {e}")
            raise NoteGenerationFailedException()

        logger.info(
            f"Generated note (context={context}, "
            f"patient_context={'yes' if request.patient_context else 'no'}, "
            f"chars={len(note)})"
        )

        return GenerateNoteResponse(note=note, patient_context=request.patient_context)
