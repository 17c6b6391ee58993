# Notes Feature - Router

from fastapi import APIRouter, Depends
from app.features.auth.models import User
from app.features.auth.dependencies import get_current_user
from app.features.notes.dependencies import get_generation_service
from app.features.notes.prompts import list_contexts
from app.features.notes.schemas import (
    GenerateNoteRequest,
    GenerateNoteResponse,
    ContextListResponse,
)
from app.features.notes.service import NoteService
from app.services.generation_service import GenerationService
from app.shared.enums import DEFAULT_CONTEXT
from app.shared.schemas import ErrorResponse


router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("/contexts", response_model=ContextListResponse)
async def get_contexts(current_user: User = Depends(get_current_user)):
    """List the clinical contexts a note can be generated for."""
    return ContextListResponse(contexts=list_contexts(), default=DEFAULT_CONTEXT)


@router.post(
    "/generate-note",
    response_model=GenerateNoteResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Transcript missing"},
        500: {"model": ErrorResponse, "description": "Generator not configured or failed"},
    },
)
async def generate_note(
    request: GenerateNoteRequest,
    current_user: User = Depends(get_current_user),
    generator: GenerationService = Depends(get_generation_service),
):
    """
    Generate a clinical note from a visit transcript.

    - **transcript**: Visit transcript (required)
    - **context**: Clinical context key; unknown keys use hmhi-transfer,
      omitted keys use the user's default context
    - **previousNote**: Prior note, used for hmhi-transfer only
    - **patientContext**: Patient snapshot, echoed back in the response
    """
    return await NoteService.generate_note(
        request,
        generator,
        default_context=current_user.preferences.default_context.value,
    )
