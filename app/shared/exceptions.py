from fastapi import HTTPException, status


class CredentialsException(HTTPException):
    """Exception for invalid credentials."""

    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundException(HTTPException):
    """Exception for resource not found."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class BadRequestException(HTTPException):
    """Exception for bad request."""

    def __init__(self, detail: str = "Bad request"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class ConflictException(HTTPException):
    """Exception for resource conflict."""

    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )


# ============== Note Generation ==============
# Rendered as {"error": ...} by the handler registered in app.main

class NoteGenerationException(HTTPException):
    """Base exception for note generation failures."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class TranscriptRequiredException(NoteGenerationException):
    """Exception for a missing or blank transcript."""

    def __init__(self, detail: str = "Transcript is required"):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


class GeneratorNotConfiguredException(NoteGenerationException):
    """Exception for a missing text-generation credential."""

    def __init__(self, detail: str = "OpenAI API key not configured"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)


class NoteGenerationFailedException(NoteGenerationException):
    """Exception for an upstream text-generation failure."""

    def __init__(self, detail: str = "Failed to generate note"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)
