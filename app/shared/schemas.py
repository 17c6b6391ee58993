from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned by note generation."""

    error: str
