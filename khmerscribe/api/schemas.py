from pydantic import BaseModel


class TranscribeRequest(BaseModel):
    """Model for requesting a transcription and summary."""
    url: str


class ErrorResponse(BaseModel):
    """Body returned when a request is refused before streaming starts."""
    error: str
