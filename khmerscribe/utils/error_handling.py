"""
Centralized error handling for the application.

Every failure, whatever its origin, reaches the user as a single message
string. The classes below only decide which message that is.
"""

DEFAULT_ERROR_MESSAGE = "Processing failed"


class TranscriptionError(Exception):
    """Base class for errors raised by the transcription pipeline and its client."""


class InvalidInputError(TranscriptionError):
    """The submitted URL is not a supported YouTube video link."""


class UpstreamError(TranscriptionError):
    """A remote service (YouTube, speech-to-text, text generation) failed."""


class StreamError(TranscriptionError):
    """The event stream was interrupted before a terminal event arrived."""


class ApiError(StreamError):
    """The server refused the request before any event was streamed."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


def error_message(error: BaseException, default: str = DEFAULT_ERROR_MESSAGE) -> str:
    """
    Collapse an exception into the user-visible message.

    Args:
        error: The exception that occurred
        default: Message used when the exception carries no text

    Returns:
        A non-empty message string
    """
    message = str(error).strip()
    return message or default
