"""
Data models for the transcription service.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict

from khmerscribe.config import config


class ProcessingStep(str, Enum):
    """Stages of a job, in the order they happen."""
    IDLE = "idle"
    DOWNLOADING = "downloading"
    TRANSCRIBING = "transcribing"
    CLEANING = "cleaning"
    SUMMARIZING = "summarizing"
    COMPLETE = "complete"


class AudioQuality(str, Enum):
    """Which audio-only stream to pick."""
    LOWEST = "lowest"
    HIGHEST = "highest"


class YouTubeDownloadConfig(BaseModel):
    """Configuration for YouTube download operations."""
    url: str
    audio_quality: AudioQuality = AudioQuality.LOWEST


class AudioPayload(BaseModel):
    """Audio track of a video, held entirely in memory."""
    video_id: str
    title: str = ""
    author: str = ""
    filename: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


class TranscriptionConfig(BaseModel):
    """Configuration for transcription operations."""
    model: str = config.TRANSCRIPTION_MODEL
    language: Optional[str] = None
    prompt: Optional[str] = None
    response_format: str = "json"
    temperature: float = 0.0


class GenerationConfig(BaseModel):
    """Configuration for text generation (cleaning and summarizing)."""
    model_config = ConfigDict(protected_namespaces=())

    model: str = config.TEXT_MODEL
    model_provider: str = config.TEXT_MODEL_PROVIDER
    temperature: float = 0.0
    max_tokens: int = 4096
    # The cleaned transcript is about as long as the transcript itself
    clean_max_tokens: int = 32768


class StreamEvent(BaseModel):
    """
    One record of the progress stream.

    A progress event carries only ``step``; the cleaned transcript travels
    alone in ``transcription``; the final event pairs ``summary`` with the
    ``complete`` step; ``error`` is terminal and travels alone.
    """
    model_config = ConfigDict(use_enum_values=True)

    step: Optional[ProcessingStep] = None
    transcription: Optional[str] = None
    summary: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def progress(cls, step: ProcessingStep) -> "StreamEvent":
        return cls(step=step)

    @classmethod
    def cleaned(cls, transcription: str) -> "StreamEvent":
        return cls(transcription=transcription)

    @classmethod
    def completed(cls, summary: str) -> "StreamEvent":
        return cls(summary=summary, step=ProcessingStep.COMPLETE)

    @classmethod
    def failed(cls, message: str) -> "StreamEvent":
        return cls(error=message)

    @property
    def is_terminal(self) -> bool:
        return self.error is not None or self.step == ProcessingStep.COMPLETE.value

    def to_sse(self) -> str:
        """Render the event as a server-sent events ``data:`` record."""
        return f"data: {self.model_dump_json(exclude_none=True)}\n\n"
