"""
Module for transcribing audio using Groq's speech-to-text API.
"""

import os
from typing import Optional

from groq import Groq

from khmerscribe.models.schemas import AudioPayload, TranscriptionConfig
from khmerscribe.utils.error_handling import UpstreamError
from khmerscribe.utils.logger import logging


class AudioTranscriber:
    """Class to handle audio transcription operations."""

    def __init__(
        self, transcribe_config: Optional[TranscriptionConfig] = None, api_key: Optional[str] = None
    ):
        """
        Initialize the transcriber with API key.

        Args:
            transcribe_config: Configuration for transcription
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.transcribe_config = transcribe_config or TranscriptionConfig()
        self.api_key = api_key or os.getenv("GROQ_API_KEY")
        if not self.api_key:
            raise ValueError(
                "Groq API key is required. Set it in .env file or pass directly."
            )

        self.client = Groq(api_key=self.api_key)

    def transcribe(self, audio: AudioPayload) -> str:
        """
        Transcribe an in-memory audio payload.

        Args:
            audio: Audio bytes downloaded from YouTube

        Returns:
            Raw transcript text
        """
        if not audio.content:
            raise ValueError("Audio payload is empty")

        logging.info(f"Transcribing audio: {audio.filename} ({audio.size} bytes)")

        request = {
            "file": (audio.filename, audio.content),
            "model": self.transcribe_config.model,
            "response_format": self.transcribe_config.response_format,
            "temperature": self.transcribe_config.temperature,
        }
        if self.transcribe_config.language:
            request["language"] = self.transcribe_config.language
        if self.transcribe_config.prompt:
            request["prompt"] = self.transcribe_config.prompt

        try:
            transcription = self.client.audio.transcriptions.create(**request)
        except Exception as e:
            logging.error(f"Error transcribing audio: {str(e)}")
            raise UpstreamError(f"Transcription failed: {str(e)}") from e

        text = (getattr(transcription, "text", None) or "").strip()
        if not text:
            raise UpstreamError("Transcription returned no text")

        logging.info(f"Transcription complete ({len(text)} characters).")
        return text
