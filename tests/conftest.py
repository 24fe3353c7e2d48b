"""
Configuration for pytest tests.
"""

import os
import pytest
from unittest.mock import MagicMock

# Must be set before khmerscribe.config is imported
os.environ.setdefault("GROQ_API_KEY", "test_api_key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from khmerscribe.core.pipeline import TranscriptionPipeline
from khmerscribe.models.schemas import AudioPayload


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture
def audio_payload():
    """Fixture to create an in-memory audio payload."""
    return AudioPayload(
        video_id="V3TUEeB0kW0",
        title="Test Video",
        author="Test Author",
        filename="V3TUEeB0kW0.mp4",
        content=b"fake audio bytes",
    )


@pytest.fixture
def mock_downloader(audio_payload):
    """Downloader factory whose downloader returns ``audio_payload``."""
    factory = MagicMock()
    factory.return_value.download_audio.return_value = audio_payload
    return factory


@pytest.fixture
def mock_transcriber():
    transcriber = MagicMock()
    transcriber.transcribe.return_value = "Raw transcript. This video is sponsored by Acme. Um, the main idea is testing."
    return transcriber


@pytest.fixture
def mock_generator():
    generator = MagicMock()
    generator.clean.return_value = "The main idea is testing."
    generator.summarize.return_value = "សេចក្តីសង្ខេប៖ គំនិតសំខាន់គឺការធ្វើតេស្ត។"
    return generator


@pytest.fixture
def pipeline(mock_downloader, mock_transcriber, mock_generator):
    """Pipeline wired to mocked services."""
    return TranscriptionPipeline(
        transcriber=mock_transcriber,
        generator=mock_generator,
        downloader_factory=mock_downloader,
        summary_language="Khmer",
        max_duration=30,
    )
