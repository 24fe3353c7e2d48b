"""
Tests for the audio transcriber module.
"""

import os
import pytest
from unittest.mock import patch, MagicMock

from khmerscribe.models.schemas import TranscriptionConfig
from khmerscribe.core.transcriber import AudioTranscriber
from khmerscribe.utils.error_handling import UpstreamError


@pytest.fixture
def mock_groq_client():
    """Fixture to mock the Groq client."""
    with patch('khmerscribe.core.transcriber.Groq') as mock_groq:
        mock_client = mock_groq.return_value

        mock_response = MagicMock()
        mock_response.text = "  This is a test transcript  "
        mock_client.audio.transcriptions.create.return_value = mock_response

        yield mock_client


@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_init_transcriber(mock_groq_client):
    """Test initializing the transcriber."""
    transcriber = AudioTranscriber(TranscriptionConfig())
    assert transcriber.api_key == "test_api_key"
    assert transcriber.transcribe_config.model == "whisper-large-v3-turbo"


@patch.dict(os.environ, {}, clear=True)
def test_init_without_api_key():
    with pytest.raises(ValueError, match="Groq API key is required"):
        AudioTranscriber(TranscriptionConfig())


@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_transcribe(mock_groq_client, audio_payload):
    """The audio bytes are uploaded as-is and the text comes back stripped."""
    transcriber = AudioTranscriber(TranscriptionConfig(language="en"))
    text = transcriber.transcribe(audio_payload)

    assert text == "This is a test transcript"

    mock_groq_client.audio.transcriptions.create.assert_called_once()
    kwargs = mock_groq_client.audio.transcriptions.create.call_args.kwargs
    assert kwargs["file"] == ("V3TUEeB0kW0.mp4", b"fake audio bytes")
    assert kwargs["model"] == "whisper-large-v3-turbo"
    assert kwargs["language"] == "en"
    assert "prompt" not in kwargs


@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_transcribe_upstream_failure(mock_groq_client, audio_payload):
    mock_groq_client.audio.transcriptions.create.side_effect = RuntimeError("rate limited")

    transcriber = AudioTranscriber()
    with pytest.raises(UpstreamError, match="Transcription failed: rate limited"):
        transcriber.transcribe(audio_payload)


@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_transcribe_empty_result(mock_groq_client, audio_payload):
    mock_groq_client.audio.transcriptions.create.return_value.text = ""

    transcriber = AudioTranscriber()
    with pytest.raises(UpstreamError, match="no text"):
        transcriber.transcribe(audio_payload)
