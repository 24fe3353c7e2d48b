"""
Tests for the URL helpers and error messages.
"""

import pytest

from khmerscribe.utils.helpers import extract_video_id, is_youtube_url
from khmerscribe.utils.logger import resolve_log_level
from khmerscribe.utils.error_handling import (
    ApiError,
    InvalidInputError,
    StreamError,
    TranscriptionError,
    UpstreamError,
    error_message,
)


@pytest.mark.parametrize("url,video_id", [
    ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R", "V3TUEeB0kW0"),
    ("https://www.youtube.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://youtube.com/shorts/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://m.youtube.com/watch?feature=share&v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
])
def test_extract_video_id(url, video_id):
    assert extract_video_id(url) == video_id
    assert is_youtube_url(url)


@pytest.mark.parametrize("url", [
    "",
    "   ",
    "not a url",
    "https://vimeo.com/watch?v=dQw4w9WgXcQ",
    "ftp://youtube.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/",
    "https://notyoutube.com/watch?v=dQw4w9WgXcQ",
])
def test_rejects_unsupported_urls(url):
    assert not is_youtube_url(url)


def test_error_taxonomy():
    for error_class in (InvalidInputError, UpstreamError, StreamError, ApiError):
        assert issubclass(error_class, TranscriptionError)
    assert ApiError("refused", status_code=500).status_code == 500


def test_error_message_collapses_to_text():
    assert error_message(UpstreamError("Transcription failed: boom")) == "Transcription failed: boom"
    assert error_message(ValueError("")) == "Processing failed"
    assert error_message(RuntimeError("  "), default="An error occurred") == "An error occurred"


@pytest.mark.parametrize("environment,override,expected", [
    (None, None, "DEBUG"),
    ("development", None, "DEBUG"),
    ("production", None, "INFO"),
    ("PRODUCTION", None, "INFO"),
    ("production", "warning", "WARNING"),
    ("development", "ERROR", "ERROR"),
])
def test_resolve_log_level(environment, override, expected):
    assert resolve_log_level(environment, override) == expected
