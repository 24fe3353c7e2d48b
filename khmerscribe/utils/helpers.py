"""
Helper utility functions for the transcription service.
"""

import re
from typing import Optional
from urllib.parse import urlparse


YOUTUBE_HOSTS = ("youtube.com", "youtu.be", "youtube-nocookie.com")

VIDEO_ID_PATTERNS = [
    r"(?:v=)([0-9A-Za-z_-]{11})",                      # Standard watch URL
    r"(?:youtu\.be\/)([0-9A-Za-z_-]{11})",             # Shortened
    r"(?:embed|shorts|live|v)\/([0-9A-Za-z_-]{11})",  # Embedded, shorts and live
]


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Args:
        url: YouTube URL

    Returns:
        Video ID or None if extraction fails
    """
    for pattern in VIDEO_ID_PATTERNS:
        match = re.search(pattern, url)
        if match:
            return match.group(1)

    return None


def is_youtube_url(url: str) -> bool:
    """Check that a URL points at a YouTube video."""
    if not url or not url.strip():
        return False

    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https"):
        return False

    host = (parsed.hostname or "").lower()
    if not any(host == allowed or host.endswith("." + allowed) for allowed in YOUTUBE_HOSTS):
        return False

    return extract_video_id(url) is not None
