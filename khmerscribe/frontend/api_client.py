"""
API client for communicating with the transcription backend.
"""

import json
import requests
from typing import Dict, Iterator, Any, Optional
from urllib.parse import urljoin

from khmerscribe.config import config
from khmerscribe.utils.error_handling import ApiError, StreamError

EVENT_PREFIX = "data: "


def parse_event_line(line: str) -> Optional[Dict[str, Any]]:
    """
    Decode one line of the event stream.

    Args:
        line: A single line, without its trailing newline

    Returns:
        The JSON payload of a ``data:`` record, or None for any other line
    """
    if not line or not line.startswith(EVENT_PREFIX):
        return None
    return json.loads(line[len(EVENT_PREFIX):])


class ApiClient:
    """Client for interacting with the transcription API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = config.MAX_DURATION + 30):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for the next chunk of the stream
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Read the error message from a non-streamed error response."""
        try:
            data = response.json()
        except ValueError:
            return "Failed to process video"
        if isinstance(data, dict):
            return data.get("error") or data.get("detail") or "Failed to process video"
        return "Failed to process video"

    def stream_transcription(self, url: str) -> Iterator[Dict[str, Any]]:
        """
        Request a transcription and yield each event as it arrives.

        Args:
            url: YouTube video URL

        Yields:
            Decoded event payloads, in the order the server sent them
        """
        try:
            with requests.post(
                self._url("transcribe"),
                json={"url": url},
                stream=True,
                timeout=(10, self.timeout),
            ) as response:
                if not response.ok:
                    raise ApiError(self._error_message(response), status_code=response.status_code)

                # Split raw bytes on \n / \r only; decoded text would also
                # split on U+2028 and friends inside the JSON payload
                for raw_line in response.iter_lines():
                    event = parse_event_line(raw_line.decode("utf-8"))
                    if event is not None:
                        yield event
        except requests.RequestException as e:
            raise StreamError(f"Connection to the server failed: {str(e)}") from e
