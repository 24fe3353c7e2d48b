"""
Client-side state for one transcription job, kept in step with the server's
event stream.
"""

from typing import Any, Callable, Dict, Optional
from pydantic import BaseModel

from khmerscribe.frontend.api_client import ApiClient
from khmerscribe.models.schemas import ProcessingStep
from khmerscribe.utils.error_handling import StreamError, UpstreamError, error_message
from khmerscribe.utils.logger import logging

EMPTY_URL_MESSAGE = "Please enter a YouTube URL"


class ConsumerState(BaseModel):
    """What the UI shows: current stage, partial results and last error."""
    step: ProcessingStep = ProcessingStep.IDLE
    transcription: str = ""
    summary: str = ""
    error: str = ""

    @property
    def is_processing(self) -> bool:
        return self.step not in (ProcessingStep.IDLE, ProcessingStep.COMPLETE)

    def reset(self):
        """Clear the results of the previous job."""
        self.transcription = ""
        self.summary = ""
        self.error = ""

    def apply(self, event: Dict[str, Any]):
        """
        Apply one decoded event. Each field is last-write-wins.

        Raises:
            UpstreamError: the event reports a server-side failure
        """
        if event.get("step"):
            self.step = ProcessingStep(event["step"])
        if event.get("transcription"):
            self.transcription = event["transcription"]
        if event.get("summary"):
            self.summary = event["summary"]
        if event.get("error"):
            raise UpstreamError(event["error"])


class StreamConsumer:
    """Drives one request and keeps a ConsumerState up to date."""

    def __init__(
        self,
        client: ApiClient,
        state: Optional[ConsumerState] = None,
        on_update: Optional[Callable[[ConsumerState], None]] = None,
    ):
        self.client = client
        self.state = state or ConsumerState()
        self.on_update = on_update

    def _notify(self):
        if self.on_update:
            self.on_update(self.state)

    def submit(self, url: str) -> ConsumerState:
        """
        Run a job for ``url`` to completion.

        A failure anywhere leaves the message in ``state.error`` and puts the
        state back to ``idle``.
        """
        self.state.reset()

        if not url or not url.strip():
            self.state.error = EMPTY_URL_MESSAGE
            self._notify()
            return self.state

        try:
            self.state.step = ProcessingStep.DOWNLOADING
            self._notify()

            for event in self.client.stream_transcription(url):
                self.state.apply(event)
                self._notify()

            if self.state.step != ProcessingStep.COMPLETE:
                raise StreamError("The server closed the stream before processing completed")

        except Exception as e:
            logging.error(f"Transcription failed for {url}: {str(e)}")
            self.state.error = error_message(e, default="An error occurred")
            self.state.step = ProcessingStep.IDLE
            self._notify()

        return self.state
