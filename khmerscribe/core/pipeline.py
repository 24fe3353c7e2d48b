"""
Pipeline orchestrator: download, transcribe, clean and summarize one video,
reporting progress as a stream of events.
"""

import asyncio
import time
import traceback
from typing import AsyncIterator, Callable, Optional

from fastapi.concurrency import run_in_threadpool

from khmerscribe.config import config
from khmerscribe.core.text_generator import TextGenerator
from khmerscribe.core.transcriber import AudioTranscriber
from khmerscribe.core.youtube_downloader import YouTubeDownloader
from khmerscribe.models.schemas import (
    GenerationConfig,
    ProcessingStep,
    StreamEvent,
    TranscriptionConfig,
    YouTubeDownloadConfig,
)
from khmerscribe.utils.error_handling import UpstreamError, error_message
from khmerscribe.utils.logger import logging


class TranscriptionPipeline:
    """
    Runs the four stages of a job in a fixed order.

    A progress event is emitted before each stage starts. The cleaned
    transcript is emitted as soon as the cleaning stage returns, and the
    summary travels with the ``complete`` step. Any failure ends the job
    with a single error event.
    """

    def __init__(
        self,
        transcriber: AudioTranscriber,
        generator: TextGenerator,
        downloader_factory: Callable[[YouTubeDownloadConfig], YouTubeDownloader] = YouTubeDownloader,
        summary_language: str = config.SUMMARY_LANGUAGE,
        max_duration: Optional[float] = config.MAX_DURATION,
    ):
        self.transcriber = transcriber
        self.generator = generator
        self.downloader_factory = downloader_factory
        self.summary_language = summary_language
        self.max_duration = max_duration

    @classmethod
    def from_config(cls, text_model: Optional[str] = None) -> "TranscriptionPipeline":
        """Build a pipeline wired to the real services."""
        generation_config = GenerationConfig(model=text_model) if text_model else GenerationConfig()
        return cls(
            transcriber=AudioTranscriber(TranscriptionConfig()),
            generator=TextGenerator(generation_config),
        )

    async def _call(self, deadline: Optional[float], func, *args):
        """Run a blocking upstream call in the threadpool, within the job's time budget."""
        if deadline is None:
            return await run_in_threadpool(func, *args)

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise UpstreamError(f"Processing exceeded the {self.max_duration}s limit")
        try:
            return await asyncio.wait_for(run_in_threadpool(func, *args), timeout=remaining)
        except asyncio.TimeoutError:
            raise UpstreamError(f"Processing exceeded the {self.max_duration}s limit")

    def _download(self, url: str):
        downloader = self.downloader_factory(YouTubeDownloadConfig(url=url))
        return downloader.download_audio()

    async def run(self, url: str) -> AsyncIterator[StreamEvent]:
        """
        Process one video URL.

        Args:
            url: YouTube video URL, checked only by the download stage

        Yields:
            StreamEvent records, ending with either ``complete`` or ``error``
        """
        deadline = time.monotonic() + self.max_duration if self.max_duration else None
        started = time.monotonic()

        try:
            # Step 1: Download audio
            yield StreamEvent.progress(ProcessingStep.DOWNLOADING)
            logging.info(f"Downloading audio from: {url}")
            audio = await self._call(deadline, self._download, url)

            # Step 2: Transcribe
            yield StreamEvent.progress(ProcessingStep.TRANSCRIBING)
            transcript_text = await self._call(deadline, self.transcriber.transcribe, audio)

            # Step 3: Clean transcript
            yield StreamEvent.progress(ProcessingStep.CLEANING)
            cleaned_text = await self._call(deadline, self.generator.clean, transcript_text)
            yield StreamEvent.cleaned(cleaned_text)

            # Step 4: Summarize
            yield StreamEvent.progress(ProcessingStep.SUMMARIZING)
            summary = await self._call(
                deadline, self.generator.summarize, cleaned_text, self.summary_language
            )

            logging.info(f"Processing complete in {time.monotonic() - started:.1f}s: {url}")
            yield StreamEvent.completed(summary)

        except Exception as e:
            logging.error(f"Processing error for {url}: {str(e)}")
            logging.error(traceback.format_exc())
            yield StreamEvent.failed(error_message(e))
