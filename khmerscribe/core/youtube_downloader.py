"""
YouTube audio downloader module.
"""

import io

from pytubefix import YouTube

from khmerscribe.models.schemas import AudioPayload, AudioQuality, YouTubeDownloadConfig
from khmerscribe.utils.error_handling import InvalidInputError, UpstreamError
from khmerscribe.utils.helpers import extract_video_id, is_youtube_url
from khmerscribe.utils.logger import logging


class YouTubeDownloader:
    """Class to handle downloading audio from YouTube into memory."""

    def __init__(self, config: YouTubeDownloadConfig):
        """
        Initialize the YouTube downloader with configuration.

        The URL is not checked here; ``download_audio`` does that so an
        invalid link surfaces as a failure of the download stage.

        Args:
            config: Configuration for download operations
        """
        self.config = config
        self._yt = None

    @property
    def yt(self) -> YouTube:
        if self._yt is None:
            if not is_youtube_url(self.config.url):
                raise InvalidInputError("Invalid YouTube URL")
            self._yt = YouTube(self.config.url)
        return self._yt

    def get_media_info(self) -> dict:
        """Extract metadata from YouTube video."""
        return {
            "video_id": self.yt.video_id or extract_video_id(self.config.url),
            "title": self.yt.title,
            "author": self.yt.author,
        }

    def _select_audio_stream(self):
        streams = self.yt.streams.filter(only_audio=True).order_by("abr")
        if self.config.audio_quality == AudioQuality.HIGHEST:
            return streams.last()
        return streams.first()

    def download_audio(self) -> AudioPayload:
        """
        Download the whole audio track into memory.

        Returns:
            AudioPayload holding the raw audio bytes

        Raises:
            InvalidInputError: the URL is not a supported YouTube video link
            UpstreamError: YouTube refused or failed the download
        """
        try:
            audio_stream = self._select_audio_stream()
            if audio_stream is None:
                raise UpstreamError("No audio stream available for this video")

            info = self.get_media_info()
            logging.info(f"Downloading audio: {info['title']}")

            buffer = io.BytesIO()
            audio_stream.stream_to_buffer(buffer)
            content = buffer.getvalue()
            if not content:
                raise UpstreamError("Downloaded audio is empty")

            subtype = getattr(audio_stream, "subtype", None) or "mp4"
            payload = AudioPayload(
                video_id=info["video_id"],
                title=info["title"] or "",
                author=info["author"] or "",
                filename=f"{info['video_id']}.{subtype}",
                content=content,
            )
            logging.info(f"Audio downloaded in memory ({payload.size} bytes)")
            return payload

        except (InvalidInputError, UpstreamError):
            raise
        except Exception as e:
            logging.error(f"Error downloading audio: {str(e)}")
            raise UpstreamError(f"Failed to download audio: {str(e)}") from e
