"""
Khmer Scribe.

Submit a YouTube URL and follow a streamed pipeline that downloads the audio,
transcribes it, strips sponsor and filler content, and summarizes the result
in Khmer.
"""

from khmerscribe.config import config

__version__ = config.APP_VERSION
