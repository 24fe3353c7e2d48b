"""
Command line entry point: run the whole pipeline for one video in-process.
"""

import sys
import asyncio
import argparse
from dotenv import load_dotenv

from khmerscribe.config import config
from khmerscribe.core.pipeline import TranscriptionPipeline
from khmerscribe.models.schemas import StreamEvent
from khmerscribe.utils.logger import logging


async def process_video(pipeline: TranscriptionPipeline, url: str) -> StreamEvent:
    """Run the pipeline and return its terminal event, printing results as they arrive."""
    terminal_event = None
    async for event in pipeline.run(url):
        if event.step:
            logging.info(f"Step: {event.step}")
        if event.transcription:
            print("\n" + "=" * 80)
            print("Transcription")
            print("=" * 80)
            print(event.transcription)
        if event.summary:
            print("\n" + "=" * 80)
            print(f"{config.SUMMARY_LANGUAGE} summary")
            print("=" * 80)
            print(event.summary)
        if event.is_terminal:
            terminal_event = event
    return terminal_event


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube transcription with Khmer summary")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--model", default=config.TEXT_MODEL,
                        help="Language model for cleaning and summarizing")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    pipeline = TranscriptionPipeline.from_config(text_model=args.model)
    result = asyncio.run(process_video(pipeline, args.url))

    if result is None or result.error:
        print(f"Error: {result.error if result else 'no output'}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
