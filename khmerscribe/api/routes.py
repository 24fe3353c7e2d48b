"""
API routes for the transcription service.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from khmerscribe.api.schemas import ErrorResponse, TranscribeRequest
from khmerscribe.core.pipeline import TranscriptionPipeline
from khmerscribe.utils.logger import logging

router = APIRouter(prefix="/api", tags=["transcription"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def get_pipeline() -> TranscriptionPipeline:
    """Build the pipeline for one request."""
    return TranscriptionPipeline.from_config()


@router.post(
    "/transcribe",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def transcribe_video(
    request: TranscribeRequest,
    pipeline: TranscriptionPipeline = Depends(get_pipeline),
):
    """
    Transcribe a YouTube video and summarize it in Khmer.

    - Streams ``text/event-stream`` records of the form ``data: <json>``
    - Emits a progress record before every stage
    - Ends with ``{"summary": ..., "step": "complete"}`` or ``{"error": ...}``
    """
    logging.info(f"Transcription requested for: {request.url}")

    async def event_stream():
        async for event in pipeline.run(request.url):
            yield event.to_sse()

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
