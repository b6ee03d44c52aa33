"""
ColorScore API Routes
Implements the /api/score upload endpoint and metrics reporting.
"""
import time
from typing import Union

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from colorscore.config import config
from colorscore.schemas import ErrorResponse, MetricsResponse, ScoreResponse
from colorscore.services.analysis import analyze
from colorscore.services.errors import FileTooLargeError, MissingInputError, ProcessingError
from colorscore.utils.ids import generate_request_id
from colorscore.utils.logging import get_logger
from colorscore.utils.metrics import get_metrics

router = APIRouter(prefix="/api", tags=["Color Harmony Scoring"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/score",
    response_model=ScoreResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Score Color Harmony",
    description="Extract the dominant colors of an uploaded image and score how well they combine"
)
async def score_image(
    file: Union[UploadFile, str, None] = File(None, description="Image file to analyze")
):
    """
    Score an uploaded image.

    Returns `{score, colors}` on success. A missing or empty upload is a 400;
    anything that goes wrong while processing is a generic 500.
    """
    request_id = generate_request_id("score")
    log = get_logger()
    metrics = get_metrics() if config.METRICS_ENABLED else None
    start_time = time.time()

    if metrics:
        metrics.increment_request_count()

    # A plain text form field named "file" carries no upload
    if isinstance(file, str):
        file = None

    try:
        content = await file.read() if file is not None else None
        log.info("Received score request",
                 extra={"request_id": request_id,
                        "filename": file.filename if file is not None else None,
                        "bytes": len(content) if content else 0})

        result = await run_in_threadpool(analyze, content, request_id=request_id)

    except MissingInputError:
        log.warning("Score request without file", extra={"request_id": request_id})
        if metrics:
            metrics.increment_failure_count("missing_input")
        return _error(400, "File is required.")

    except FileTooLargeError as e:
        log.warning(str(e), extra={"request_id": request_id})
        if metrics:
            metrics.increment_failure_count("too_large")
        return _error(413, "File too large.")

    except ProcessingError:
        if metrics:
            metrics.increment_failure_count("processing")
        return _error(500, "Failed to process image.")

    duration_ms = (time.time() - start_time) * 1000
    if metrics:
        metrics.increment_success_count()
        metrics.record_timing("score", duration_ms)
        metrics.record_score(result.score)

    return ScoreResponse(**result.to_dict())


@router.get("/metrics", response_model=MetricsResponse)
def score_metrics():
    """Get in-process scoring metrics."""
    return get_metrics().get_summary()
