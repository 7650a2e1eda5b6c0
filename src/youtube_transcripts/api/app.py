from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core import TranscriptAcquirer, setup_logging
from ..core.exceptions import InvalidVideoIdError, TranscriptError
from ..utils.logging import get_logger
from .schemas import ErrorResponse, TranscriptResponse

logger = get_logger("api")

_acquirer: Optional[TranscriptAcquirer] = None


def get_acquirer() -> TranscriptAcquirer:
    """Return the process-wide acquirer (created on first use)."""
    global _acquirer
    if _acquirer is None:
        _acquirer = TranscriptAcquirer()
    return _acquirer


# ----------------------------------------------------------------------------
# FastAPI lifecycle
# ----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield


app = FastAPI(lifespan=lifespan)

allow_origins = os.environ.get('CORS_ALLOW_ORIGINS', '*')
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in allow_origins.split(',') if o.strip()],
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ----------------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------------

def _error(message: str, status: int = 400, detail: Optional[str] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content=ErrorResponse(error=message, message=detail).model_dump(exclude_none=True),
    )


# ----------------------------------------------------------------------------
# API Routes
# ----------------------------------------------------------------------------

@app.get('/healthz')
async def healthz():
    return {"status": "ok"}


@app.get('/api/transcript', response_model=TranscriptResponse, response_model_by_alias=True)
async def transcript(
    video_id: Optional[str] = Query(default=None, alias="videoId"),
    acquirer: TranscriptAcquirer = Depends(get_acquirer),
):
    if not video_id or not video_id.strip():
        return _error('Missing videoId query parameter')
    try:
        result = await acquirer.acquire_transcript(video_id)
    except InvalidVideoIdError:
        return _error('Missing videoId query parameter')
    except TranscriptError as e:
        logger.error(f"Failed to fetch transcript for {video_id}: {e}", exc_info=True)
        return _error('Failed to fetch transcript', status=500, detail=str(e))
    return TranscriptResponse.from_result(result)
