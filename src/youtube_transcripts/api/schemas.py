from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from ..models import TranscriptResult


class TranscriptResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transcript: str
    outcome: str
    language_code: Optional[str] = Field(default=None, alias="languageCode")
    track_kind: Optional[str] = Field(default=None, alias="trackKind")
    track_name: Optional[str] = Field(default=None, alias="trackName")
    video_id: Optional[str] = Field(default=None, alias="videoId")
    degraded: bool = False
    fetch_time_ms: int = Field(default=0, alias="fetchTimeMs")

    @classmethod
    def from_result(cls, result: TranscriptResult) -> "TranscriptResponse":
        return cls.model_validate(result.to_dict())


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
