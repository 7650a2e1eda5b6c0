"""Data models for transcript acquisition results."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .caption_track import CaptionTrack


class TranscriptOutcome(Enum):
    """Terminal state of one acquisition call."""
    DIRECT_HIT = "DirectHit"
    TRACK_HIT = "TrackHit"
    NO_TRACKS_FOUND = "NoTracksFound"
    EMPTY_TRACK_PAYLOAD = "EmptyTrackPayload"
    LIST_UNAVAILABLE = "ListUnavailable"

    @property
    def is_hit(self) -> bool:
        return self in (TranscriptOutcome.DIRECT_HIT, TranscriptOutcome.TRACK_HIT)


@dataclass(frozen=True)
class TranscriptResult:
    """
    Result of one transcript acquisition.

    ``text`` is non-empty exactly when the outcome is DirectHit or TrackHit.
    Provenance fields (language, kind, name) describe where the text came
    from; they are also filled for EmptyTrackPayload so callers can see
    which track turned out empty.
    """
    text: str
    outcome: TranscriptOutcome
    language_code: Optional[str] = None
    track_kind: Optional[str] = None
    track_name: Optional[str] = None
    video_id: Optional[str] = None
    fetch_time_ms: int = 0
    is_degraded: bool = False

    def __post_init__(self):
        if bool(self.text) != self.outcome.is_hit:
            raise ValueError(
                f"Transcript text must be non-empty exactly for hits, got outcome={self.outcome.value} "
                f"with {len(self.text)} characters"
            )

    @property
    def success(self) -> bool:
        """Check if a transcript was obtained."""
        return self.outcome.is_hit

    @classmethod
    def direct_hit(cls, text: str, language_code: str, **extra: Any) -> "TranscriptResult":
        return cls(text=text, outcome=TranscriptOutcome.DIRECT_HIT, language_code=language_code, **extra)

    @classmethod
    def from_track(
        cls,
        outcome: TranscriptOutcome,
        track: CaptionTrack,
        text: str = "",
        **extra: Any
    ) -> "TranscriptResult":
        """Build a result whose provenance comes from the selected track."""
        return cls(
            text=text,
            outcome=outcome,
            language_code=track.language_code,
            track_kind=track.kind,
            track_name=track.display_name or None,
            **extra
        )

    @classmethod
    def miss(cls, outcome: TranscriptOutcome, **extra: Any) -> "TranscriptResult":
        return cls(text="", outcome=outcome, **extra)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase dictionary used on the wire."""
        return {
            "transcript": self.text,
            "outcome": self.outcome.value,
            "languageCode": self.language_code,
            "trackKind": self.track_kind,
            "trackName": self.track_name,
            "videoId": self.video_id,
            "degraded": self.is_degraded,
            "fetchTimeMs": self.fetch_time_ms,
        }
