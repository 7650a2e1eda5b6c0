"""Data models for caption tracks advertised by the timedtext listing."""

from dataclasses import dataclass
from typing import Optional


class TrackKind:
    """Normalized values of a caption track's ``kind``."""
    AUTOMATIC = "automatic"
    AUTHORED = "authored"

    # Wire value the timedtext endpoint uses for speech-recognition tracks
    ASR = "asr"

    @classmethod
    def from_wire(cls, value: Optional[str]) -> Optional[str]:
        """Map a listing ``kind`` attribute to its normalized value (None when absent)."""
        if value is None:
            return None
        value = value.strip().lower()
        if not value:
            return None
        if value in (cls.ASR, cls.AUTOMATIC):
            return cls.AUTOMATIC
        return value

    @classmethod
    def to_wire(cls, kind: Optional[str]) -> Optional[str]:
        """Map a normalized kind back to the request parameter value."""
        if kind == cls.AUTOMATIC:
            return cls.ASR
        return kind


@dataclass(frozen=True)
class CaptionTrack:
    """One selectable caption stream for a video."""
    language_code: str
    display_name: str = ""
    kind: Optional[str] = None
    variant_id: Optional[str] = None

    def __post_init__(self):
        if not self.language_code or not self.language_code.strip():
            raise ValueError("CaptionTrack requires a non-empty language_code")

    @property
    def is_automatic(self) -> bool:
        return self.kind == TrackKind.AUTOMATIC

    def describe(self) -> str:
        """Short label for log lines, e.g. "en-US (automatic)"."""
        label = self.language_code
        if self.kind:
            label += f" ({self.kind})"
        if self.display_name:
            label += f" '{self.display_name}'"
        return label
