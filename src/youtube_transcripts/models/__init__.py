"""Data models for transcript acquisition."""

from .caption_track import CaptionTrack, TrackKind
from .transcript_result import TranscriptOutcome, TranscriptResult

__all__ = [
    "CaptionTrack",
    "TrackKind",
    "TranscriptOutcome",
    "TranscriptResult",
]
