"""
YouTube Transcripts Package

Acquires a plain-text transcript for a video from the timedtext captioning
endpoint, falling back from a direct fetch to track discovery and selection.
"""

__version__ = "0.1.0"

from .utils.logging import get_logger
from .models import CaptionTrack, TrackKind, TranscriptOutcome, TranscriptResult
from .core import (
    Config,
    ConfigurationError,
    InvalidVideoIdError,
    ScoringWeights,
    TranscriptAcquirer,
    TranscriptError,
    TranscriptOptions,
    acquire_transcript
)

__all__ = [
    'get_logger',
    'CaptionTrack',
    'TrackKind',
    'TranscriptOutcome',
    'TranscriptResult',
    'Config',
    'ConfigurationError',
    'InvalidVideoIdError',
    'ScoringWeights',
    'TranscriptAcquirer',
    'TranscriptError',
    'TranscriptOptions',
    'acquire_transcript'
]
