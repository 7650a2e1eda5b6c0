"""Core modules for transcript acquisition."""

from .config import Config, ScoringWeights, TranscriptOptions, config, setup_logging
from .exceptions import ConfigurationError, InvalidVideoIdError, TranscriptError
from .timedtext_client import TimedTextClient, create_session
from .track_catalog import parse_track_catalog
from .track_selector import ScoredTrack, TrackSelector
from .transcript_fetcher import (
    AcquisitionStage,
    TranscriptAcquirer,
    acquire_transcript,
    validate_video_id
)

__all__ = [
    'Config',
    'ScoringWeights',
    'TranscriptOptions',
    'config',
    'setup_logging',
    'ConfigurationError',
    'InvalidVideoIdError',
    'TranscriptError',
    'TimedTextClient',
    'create_session',
    'parse_track_catalog',
    'ScoredTrack',
    'TrackSelector',
    'AcquisitionStage',
    'TranscriptAcquirer',
    'acquire_transcript',
    'validate_video_id'
]
