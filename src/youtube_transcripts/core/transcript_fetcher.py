"""
Transcript acquisition engine.

One acquisition runs a fixed fallback chain against the timedtext endpoint:

1. DirectAttempt - fetch the preferred-language track without discovery
2. Discover      - fetch and parse the track listing
3. Select        - score the listed tracks and pick one
4. TrackAttempt  - fetch the selected track

Each stage makes at most one request and the chain never goes back. Every
"no transcript" ending is reported through TranscriptResult.outcome; only an
invalid video identifier or malformed configuration raises.
"""

import time
from enum import Enum
from typing import Optional

import aiohttp

from ..models import CaptionTrack, TranscriptOutcome, TranscriptResult
from ..utils.logging import get_logger
from .config import Config, TranscriptOptions, config as default_config
from .exceptions import InvalidVideoIdError
from .timedtext_client import TimedTextClient, create_session
from .track_catalog import parse_track_catalog
from .track_selector import TrackSelector

logger = get_logger("transcript_fetcher")


class AcquisitionStage(Enum):
    """Pipeline stages, in execution order."""
    DIRECT_ATTEMPT = "DirectAttempt"
    DISCOVER = "Discover"
    SELECT = "Select"
    TRACK_ATTEMPT = "TrackAttempt"


def validate_video_id(video_id) -> str:
    """Return the stripped video identifier, raising InvalidVideoIdError if it is empty."""
    if not isinstance(video_id, str) or not video_id.strip():
        raise InvalidVideoIdError(video_id)
    return video_id.strip()


class TranscriptAcquirer:
    """
    Acquire a transcript for a video identifier.

    Holds no per-video state, so one instance can serve concurrent calls.
    When no session is given, each call opens and closes its own.
    """

    def __init__(self, config: Optional[Config] = None, session: Optional[aiohttp.ClientSession] = None):
        self.config = config or default_config
        self.config.validate()
        self.session = session

    async def acquire_transcript(self, video_id: str, options: Optional[TranscriptOptions] = None) -> TranscriptResult:
        """
        Run the acquisition pipeline for one video.

        Args:
            video_id: Video identifier (must be non-empty)
            options: Per-call overrides of the configured languages, weights, timeout or format

        Returns:
            TranscriptResult describing the transcript or which stage came up empty

        Raises:
            InvalidVideoIdError: If video_id is empty
            ConfigurationError: If the effective configuration is malformed
        """
        video_id = validate_video_id(video_id)
        call_config = self.config.with_options(options)
        call_config.validate()

        if self.session is not None:
            return await self._run(video_id, call_config, self.session)

        async with create_session(call_config.timedtext) as session:
            return await self._run(video_id, call_config, session)

    async def _run(self, video_id: str, call_config: Config, session: aiohttp.ClientSession) -> TranscriptResult:
        start_time = time.time()
        client = TimedTextClient(session, call_config.timedtext)
        selector = TrackSelector(call_config.language.preferred_languages, call_config.weights)

        def elapsed_ms() -> int:
            return int((time.time() - start_time) * 1000)

        def finish(result: TranscriptResult) -> TranscriptResult:
            logger.info(f"Transcript acquisition for {video_id} finished: {result.outcome.value} in {result.fetch_time_ms}ms")
            return result

        # 1. DirectAttempt
        language = call_config.language.preferred_language
        self._enter(AcquisitionStage.DIRECT_ATTEMPT, video_id, f"lang={language}")
        text = await client.fetch_direct_transcript(video_id, language)
        if text:
            return finish(TranscriptResult.direct_hit(
                text,
                language,
                video_id=video_id,
                fetch_time_ms=elapsed_ms(),
                is_degraded=not selector.is_preferred_language(language),
            ))

        # 2. Discover
        self._enter(AcquisitionStage.DISCOVER, video_id)
        listing = await client.fetch_track_listing(video_id)
        if listing is None:
            return finish(TranscriptResult.miss(
                TranscriptOutcome.LIST_UNAVAILABLE, video_id=video_id, fetch_time_ms=elapsed_ms()
            ))
        tracks = parse_track_catalog(listing)

        # 3. Select
        self._enter(AcquisitionStage.SELECT, video_id, f"{len(tracks)} track(s)")
        track = selector.select(tracks)
        if track is None:
            return finish(TranscriptResult.miss(
                TranscriptOutcome.NO_TRACKS_FOUND, video_id=video_id, fetch_time_ms=elapsed_ms()
            ))

        # 4. TrackAttempt
        self._enter(AcquisitionStage.TRACK_ATTEMPT, video_id, track.describe())
        text = await client.fetch_track_transcript(video_id, track)
        if not text:
            return finish(TranscriptResult.from_track(
                TranscriptOutcome.EMPTY_TRACK_PAYLOAD, track, video_id=video_id, fetch_time_ms=elapsed_ms()
            ))

        return finish(TranscriptResult.from_track(
            TranscriptOutcome.TRACK_HIT,
            track,
            text,
            video_id=video_id,
            fetch_time_ms=elapsed_ms(),
            is_degraded=self._is_degraded(track, selector),
        ))

    @staticmethod
    def _enter(stage: AcquisitionStage, video_id: str, detail: str = "") -> None:
        logger.info(f"[{video_id}] {stage.value}" + (f": {detail}" if detail else ""))

    @staticmethod
    def _is_degraded(track: CaptionTrack, selector: TrackSelector) -> bool:
        return track.is_automatic or not selector.is_preferred_language(track.language_code)


async def acquire_transcript(
    video_id: str,
    options: Optional[TranscriptOptions] = None,
    *,
    config: Optional[Config] = None,
    session: Optional[aiohttp.ClientSession] = None
) -> TranscriptResult:
    """Acquire a transcript with a one-off TranscriptAcquirer."""
    return await TranscriptAcquirer(config=config, session=session).acquire_transcript(video_id, options)
