"""Requests against the captioning service's timedtext endpoint."""

import asyncio
from typing import Dict, Optional

import aiohttp

from ..models import CaptionTrack, TrackKind
from ..utils.logging import get_logger
from ..utils.text_utils import normalize_caption_text
from .config import TimedTextConfig

logger = get_logger("timedtext_client")


def create_session(timedtext_config: TimedTextConfig) -> aiohttp.ClientSession:
    """Create an HTTP session with the configured per-call timeout and headers."""
    timeout = aiohttp.ClientTimeout(total=timedtext_config.request_timeout)
    return aiohttp.ClientSession(
        timeout=timeout,
        headers={
            "User-Agent": timedtext_config.user_agent,
            "Accept": "*/*",
            "Accept-Language": "en-US,en;q=0.8",
        },
    )


class TimedTextClient:
    """
    Thin client for the three timedtext requests the engine makes.

    Every method issues exactly one GET. Transport errors, timeouts and
    non-2xx statuses are soft misses: transcript fetches return "" and the
    listing fetch returns None. Cancellation is never swallowed.
    """

    def __init__(self, session: aiohttp.ClientSession, timedtext_config: TimedTextConfig):
        self.session = session
        self.config = timedtext_config
        self._timeout = aiohttp.ClientTimeout(total=timedtext_config.request_timeout)

    async def _get(self, params: Dict[str, str], purpose: str) -> Optional[str]:
        """GET the endpoint and return the body, or None on any soft miss."""
        try:
            async with self.session.get(self.config.base_url, params=params, timeout=self._timeout) as response:
                if response.status < 200 or response.status >= 300:
                    logger.warning(f"{purpose} for {params.get('v')} returned HTTP {response.status}")
                    return None
                return await response.text(errors="replace")
        except asyncio.TimeoutError:
            logger.warning(f"{purpose} for {params.get('v')} timed out after {self.config.request_timeout}s")
            return None
        except aiohttp.ClientError as e:
            logger.warning(f"{purpose} for {params.get('v')} failed: {e}")
            return None

    async def _get_transcript(self, params: Dict[str, str], purpose: str) -> str:
        body = await self._get(params, purpose)
        text = normalize_caption_text(body)
        if body is not None and not text:
            logger.info(f"{purpose} for {params.get('v')} returned an empty payload")
        return text

    async def fetch_direct_transcript(self, video_id: str, language_code: str) -> str:
        """
        Fetch the default track for a language without discovering tracks first.

        Returns:
            Normalized transcript text, or "" on a soft miss
        """
        params = {"v": video_id, "lang": language_code, "fmt": self.config.caption_format}
        return await self._get_transcript(params, "Direct transcript fetch")

    async def fetch_track_listing(self, video_id: str) -> Optional[str]:
        """
        Fetch the document listing a video's caption tracks.

        Returns:
            Raw listing body (possibly empty), or None if the listing is unavailable
        """
        return await self._get({"v": video_id, "type": "list"}, "Track listing fetch")

    async def fetch_track_transcript(self, video_id: str, track: CaptionTrack) -> str:
        """
        Fetch the transcript of one selected track.

        Returns:
            Normalized transcript text, or "" on a soft miss
        """
        params = {"v": video_id, "lang": track.language_code, "fmt": self.config.caption_format}
        kind = TrackKind.to_wire(track.kind)
        if kind:
            params["kind"] = kind
        if track.display_name:
            params["name"] = track.display_name
        return await self._get_transcript(params, f"Track transcript fetch [{track.describe()}]")
