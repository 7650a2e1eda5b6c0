"""Pytest configuration and fixtures for the transcript acquisition tests."""

import asyncio
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiohttp
import pytest

# Make 'src' importable when running from the repo root without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from youtube_transcripts.core.config import Config, LanguageConfig, LoggingConfig, ScoringWeights, TimedTextConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"
TIMEDTEXT_URL = "https://captions.test/api/timedtext"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network or app")
    config.addinivalue_line("markers", "integration: tests going through the FastAPI app")


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


# ----------------------------------------------------------------------------
# Fake aiohttp session
# ----------------------------------------------------------------------------

class FakeResponse:
    """Stands in for aiohttp.ClientResponse inside ``async with session.get(...)``."""

    def __init__(self, status: int = 200, body: str = "", error: Optional[BaseException] = None):
        self.status = status
        self.body = body
        self.error = error

    async def text(self, encoding: Optional[str] = None, errors: str = "strict") -> str:
        return self.body

    async def __aenter__(self) -> "FakeResponse":
        if self.error is not None:
            raise self.error
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


class HangingResponse(FakeResponse):
    """A request that never answers, used to exercise cancellation."""

    def __init__(self):
        super().__init__()
        self.started = asyncio.Event()

    async def __aenter__(self) -> "FakeResponse":
        self.started.set()
        await asyncio.Event().wait()
        return self


class FakeSession:
    """
    Minimal aiohttp.ClientSession replacement.

    Responses are served in the order queued; a request with nothing queued
    fails the test, so every test pins down exactly which requests happen.
    """

    def __init__(self, *responses: FakeResponse):
        self.queue: List[FakeResponse] = list(responses)
        self.requests: List[Dict[str, Any]] = []

    def get(self, url: str, params: Optional[Dict[str, str]] = None, timeout: Any = None) -> FakeResponse:
        self.requests.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if not self.queue:
            raise AssertionError(f"Unexpected request to {url} with {params}")
        return self.queue.pop(0)


def respond(body: str = "", status: int = 200) -> FakeResponse:
    return FakeResponse(status=status, body=body)


def fail(error: Optional[BaseException] = None) -> FakeResponse:
    return FakeResponse(error=error or aiohttp.ClientConnectionError("connection reset"))


# ----------------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------------

@pytest.fixture
def test_config() -> Config:
    """Deterministic configuration independent of the environment."""
    return Config(
        logging=LoggingConfig(level="DEBUG"),
        timedtext=TimedTextConfig(base_url=TIMEDTEXT_URL, caption_format="vtt", request_timeout=5.0, user_agent="tests"),
        language=LanguageConfig(preferred_language="en", preferred_languages=["en"]),
        weights=ScoringWeights(),
    )


@pytest.fixture
def listing_document() -> str:
    return load_fixture("listing_basic.xml")


@pytest.fixture
def vtt_payload() -> str:
    return load_fixture("track_en.vtt")
