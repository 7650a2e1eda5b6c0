"""
Configuration for the transcript acquisition engine.
All defaults can be overridden via environment variables (or a .env file).
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def _parse_list_env(env_var: str, default: List[str]) -> List[str]:
    """Parse a comma-separated environment variable into a list."""
    value = os.getenv(env_var)
    if value:
        return [item.strip() for item in value.split(',') if item.strip()]
    return default

def _int_env(env_var: str, default: int) -> int:
    value = os.getenv(env_var)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{env_var} must be an integer, got {value!r}")

def _float_env(env_var: str, default: float) -> float:
    value = os.getenv(env_var)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"{env_var} must be a number, got {value!r}")

# =============================================================================
# LOGGING
# =============================================================================

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    format: str = field(default_factory=lambda: os.getenv('LOG_FORMAT', '%(asctime)s [%(name)s] %(levelname)s: %(message)s'))
    date_format: str = field(default_factory=lambda: os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S'))

# =============================================================================
# TIMEDTEXT ENDPOINT
# =============================================================================

@dataclass
class TimedTextConfig:
    """Captioning service endpoint and request settings."""
    base_url: str = field(default_factory=lambda: os.getenv('TIMEDTEXT_BASE_URL', 'https://www.youtube.com/api/timedtext'))
    caption_format: str = field(default_factory=lambda: os.getenv('TIMEDTEXT_FORMAT', 'vtt'))
    # Per-call timeout in seconds; the service publishes no SLA
    request_timeout: float = field(default_factory=lambda: _float_env('TIMEDTEXT_TIMEOUT', 8.0))
    user_agent: str = field(default_factory=lambda: os.getenv(
        'TIMEDTEXT_USER_AGENT',
        'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124 Safari/537.36'
    ))

    def validate(self) -> None:
        if not self.base_url or not self.base_url.strip():
            raise ConfigurationError("TimedText base_url must not be empty")
        if not self.caption_format or not self.caption_format.strip():
            raise ConfigurationError("TimedText caption_format must not be empty")
        if self.request_timeout is None or self.request_timeout <= 0:
            raise ConfigurationError(f"TimedText request_timeout must be positive, got {self.request_timeout}")

# =============================================================================
# LANGUAGE PREFERENCES AND TRACK SCORING
# =============================================================================

@dataclass
class LanguageConfig:
    """Language preferences for the direct fetch and for track selection."""
    # Language requested by the zero-discovery direct fetch
    preferred_language: str = field(default_factory=lambda: os.getenv('TRANSCRIPT_LANGUAGE', 'en'))
    # Exact-match set used by the track scorer, defaulting to the direct-fetch language
    preferred_languages: List[str] = field(default_factory=lambda: _parse_list_env(
        'TRANSCRIPT_PREFERRED_LANGUAGES', [os.getenv('TRANSCRIPT_LANGUAGE', 'en')]
    ))

    def validate(self) -> None:
        if not self.preferred_language or not self.preferred_language.strip():
            raise ConfigurationError("preferred_language must not be empty")
        if not self.preferred_languages:
            raise ConfigurationError("preferred_languages must contain at least one language code")
        if any(not code or not code.strip() for code in self.preferred_languages):
            raise ConfigurationError("preferred_languages must not contain empty language codes")


@dataclass(frozen=True)
class ScoringWeights:
    """
    Heuristic track scoring weights.

    A track's score is its language tier plus its authoring tier. The
    defaults are not known to be optimal; override them via TRACK_SCORE_*.
    """
    exact_language: int = 200
    primary_subtag: int = 150
    other_language: int = 50
    no_kind: int = 20
    automatic_kind: int = 10
    other_kind: int = 0

    @classmethod
    def from_env(cls) -> "ScoringWeights":
        return cls(
            exact_language=_int_env('TRACK_SCORE_EXACT_LANGUAGE', cls.exact_language),
            primary_subtag=_int_env('TRACK_SCORE_PRIMARY_SUBTAG', cls.primary_subtag),
            other_language=_int_env('TRACK_SCORE_OTHER_LANGUAGE', cls.other_language),
            no_kind=_int_env('TRACK_SCORE_NO_KIND', cls.no_kind),
            automatic_kind=_int_env('TRACK_SCORE_AUTOMATIC_KIND', cls.automatic_kind),
            other_kind=_int_env('TRACK_SCORE_OTHER_KIND', cls.other_kind),
        )

# =============================================================================
# PER-CALL OPTIONS
# =============================================================================

@dataclass(frozen=True)
class TranscriptOptions:
    """Per-call overrides for acquire_transcript; None means "use the configured value"."""
    preferred_language: Optional[str] = None
    preferred_languages: Optional[Tuple[str, ...]] = None
    weights: Optional[ScoringWeights] = None
    request_timeout: Optional[float] = None
    caption_format: Optional[str] = None

# =============================================================================
# MAIN CONFIGURATION CLASS
# =============================================================================

@dataclass
class Config:
    """Main configuration class that aggregates all configuration sections."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    timedtext: TimedTextConfig = field(default_factory=TimedTextConfig)
    language: LanguageConfig = field(default_factory=LanguageConfig)
    weights: ScoringWeights = field(default_factory=ScoringWeights.from_env)

    def validate(self) -> None:
        """Raise ConfigurationError if any section is malformed."""
        self.timedtext.validate()
        self.language.validate()

    def with_options(self, options: Optional[TranscriptOptions]) -> "Config":
        """Return a copy of this configuration with per-call overrides applied."""
        if options is None:
            return self

        timedtext = self.timedtext
        if options.request_timeout is not None or options.caption_format is not None:
            timedtext = replace(
                timedtext,
                request_timeout=options.request_timeout if options.request_timeout is not None else timedtext.request_timeout,
                caption_format=options.caption_format or timedtext.caption_format,
            )

        language = self.language
        if options.preferred_languages is not None:
            language = replace(language, preferred_languages=list(options.preferred_languages))
        elif options.preferred_language is not None:
            # A new direct-fetch language also becomes the scorer's preference
            language = replace(language, preferred_languages=[options.preferred_language])
        if options.preferred_language is not None:
            language = replace(language, preferred_language=options.preferred_language)

        return replace(
            self,
            timedtext=timedtext,
            language=language,
            weights=options.weights or self.weights,
        )

# =============================================================================
# GLOBAL CONFIGURATION INSTANCE
# =============================================================================

config = Config()

def setup_logging():
    """Configure logging for the application entry points."""
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format,
        datefmt=config.logging.date_format
    )
