"""Caption track scoring and selection."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from ..models import CaptionTrack, TrackKind
from ..utils.logging import get_logger
from .config import ScoringWeights

logger = get_logger("track_selector")


@dataclass(frozen=True)
class ScoredTrack:
    """A caption track paired with its score and listing position."""
    track: CaptionTrack
    score: int
    position: int


def _normalize_code(code: str) -> str:
    return code.strip().replace("_", "-").lower()


def _primary_subtag(code: str) -> str:
    return _normalize_code(code).split("-")[0]


class TrackSelector:
    """
    Pick the caption track closest to a usable transcript in the preferred language.

    Score = language tier + authoring tier:

    * language exactly in the preferred set -> ``exact_language``
    * same primary subtag as a preferred language -> ``primary_subtag``
    * anything else -> ``other_language``
    * no kind (or authored) -> ``no_kind``, automatic -> ``automatic_kind``, other kinds -> ``other_kind``

    Ties go to the track listed first.
    """

    def __init__(self, preferred_languages: Iterable[str], weights: Optional[ScoringWeights] = None):
        self.preferred_languages = tuple(preferred_languages)
        self.weights = weights or ScoringWeights()
        self._exact = {_normalize_code(code) for code in self.preferred_languages if code and code.strip()}
        self._primary = {_primary_subtag(code) for code in self.preferred_languages if code and code.strip()}

    def language_score(self, language_code: str) -> int:
        code = _normalize_code(language_code)
        if code in self._exact:
            return self.weights.exact_language
        if _primary_subtag(code) in self._primary:
            return self.weights.primary_subtag
        return self.weights.other_language

    def kind_score(self, kind: Optional[str]) -> int:
        if not kind or kind == TrackKind.AUTHORED:
            return self.weights.no_kind
        if kind == TrackKind.AUTOMATIC:
            return self.weights.automatic_kind
        return self.weights.other_kind

    def score(self, track: CaptionTrack) -> int:
        """Score one track; depends only on its language code and kind."""
        return self.language_score(track.language_code) + self.kind_score(track.kind)

    def rank(self, tracks: Sequence[CaptionTrack]) -> List[ScoredTrack]:
        """Return all tracks scored, best first; equal scores keep listing order."""
        scored = [ScoredTrack(track, self.score(track), position) for position, track in enumerate(tracks)]
        # sorted() is stable, so equal scores stay in listing order
        return sorted(scored, key=lambda candidate: -candidate.score)

    def select(self, tracks: Sequence[CaptionTrack]) -> Optional[CaptionTrack]:
        """
        Select the best track.

        Args:
            tracks: Tracks in listing order

        Returns:
            The winning CaptionTrack, or None if there are no tracks
        """
        if not tracks:
            return None

        ranking = self.rank(tracks)
        for candidate in ranking:
            logger.debug(f"Track score {candidate.score:>4} #{candidate.position} {candidate.track.describe()}")

        best = ranking[0]
        logger.info(f"Selected track {best.track.describe()} with score {best.score} of {len(tracks)} candidate(s)")
        return best.track

    def is_preferred_language(self, language_code: Optional[str]) -> bool:
        """Check if a language code is in the preferred set (exact match)."""
        return bool(language_code) and _normalize_code(language_code) in self._exact
