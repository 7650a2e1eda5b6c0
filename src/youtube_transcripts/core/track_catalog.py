"""
Caption track catalog parsing.

The listing endpoint (``type=list``) answers with a loosely structured
markup document such as::

    <transcript_list docid="123">
      <track id="0" name="" lang_code="en" lang_original="English" lang_default="true"/>
      <track id="1" name="" lang_code="fr" kind="asr"/>
    </transcript_list>

The shape is undocumented, so the parser scans for ``<track ...>`` elements
and reads whatever attributes it can instead of validating a grammar.
Anything it cannot read is skipped.
"""

import html
import re
from typing import Dict, List, Optional

from ..models import CaptionTrack, TrackKind
from ..utils.logging import get_logger

logger = get_logger("track_catalog")

# One track element, self-closing or not; never spans another tag
_TRACK_RE = re.compile(r"<track\b([^<>]*)>", re.I)
_ATTR_RE = re.compile(
    r"""([A-Za-z_:][-\w:.]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'<>=`]+))"""
)

LANGUAGE_ATTRIBUTES = ("lang_code", "languagecode", "lang")
NAME_ATTRIBUTES = ("name",)
KIND_ATTRIBUTES = ("kind",)
VARIANT_ATTRIBUTES = ("id", "vss_id")


def parse_attributes(fragment: str) -> Dict[str, str]:
    """
    Extract key/value attributes from the inside of one element.

    Keys are lower-cased, values HTML-unescaped. A key appearing twice keeps
    its first value.
    """
    attributes: Dict[str, str] = {}
    for match in _ATTR_RE.finditer(fragment):
        key = match.group(1).lower()
        if key in attributes:
            continue
        value = next((g for g in match.group(2, 3, 4) if g is not None), "")
        attributes[key] = html.unescape(value)
    return attributes


def _first(attributes: Dict[str, str], keys) -> Optional[str]:
    for key in keys:
        if key in attributes:
            return attributes[key]
    return None


def track_from_attributes(attributes: Dict[str, str]) -> Optional[CaptionTrack]:
    """Build a CaptionTrack from parsed attributes, or None without a language code."""
    language_code = (_first(attributes, LANGUAGE_ATTRIBUTES) or "").strip()
    if not language_code:
        return None

    variant_id = (_first(attributes, VARIANT_ATTRIBUTES) or "").strip()
    return CaptionTrack(
        language_code=language_code,
        display_name=(_first(attributes, NAME_ATTRIBUTES) or "").strip(),
        kind=TrackKind.from_wire(_first(attributes, KIND_ATTRIBUTES)),
        variant_id=variant_id or None,
    )


def parse_track_catalog(document: Optional[str]) -> List[CaptionTrack]:
    """
    Parse a track listing document into caption tracks, preserving source order.

    Args:
        document: Raw listing body (may be empty or None)

    Returns:
        List of CaptionTrack; empty when the document lists no usable tracks
    """
    if not document:
        return []

    tracks: List[CaptionTrack] = []
    skipped = 0
    for match in _TRACK_RE.finditer(document):
        track = track_from_attributes(parse_attributes(match.group(1)))
        if track is None:
            skipped += 1
            continue
        tracks.append(track)

    if skipped:
        logger.debug(f"Skipped {skipped} track element(s) without a language code")
    logger.debug(f"Parsed {len(tracks)} caption track(s): [{', '.join(t.describe() for t in tracks)}]")
    return tracks
