"""
Caption payload text extraction.

The timedtext endpoint answers with WebVTT, XML timedtext or bare text
depending on the requested format. Callers only ever want the spoken words,
so every payload goes through normalize_caption_text before it leaves the
engine.
"""

import html
import re
from typing import List, Optional

_WHITESPACE_RE = re.compile(r"\s+")
_TAG_RE = re.compile(r"<[^>]*>")
_MARKUP_START_RE = re.compile(r"<[?!/]?[A-Za-z]")
_XML_CUE_RE = re.compile(r"<(text|p)\b[^>]*>(.*?)</\1\s*>", re.S | re.I)
_VTT_SKIPPED_BLOCKS = ("NOTE", "STYLE", "REGION")


def collapse_whitespace(text: Optional[str]) -> str:
    """Collapse internal whitespace runs to single spaces and trim the edges."""
    if not text:
        return ""
    text = text.replace("\u200b", "").replace("\ufeff", "")
    return _WHITESPACE_RE.sub(" ", text).strip()


def _strip_markup(fragment: str) -> str:
    return html.unescape(_TAG_RE.sub("", fragment))


def is_webvtt(payload: str) -> bool:
    return payload.lstrip("\ufeff \t\r\n").startswith("WEBVTT")


def is_xml_timedtext(payload: str) -> bool:
    """Any payload opening with a tag is markup, whether or not it holds cues."""
    return _MARKUP_START_RE.match(payload.lstrip("\ufeff \t\r\n")) is not None


def extract_webvtt_text(payload: str) -> List[str]:
    """
    Return the cue text lines of a WebVTT document in order.

    Header, NOTE/STYLE/REGION blocks, cue identifiers and timing lines are
    dropped. Auto-generated tracks roll captions up: a multi-line cue repeats
    the previous cue's last line as its first line. Only that carried-over
    line is skipped; repeats across single-line cues are kept.
    """
    lines: List[str] = []
    previous_last = ""
    blocks = re.split(r"\n\s*\n", payload.replace("\r\n", "\n").replace("\r", "\n"))

    for block in blocks:
        rows = [row for row in block.split("\n") if row.strip()]
        if not rows:
            continue
        first = rows[0].lstrip("\ufeff").strip()
        if first.split(" ")[0] in _VTT_SKIPPED_BLOCKS:
            continue

        timing_index = next((i for i, row in enumerate(rows) if "-->" in row), None)
        if timing_index is None:
            # Header or malformed block
            continue

        cue = [collapse_whitespace(_strip_markup(row)) for row in rows[timing_index + 1:]]
        cue = [text for text in cue if text]
        if not cue:
            continue

        carried_over = len(cue) > 1 and cue[0] == previous_last
        lines.extend(cue[1:] if carried_over else cue)
        previous_last = cue[-1]

    return lines


def extract_xml_text(payload: str) -> List[str]:
    """Return the text of every <text>/<p> element of an XML timedtext document."""
    texts = []
    for match in _XML_CUE_RE.finditer(payload):
        text = collapse_whitespace(_strip_markup(match.group(2)))
        if text:
            texts.append(text)
    return texts


def normalize_caption_text(payload: Optional[str]) -> str:
    """
    Turn a raw caption payload into a single line of transcript text.

    Args:
        payload: Response body from the timedtext endpoint (may be None)

    Returns:
        Whitespace-normalized transcript text, or "" when the payload carries
        no caption text at all
    """
    if not payload or not payload.strip():
        return ""

    if is_webvtt(payload):
        return collapse_whitespace(" ".join(extract_webvtt_text(payload)))

    if is_xml_timedtext(payload):
        return collapse_whitespace(" ".join(extract_xml_text(payload)))

    return collapse_whitespace(payload)
