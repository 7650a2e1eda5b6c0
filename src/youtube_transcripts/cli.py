#!/usr/bin/env python3
"""
Command-line interface for fetching a single video transcript.

Usage:
    youtube-transcripts VIDEO_ID [--lang en] [--prefer en,en-US] [--timeout 8] [--json]
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from .core import TranscriptAcquirer, TranscriptOptions, setup_logging
from .core.exceptions import TranscriptError
from .models import TranscriptResult
from .utils.logging import get_logger

logger = get_logger("cli")

EXIT_OK = 0
EXIT_NO_TRANSCRIPT = 1
EXIT_USAGE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Fetch the transcript of a YouTube video")
    parser.add_argument("video_id", help="YouTube video ID")
    parser.add_argument("--lang", help="Language for the direct fetch (default: TRANSCRIPT_LANGUAGE or en)")
    parser.add_argument("--prefer", help="Comma-separated preferred languages for track selection")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--format", dest="caption_format", help="Caption format requested from the service")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> TranscriptOptions:
    preferred = None
    if args.prefer:
        preferred = tuple(code.strip() for code in args.prefer.split(",") if code.strip())
    return TranscriptOptions(
        preferred_language=args.lang,
        preferred_languages=preferred,
        request_timeout=args.timeout,
        caption_format=args.caption_format,
    )


def render(result: TranscriptResult, as_json: bool) -> str:
    if as_json:
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
    if result.success:
        return result.text
    return f"No transcript available ({result.outcome.value})"


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging()

    try:
        result = asyncio.run(TranscriptAcquirer().acquire_transcript(args.video_id, build_options(args)))
    except TranscriptError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    output = render(result, args.json)
    if result.success or args.json:
        print(output)
    else:
        print(output, file=sys.stderr)
    return EXIT_OK if result.success else EXIT_NO_TRANSCRIPT


if __name__ == "__main__":
    sys.exit(main())
