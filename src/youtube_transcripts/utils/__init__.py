"""
Utility modules for the transcript acquisition engine.
"""

from .logging import setup_logger, get_logger
from .text_utils import normalize_caption_text, collapse_whitespace

__all__ = [
    'setup_logger',
    'get_logger',
    'normalize_caption_text',
    'collapse_whitespace'
]
