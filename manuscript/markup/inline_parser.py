"""
Inline style parser - lightweight markup to styled text segments.

Supported markers (non-nesting, matched left-to-right, shortest match):
- **bold**
- *italic*
- __underline__
- ~~strikethrough~~

Anything else is literal text. An unterminated marker is kept as literal
characters; parsing never fails.
"""

import re
from typing import List, Tuple

from ..models import TextSegment

# Order matters: when two markers could start at the same position the
# earlier entry wins (** before *).
MARKER_PATTERNS: List[Tuple[str, re.Pattern]] = [
    ('bold', re.compile(r'\*\*(.+?)\*\*')),
    ('italic', re.compile(r'\*(.+?)\*')),
    ('underline', re.compile(r'__(.+?)__')),
    ('strikethrough', re.compile(r'~~(.+?)~~')),
]

MARKER_CHARS = frozenset('*_~')


def parse_styled_segments(markup: str) -> List[TextSegment]:
    """
    Parse lightweight markup into styled segments.

    Literal runs are trimmed and dropped when empty; styled text is kept
    as written. Adjacent segments are never merged.

    Args:
        markup: Text using the four inline markers

    Returns:
        Segments in source order
    """
    segments: List[TextSegment] = []
    if not markup:
        return segments

    literal: List[str] = []
    pos = 0
    length = len(markup)

    while pos < length:
        token = _match_marker(markup, pos) if markup[pos] in MARKER_CHARS else None

        if token is None:
            literal.append(markup[pos])
            pos += 1
            continue

        _flush_literal(literal, segments)
        style, text, end = token
        segments.append(TextSegment(text=text, **{style: True}))
        pos = end

    _flush_literal(literal, segments)
    return segments


def to_plain_text(markup: str) -> str:
    """
    Strip every marker pair without segmenting.

    Used where styling is irrelevant (TOC entries, titles, previews).
    """
    text = markup or ""
    for _, pattern in MARKER_PATTERNS:
        text = pattern.sub(r'\1', text)
    return text


def _match_marker(markup: str, pos: int):
    """Try each marker at pos in priority order -> (style, text, end) or None."""
    for style, pattern in MARKER_PATTERNS:
        match = pattern.match(markup, pos)
        if match:
            return style, match.group(1), match.end()
    return None


def _flush_literal(buffer: List[str], segments: List[TextSegment]):
    if not buffer:
        return
    text = ''.join(buffer).strip()
    buffer.clear()
    if text:
        segments.append(TextSegment.plain(text))
