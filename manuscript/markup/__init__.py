"""
Markup handling for notion content.

Two encodings reach the renderers:
- lightweight markup (**bold**, *italic*, __underline__, ~~strike~~)
- editor rich markup (HTML with math, note and hint annotations)

Rich markup is normalized first, then parsed like lightweight markup.
"""

from typing import List

from ..models import TextSegment
from .inline_parser import parse_styled_segments, to_plain_text
from .rich_normalizer import (
    FORMULA_PLACEHOLDER_PATTERN, normalize_rich_markup, looks_like_rich_markup,
)


def segments_for_content(content: str) -> List[TextSegment]:
    """Styled segments for a notion, whatever its encoding."""
    if not looks_like_rich_markup(content):
        return parse_styled_segments(content)

    # Formula placeholders are emitted verbatim: LaTeX uses *, _ and ~
    text = normalize_rich_markup(content)
    segments: List[TextSegment] = []
    pos = 0
    for match in FORMULA_PLACEHOLDER_PATTERN.finditer(text):
        segments.extend(parse_styled_segments(text[pos:match.start()]))
        segments.append(TextSegment.plain(match.group(0)))
        pos = match.end()
    segments.extend(parse_styled_segments(text[pos:]))
    return segments


__all__ = [
    'parse_styled_segments',
    'to_plain_text',
    'normalize_rich_markup',
    'looks_like_rich_markup',
    'segments_for_content',
]
