"""
Rich markup normalizer - editor HTML to parser-ready text.

The editor serializes notions as HTML with three block annotations:

    <span data-type="inline-math" data-latex="x^2"></span>
    <div data-type="block-math" data-latex="\\frac{a}{b}"></div>
    <div data-type="note"><div data-type="note-header">Note</div>...</div>
    <div data-type="discovery-hint" data-title="Astuce">
        <div data-type="hint-header">...</div>...
    </div>

Rules run in a fixed order. Annotation blocks are replaced before the
generic tag stripping so their content survives. Inline formatting tags are
rewritten to the markers understood by inline_parser.

Never raises: malformed markup degrades to best-effort text.
"""

import re

from config.logging_config import get_logger

logger = get_logger(__name__)


TAG_PATTERN = re.compile(r'<\s*/?\s*[a-zA-Z][^>]*>')

# Tags the editor emits; other <...> text in a notion is literal
EDITOR_TAG_PATTERN = re.compile(
    r'<\s*/?\s*(?:p|h[1-6]|ul|ol|li|br|strong|em|b|i|u|s|del|strike)\s*/?>'
    r'|<\s*/?\s*(?:p|h[1-6]|ul|ol|li|br|strong|em|b|i|u|s|del|strike)\s[^>]*>'
    r'|<\s*(?:span|div)\b[^>]*\bdata-type\s*=[^>]*>',
    re.IGNORECASE,
)

# Output of the math rule; its text must not be re-read as inline markers
FORMULA_PLACEHOLDER_PATTERN = re.compile(r'\[Formule: (?:[^\[\]\n]|\[[^\[\]\n]*\])*\]')

# 1. Math (inline or block, paired or self-closing)
MATH_PATTERN = re.compile(
    r'<(?P<tag>span|div)\b(?P<attrs>[^>]*\bdata-type\s*=\s*["\'](?:inline|block)-math["\'][^>]*?)'
    r'(?:/>|>(?P<body>.*?)</(?P=tag)\s*>)',
    re.DOTALL | re.IGNORECASE,
)
FORMULA_ATTR_PATTERN = re.compile(
    r'\bdata-(?:latex|formula)\s*=\s*(?:"(?P<dq>[^"]*)"|\'(?P<sq>[^\']*)\')',
    re.IGNORECASE,
)

# 2. Note blocks
NOTE_HEADER_PATTERN = re.compile(
    r'<div\b[^>]*\bdata-type\s*=\s*["\']note-header["\'][^>]*>.*?</div\s*>',
    re.DOTALL | re.IGNORECASE,
)
NOTE_PATTERN = re.compile(
    r'<div\b[^>]*\bdata-type\s*=\s*["\']note["\'][^>]*>(?P<body>.*?)</div\s*>',
    re.DOTALL | re.IGNORECASE,
)

# 3. Discovery hints
HINT_HEADER_PATTERN = re.compile(
    r'<div\b[^>]*\bdata-type\s*=\s*["\']hint-header["\'][^>]*>.*?</div\s*>',
    re.DOTALL | re.IGNORECASE,
)
HINT_PATTERN = re.compile(
    r'<div\b(?P<attrs>[^>]*\bdata-type\s*=\s*["\']discovery-hint["\'][^>]*)>(?P<body>.*?)</div\s*>',
    re.DOTALL | re.IGNORECASE,
)
TITLE_ATTR_PATTERN = re.compile(
    r'\bdata-title\s*=\s*(?:"(?P<dq>[^"]*)"|\'(?P<sq>[^\']*)\')',
    re.IGNORECASE,
)

# 4. Structure
INLINE_MARKERS = [
    (re.compile(r'</?\s*(?:strong|b)(?:\s[^>]*)?>', re.IGNORECASE), '**'),
    (re.compile(r'</?\s*(?:em|i)(?:\s[^>]*)?>', re.IGNORECASE), '*'),
    (re.compile(r'</?\s*u(?:\s[^>]*)?>', re.IGNORECASE), '__'),
    (re.compile(r'</?\s*(?:s|del|strike)(?:\s[^>]*)?>', re.IGNORECASE), '~~'),
]
BLOCK_PATTERN = re.compile(
    r'<(?P<tag>h[1-6]|p)\b[^>]*>(?P<body>.*?)</(?P=tag)\s*>',
    re.DOTALL | re.IGNORECASE,
)
LIST_ITEM_PATTERN = re.compile(r'<li\b[^>]*>(?P<body>.*?)</li\s*>', re.DOTALL | re.IGNORECASE)
BREAK_PATTERN = re.compile(r'<br\s*/?>', re.IGNORECASE)

# 5. Entities (&amp; last so "&amp;lt;" decodes to "&lt;", not "<")
ENTITIES = [
    ('&nbsp;', ' '),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
    ('&amp;', '&'),
]

EXCESS_NEWLINES = re.compile(r'\n{3,}')
ANNOTATION_LEFTOVER = re.compile(
    r'\bdata-type\s*=\s*["\'](?:inline-math|block-math|note|discovery-hint)["\']',
    re.IGNORECASE,
)


def looks_like_rich_markup(text: str) -> bool:
    """True when the content carries HTML tags rather than plain markers."""
    return bool(text) and EDITOR_TAG_PATTERN.search(text) is not None


def normalize_rich_markup(html: str) -> str:
    """
    Convert editor HTML into plain annotated text.

    Args:
        html: Rich markup content

    Returns:
        Text using [Formule: ...], [NOTE]...[/NOTE], [INDICE: ...]...[/INDICE]
        annotations and inline_parser markers
    """
    if not html:
        return ""

    text = html
    text = MATH_PATTERN.sub(_replace_math, text)
    text = _replace_notes(text)
    text = _replace_hints(text)

    if ANNOTATION_LEFTOVER.search(text):
        logger.debug("Unclosed annotation block, falling back to tag stripping")

    text = _convert_structure(text)
    text = _strip_tags(text)
    return _collapse_whitespace(text)


def _attr_value(pattern: re.Pattern, attrs: str) -> str:
    match = pattern.search(attrs or "")
    if not match:
        return ""
    value = match.group('dq')
    if value is None:
        value = match.group('sq')
    return value or ""


def _replace_math(match: re.Match) -> str:
    formula = _attr_value(FORMULA_ATTR_PATTERN, match.group('attrs'))
    if not formula and match.group('body'):
        # Some serializers put the formula in the element body
        formula = TAG_PATTERN.sub('', match.group('body')).strip()
    return f"[Formule: {formula}]"


def _replace_notes(text: str) -> str:
    # A header is itself a <div>: left in place it would end the
    # non-greedy block match at its own closing tag.
    text = NOTE_HEADER_PATTERN.sub('', text)
    return NOTE_PATTERN.sub(
        lambda m: f"\n[NOTE]\n{m.group('body')}\n[/NOTE]\n",
        text,
    )


def _replace_hints(text: str) -> str:
    def replace(match: re.Match) -> str:
        title = _attr_value(TITLE_ATTR_PATTERN, match.group('attrs'))
        return f"\n[INDICE: {title}]\n{match.group('body')}\n[/INDICE]\n"

    text = HINT_HEADER_PATTERN.sub('', text)
    return HINT_PATTERN.sub(replace, text)


def _convert_structure(text: str) -> str:
    for pattern, marker in INLINE_MARKERS:
        text = pattern.sub(marker, text)

    text = BLOCK_PATTERN.sub(lambda m: f"{m.group('body')}\n", text)
    text = LIST_ITEM_PATTERN.sub(lambda m: f"• {m.group('body')}\n", text)
    text = BREAK_PATTERN.sub('\n', text)
    return text


def _strip_tags(text: str) -> str:
    text = TAG_PATTERN.sub('', text)
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def _collapse_whitespace(text: str) -> str:
    lines = [line.strip() for line in text.split('\n')]
    text = '\n'.join(lines)
    text = EXCESS_NEWLINES.sub('\n\n', text)
    return text.strip()
