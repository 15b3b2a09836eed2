"""
Unit tests for manuscript/markup/inline_parser.py
"""

from manuscript.markup import parse_styled_segments, to_plain_text
from manuscript.models import TextSegment


def _styles(segment: TextSegment):
    return (segment.bold, segment.italic, segment.underline, segment.strikethrough)


class TestParseStyledSegments:
    """Marker recognition and ordering."""

    def test_empty_input(self):
        assert parse_styled_segments("") == []
        assert parse_styled_segments(None) == []

    def test_plain_text_is_one_segment(self):
        assert parse_styled_segments("Hello") == [TextSegment.plain("Hello")]

    def test_each_marker(self):
        cases = {
            "**b**": (True, False, False, False),
            "*i*": (False, True, False, False),
            "__u__": (False, False, True, False),
            "~~s~~": (False, False, False, True),
        }
        for markup, expected in cases.items():
            segments = parse_styled_segments(markup)
            assert len(segments) == 1, markup
            assert _styles(segments[0]) == expected, markup

    def test_bold_wins_over_italic(self):
        segments = parse_styled_segments("**x**")
        assert segments == [TextSegment(text="x", bold=True)]

    def test_adjacent_markers_not_merged(self):
        segments = parse_styled_segments("**a** *b*")
        assert segments == [
            TextSegment(text="a", bold=True),
            TextSegment(text="b", italic=True),
        ]

    def test_back_to_back_markers(self):
        segments = parse_styled_segments("**a**__b__")
        assert [s.text for s in segments] == ["a", "b"]
        assert segments[0].bold and segments[1].underline

    def test_source_order_preserved(self):
        segments = parse_styled_segments("Hello **world** and ~~more~~ text")
        assert [s.text for s in segments] == ["Hello", "world", "and", "more", "text"]
        assert [s.has_style for s in segments] == [False, True, False, True, False]


class TestLiteralHandling:
    """Trimming and unterminated markers."""

    def test_literal_runs_are_trimmed(self):
        segments = parse_styled_segments("  Hello   **x**   ")
        assert segments[0] == TextSegment.plain("Hello")
        assert len(segments) == 2

    def test_styled_text_kept_verbatim(self):
        segments = parse_styled_segments("** spaced **")
        assert segments == [TextSegment(text=" spaced ", bold=True)]

    def test_whitespace_only_literal_dropped(self):
        assert parse_styled_segments("   ") == []

    def test_unterminated_bold_is_literal(self):
        assert parse_styled_segments("**oops") == [TextSegment.plain("**oops")]

    def test_unterminated_italic_is_literal(self):
        assert parse_styled_segments("a *b") == [TextSegment.plain("a *b")]

    def test_marker_does_not_span_newline(self):
        segments = parse_styled_segments("*a\nb*")
        assert segments == [TextSegment.plain("*a\nb*")]

    def test_lone_marker_chars(self):
        segments = parse_styled_segments("5 * 3 = 15 ~ approx _x")
        assert len(segments) == 1
        assert segments[0].text == "5 * 3 = 15 ~ approx _x"


class TestToPlainText:
    """Marker stripping without segmentation."""

    def test_strips_all_markers(self):
        assert to_plain_text("**a** *b* __c__ ~~d~~") == "a b c d"

    def test_keeps_whitespace(self):
        assert to_plain_text("  **a**  ") == "  a  "

    def test_unterminated_kept(self):
        assert to_plain_text("**a") == "**a"

    def test_empty(self):
        assert to_plain_text("") == ""
        assert to_plain_text(None) == ""
