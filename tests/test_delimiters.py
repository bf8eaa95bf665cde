"""Tests for trailing delimiter trimming."""

import pytest

from enlace import Span, trim_delimiters


def _trim(text: str) -> str | None:
    """Trim a span covering the whole text and return what is left of it."""
    data = text.encode("utf-8")
    span = trim_delimiters(data, Span(0, len(data)))
    if span is None:
        return None
    assert span.start == 0
    return span.slice(data).decode("utf-8")


class TestTrailingPunctuation:
    """Sentence punctuation at the end of a link is not part of it."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("http://example.com.", "http://example.com"),
            ("http://example.com,", "http://example.com"),
            ("http://example.com?!.,:", "http://example.com"),
            ("http://example.com/?q=1", "http://example.com/?q=1"),
            ("http://example.com/a.b", "http://example.com/a.b"),
        ],
    )
    def test_punctuation(self, text: str, expected: str) -> None:
        assert _trim(text) == expected

    def test_only_punctuation_collapses(self) -> None:
        assert _trim(".,!?:") is None


class TestCharacterReferences:
    """A trailing ``;`` may close an HTML character reference."""

    def test_entity_dropped_entirely(self) -> None:
        assert _trim("http://example.com&amp;") == "http://example.com"

    def test_entity_then_punctuation(self) -> None:
        assert _trim("http://example.com&quot;.") == "http://example.com"

    def test_plain_semicolon_dropped(self) -> None:
        assert _trim("http://example.com/a;") == "http://example.com/a"

    def test_bare_ampersand_keeps_ampersand(self) -> None:
        """``&;`` is not a reference: only the ``;`` goes."""
        assert _trim("http://x.com/&;") == "http://x.com/&"

    def test_does_not_look_behind_span_start(self) -> None:
        data = b"&amp;"
        span = trim_delimiters(data, Span(1, 5))
        assert span == Span(1, 4)

    def test_lone_semicolon_collapses(self) -> None:
        assert _trim(";") is None


class TestEmbeddedTag:
    """An HTML tag inside the text ends the link."""

    def test_truncates_at_tag(self) -> None:
        assert _trim("http://example.com<b>bold</b>") == "http://example.com"

    def test_truncates_then_trims(self) -> None:
        assert _trim("http://example.com.</p>") == "http://example.com"

    def test_tag_at_start_collapses(self) -> None:
        assert _trim("<br>") is None


class TestBracketBalance:
    """A trailing closer is kept only when its opener is inside the link."""

    def test_unmatched_paren_dropped(self) -> None:
        assert _trim("http://example.com/foo)") == "http://example.com/foo"

    def test_matched_paren_kept(self) -> None:
        assert _trim("http://example.com/foo_(bar)") == "http://example.com/foo_(bar)"

    def test_extra_paren_dropped_once(self) -> None:
        assert _trim("http://example.com/foo_(bar))") == "http://example.com/foo_(bar)"

    def test_opener_outside_span(self) -> None:
        data = b"(see http://example.com/foo)"
        span = trim_delimiters(data, Span(5, len(data)))
        assert span is not None
        assert span.slice(data) == b"http://example.com/foo"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("http://x.com/[a]", "http://x.com/[a]"),
            ("http://x.com/a]", "http://x.com/a"),
            ("http://x.com/{a}", "http://x.com/{a}"),
            ("http://x.com/a}", "http://x.com/a"),
        ],
    )
    def test_other_brackets(self, text: str, expected: str) -> None:
        assert _trim(text) == expected

    def test_trailing_quote_always_dropped(self) -> None:
        """Quotes open and close with the same byte, so they never balance."""
        assert _trim("http://x.com/'") == "http://x.com/"
        assert _trim('http://x.com/"a"') == 'http://x.com/"a'

    def test_punctuation_then_bracket(self) -> None:
        assert _trim("http://x.com/a).") == "http://x.com/a"

    def test_bracket_rule_fires_once(self) -> None:
        """Punctuation exposed by the bracket rule stays."""
        assert _trim("http://x.com/a.)") == "http://x.com/a."

    def test_lone_closer_collapses(self) -> None:
        assert _trim(")") is None


class TestTrimmerContract:
    """Span-level guarantees."""

    def test_never_grows(self) -> None:
        data = b"http://example.com/path and more"
        span = trim_delimiters(data, Span(0, 23))
        assert span == Span(0, 23)

    @pytest.mark.parametrize(
        "text",
        [
            "http://example.com.",
            "http://example.com&amp;",
            "http://example.com/foo_(bar))",
            "http://example.com/foo)",
            "www.example.com/?a=1;",
            "a.b@example.com,",
        ],
    )
    def test_idempotent(self, text: str) -> None:
        data = text.encode("utf-8")
        once = trim_delimiters(data, Span(0, len(data)))
        assert once is not None
        assert trim_delimiters(data, once) == once

    def test_empty_span(self) -> None:
        assert trim_delimiters(b"abc", Span(1, 1)) is None
