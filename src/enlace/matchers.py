"""Typed link matchers.

Each matcher probes one trigger position supplied by the scanner:

- match_url: a ``:`` that may be the middle of ``scheme://host``
- match_www: the first ``w`` of a ``www.`` hostname
- match_email: the ``@`` of an email address

A matcher builds a provisional span, finds the hostname end (URL and www
cases), extends the span to the next whitespace, then hands it to
trim_delimiters(). The result is a Span or None; "no link here" is the
normal outcome for most probes and is never an exception.

Positions outside ``[0, size)`` are a caller error and produce None
rather than an out-of-range read.

Thread Safety:
All matchers are pure functions over an immutable buffer.

"""

from __future__ import annotations

from collections.abc import Callable

from enlace.charsets import (
    ALNUM,
    ALPHA,
    AT,
    COLON,
    DASH,
    DOT,
    EMAIL_LOCAL,
    PUNCT,
    SLASH,
    SPACE,
    UNDERSCORE,
)
from enlace.delimiters import trim_delimiters
from enlace.domain import check_domain
from enlace.flags import AutolinkFlags, LinkKind
from enlace.safety import is_safe_prefix
from enlace.span import Span

Matcher = Callable[[bytes, int, int, int], "Span | None"]


def _extend_to_space(data: bytes | bytearray, size: int, end: int) -> int:
    while end < size and data[end] not in SPACE:
        end += 1
    return end


def match_www(
    data: bytes | bytearray, size: int, pos: int, flags: int = AutolinkFlags.NONE
) -> Span | None:
    """Match a ``www.`` hostname starting at ``pos``.

    The ``www.`` must not be glued to preceding text: the byte before it,
    if any, has to be punctuation or whitespace. The hostname always needs
    a dot, whatever ``flags`` says.

    Example:
        >>> match_www(b"see www.example.com.", 20, 4)
        Span(start=4, end=19)
    """
    size = min(size, len(data))
    if not 0 <= pos < size:
        return None

    if pos > 0 and data[pos - 1] not in PUNCT and data[pos - 1] not in SPACE:
        return None

    if size - pos < 4 or data[pos : pos + 4] != b"www.":
        return None

    end = check_domain(data, size, pos, allow_short=False)
    if end is None:
        return None

    end = _extend_to_space(data, size, end)
    return trim_delimiters(data, Span(pos, end))


def match_email(
    data: bytes | bytearray, size: int, pos: int, flags: int = AutolinkFlags.NONE
) -> Span | None:
    """Match an email address around the ``@`` at ``pos``.

    Walks back over the local part (alphanumerics and ``. + - _``), then
    forward over the domain (alphanumerics, ``-``, ``_``, ``.``). The
    address needs exactly one ``@`` and at least one dot after it that is
    not the last byte of the buffer.

    Example:
        >>> match_email(b"contact me at a.b@example.com.", 30, 17)
        Span(start=14, end=29)
    """
    size = min(size, len(data))
    if not 0 <= pos < size or data[pos] != AT:
        return None

    start = pos
    while start > 0 and data[start - 1] in EMAIL_LOCAL:
        start -= 1

    if start == pos:
        return None

    at_signs = 0
    dots = 0
    end = pos
    while end < size:
        c = data[end]
        if c in ALNUM:
            pass
        elif c == AT:
            at_signs += 1
        elif c == DOT and end < size - 1:
            dots += 1
        elif c != DASH and c != UNDERSCORE:
            break
        end += 1

    if end - pos < 2 or at_signs != 1 or dots == 0:
        return None

    return trim_delimiters(data, Span(start, end))


def match_url(
    data: bytes | bytearray, size: int, pos: int, flags: int = AutolinkFlags.NONE
) -> Span | None:
    """Match a ``scheme://host...`` URL whose colon sits at ``pos``.

    The scheme is recovered by walking back over letters from the colon
    and must be on the safe-prefix whitelist. With
    ``AutolinkFlags.SHORT_DOMAINS`` set, hostnames without a dot
    (``http://localhost``) are accepted.

    Example:
        >>> match_url(b"go to http://example.com/foo", 28, 10)
        Span(start=6, end=28)
    """
    size = min(size, len(data))
    if not 0 <= pos < size or data[pos] != COLON:
        return None

    if size - pos < 4 or data[pos + 1] != SLASH or data[pos + 2] != SLASH:
        return None

    allow_short = bool(flags & AutolinkFlags.SHORT_DOMAINS)
    end = check_domain(data, size, pos + 3, allow_short)
    if end is None:
        return None

    end = _extend_to_space(data, size, end)

    start = pos
    while start > 0 and data[start - 1] in ALPHA:
        start -= 1

    if not is_safe_prefix(data[start:size]):
        return None

    return trim_delimiters(data, Span(start, end))


# Dispatch table for the scanner
MATCHERS: dict[LinkKind, Matcher] = {
    LinkKind.URL: match_url,
    LinkKind.WWW: match_www,
    LinkKind.EMAIL: match_email,
}
