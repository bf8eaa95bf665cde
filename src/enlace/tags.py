"""HTML tag skipping for the scanner.

The scanner does not parse HTML. Whenever it meets ``<`` it jumps past the
tag, and when the tag opens one of the skip tags (``a``, ``pre``, ``code``
by default) it jumps past the whole element so existing links and code are
never linked again.

Tag names are compared byte for byte (case-sensitive), matching the
behaviour callers have relied on with the default lower-case skip list.

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from enlace.charsets import GT, LT, SLASH, SPACE


class TagKind(Enum):
    """Result of probing ``<`` for a specific tag name."""

    NONE = auto()
    OPEN = auto()  # <name> or <name attr...>
    CLOSE = auto()  # </name>


def classify_tag(data: bytes | bytearray, pos: int, name: bytes) -> TagKind:
    """Check whether the tag at ``pos`` opens or closes ``name``.

    The name has to be followed by whitespace or ``>``, so ``<abbr>`` is
    not an ``a`` tag.
    """
    size = len(data)
    if size - pos < 3 or data[pos] != LT:
        return TagKind.NONE

    i = pos + 1
    closing = data[i] == SLASH
    if closing:
        i += 1

    if data[i : i + len(name)] != name:
        return TagKind.NONE
    i += len(name)

    if i >= size:
        return TagKind.NONE
    if data[i] in SPACE or data[i] == GT:
        return TagKind.CLOSE if closing else TagKind.OPEN
    return TagKind.NONE


def skip_tag(data: bytes | bytearray, pos: int, skip_tags: Iterable[bytes]) -> int:
    """Return the offset just past the tag (or skipped element) at ``pos``.

    Args:
        data: Text buffer
        pos: Offset of a ``<``
        skip_tags: Encoded names of elements whose content is skipped

    Returns:
        Offset to resume scanning from. Unterminated tags and elements
        run to the end of the buffer.
    """
    size = len(data)
    gt = data.find(b">", pos)
    if gt == -1:
        return size

    for name in skip_tags:
        if classify_tag(data, pos, name) is TagKind.OPEN:
            break
    else:
        return gt + 1

    i = gt + 1
    while True:
        lt = data.find(b"<", i)
        if lt == -1:
            return size
        if classify_tag(data, lt, name) is TagKind.CLOSE:
            gt = data.find(b">", lt)
            return size if gt == -1 else gt + 1
        i = lt + 1
