"""Hostname boundary detection."""

from __future__ import annotations

from enlace.charsets import ALNUM, DASH, DOT


def check_domain(
    data: bytes | bytearray, size: int, start: int, allow_short: bool
) -> int | None:
    """Find the end of the hostname starting at ``start``.

    The first byte must be alphanumeric. The scan then runs over
    alphanumerics, ``-`` and ``.`` and stops at the first other byte, or
    at ``size - 1``. This only establishes the hostname boundary; callers
    extend the link to the next whitespace afterwards.

    Args:
        data: Text buffer
        size: Number of valid bytes in ``data``
        start: Offset of the first hostname byte
        allow_short: Accept a hostname without any dot

    Returns:
        Offset where the hostname stops, or None if there is no valid
        hostname (no dot seen while ``allow_short`` is false)
    """
    if not 0 <= start < size or data[start] not in ALNUM:
        return None

    dots = 0
    i = start + 1
    while i < size - 1:
        c = data[i]
        if c == DOT:
            dots += 1
        elif c not in ALNUM and c != DASH:
            break
        i += 1

    if allow_short or dots > 0:
        return i
    return None
