"""Protocol whitelist for URL matches.

A URL match is only kept when the scheme in front of ``://`` is one of a
small set of known-safe prefixes. Anything else (``javascript:``,
``data:``, made-up schemes) is left as plain text.

Thread Safety:
SAFE_PREFIXES is a module-level tuple; is_safe_prefix is pure.

"""

from __future__ import annotations

from enlace.charsets import ALNUM

SAFE_PREFIXES: tuple[bytes, ...] = (b"/", b"http://", b"https://", b"ftp://", b"mailto:")


def is_safe_prefix(link: bytes | bytearray | str, size: int | None = None) -> bool:
    """Check whether ``link`` starts with a whitelisted protocol.

    The prefix comparison is ASCII case-insensitive, the link must be
    longer than the prefix, and the byte right after the prefix must be
    alphanumeric.

    Args:
        link: Candidate link, starting at its first byte
        size: Number of leading bytes to consider (default: all of them)

    Returns:
        True if the link begins with a safe prefix

    Examples:
        >>> is_safe_prefix(b"HTTP://x")
        True
        >>> is_safe_prefix(b"http://")
        False
        >>> is_safe_prefix(b"httpx")
        False
    """
    if isinstance(link, str):
        link = link.encode("utf-8")
    size = len(link) if size is None else min(size, len(link))

    for prefix in SAFE_PREFIXES:
        n = len(prefix)
        if size > n and link[:n].lower() == prefix and link[n] in ALNUM:
            return True
    return False
