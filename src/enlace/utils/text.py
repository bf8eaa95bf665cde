"""Text helpers for link markup.

Example:
    >>> from enlace.utils.text import escape_href
    >>> escape_href(b'http://x.com/"a"')
    b'http://x.com/&quot;a&quot;'
"""

from __future__ import annotations


def escape_href(url: bytes) -> bytes:
    """Escape a matched URL for use inside a double-quoted href.

    Input text is expected to be escaped HTML already, so only the
    attribute delimiter is replaced; ``&`` and friends pass through
    untouched to avoid double escaping.

    Args:
        url: Raw link bytes

    Returns:
        Bytes safe to place between ``href="`` and ``"``

    Examples:
        >>> escape_href(b"http://x.com/?a=1&amp;b=2")
        b'http://x.com/?a=1&amp;b=2'
    """
    if not url:
        return b""
    return url.replace(b'"', b"&quot;")
