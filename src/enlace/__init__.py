"""
enlace — autolinking for plain text and escaped HTML

Finds bare URLs, ``www.`` hostnames and email addresses in a block of text
and wraps them in ``<a>`` tags, without a full HTML or URI parser. Link
boundaries are decided by a handful of byte-level heuristics: a protocol
whitelist, a hostname scan, and trailing punctuation and bracket trimming.
Zero runtime dependencies.

Quick Start:
    >>> from enlace import auto_link
    >>> auto_link("Docs live at https://example.com/docs.")
    'Docs live at <a href="https://example.com/docs">https://example.com/docs</a>.'

    >>> # Only emails, custom attributes
    >>> auto_link("ping bob@example.com", mode="email_addresses", link_attr='class="mail"')
    'ping <a href="mailto:bob@example.com" class="mail">bob@example.com</a>'

Low-level matchers:
    >>> from enlace import match_url
    >>> data = b"see http://example.com/foo_(bar))"
    >>> match_url(data, len(data), data.index(b":"))
    Span(start=4, end=32)
"""

from enlace.config import (
    DEFAULT_SKIP_TAGS,
    LinkConfig,
    get_link_config,
    link_config_context,
    reset_link_config,
    set_link_config,
)
from enlace.delimiters import trim_delimiters
from enlace.domain import check_domain
from enlace.errors import EnlaceError, LinkModeError, LinkTextError
from enlace.flags import AutolinkFlags, LinkKind, LinkMode
from enlace.matchers import match_email, match_url, match_www
from enlace.safety import SAFE_PREFIXES, is_safe_prefix
from enlace.scanner import AutolinkMatch, auto_link, find_links
from enlace.span import Span

__version__ = "0.1.0"

# Flag constant under the name hosts have historically used
AUTOLINK_SHORT_DOMAINS = AutolinkFlags.SHORT_DOMAINS

__all__ = [
    # Scanning
    "auto_link",
    "find_links",
    "AutolinkMatch",
    # Matchers
    "match_email",
    "match_url",
    "match_www",
    "check_domain",
    "trim_delimiters",
    "is_safe_prefix",
    "SAFE_PREFIXES",
    "Span",
    # Flags and modes
    "AUTOLINK_SHORT_DOMAINS",
    "AutolinkFlags",
    "LinkKind",
    "LinkMode",
    # Configuration
    "DEFAULT_SKIP_TAGS",
    "LinkConfig",
    "get_link_config",
    "link_config_context",
    "reset_link_config",
    "set_link_config",
    # Errors
    "EnlaceError",
    "LinkModeError",
    "LinkTextError",
    "__version__",
]
