"""Text scanner: finds link triggers and turns matches into markup.

The scanner walks the whole input and decides where to probe:

- ``@`` probes for an email address
- ``w`` probes for a ``www.`` hostname
- ``:`` probes for a ``scheme://`` URL
- ``<`` skips an HTML tag, or a whole element for the skip tags

Matching itself lives in enlace.matchers; this module only dispatches,
guards against overlapping links and assembles output.

Offsets:
Text is scanned as UTF-8 bytes. Spans reported by find_links() are byte
offsets into ``text.encode("utf-8")`` (or into the bytes passed in).
Link boundaries always fall on ASCII bytes, so slicing the encoded text
never splits a character.

Thread Safety:
Stateless. Per-call state lives in local variables; defaults come from
the ContextVar-backed LinkConfig.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import overload

from enlace.builder import ByteBuilder
from enlace.charsets import AT, COLON, LT
from enlace.config import get_link_config, normalize_skip_tags
from enlace.errors import LinkTextError
from enlace.flags import LinkKind, LinkMode
from enlace.matchers import MATCHERS
from enlace.span import Span
from enlace.tags import skip_tag
from enlace.utils.logger import get_logger
from enlace.utils.text import escape_href

logger = get_logger(__name__)

_WWW = ord("w")


def _trigger_pattern(mode: LinkMode) -> re.Pattern[bytes]:
    # "<" is active in every mode
    chars = b"<"
    if mode.urls:
        chars += b"w:"
    if mode.emails:
        chars += b"@"
    return re.compile(b"[" + re.escape(chars) + b"]")


_TRIGGER_PATTERNS: dict[LinkMode, re.Pattern[bytes]] = {
    mode: _trigger_pattern(mode) for mode in LinkMode
}

_TRIGGER_KINDS: dict[int, LinkKind] = {
    AT: LinkKind.EMAIL,
    _WWW: LinkKind.WWW,
    COLON: LinkKind.URL,
}


@dataclass(frozen=True, slots=True)
class AutolinkMatch:
    """A link found in the scanned text.

    Attributes:
        kind: Which matcher found it
        span: Byte offsets of the link in the UTF-8 text
        text: The matched link text (bytes that are not valid UTF-8 are
            decoded with surrogateescape, so the raw link is recoverable)

    """

    kind: LinkKind
    span: Span
    text: str

    @property
    def href(self) -> str:
        """Link target: the text, with ``http://`` or ``mailto:`` added when implied."""
        return self.kind.href_prefix + self.text


def _encode(text: str | bytes | bytearray) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def _scan(
    data: bytes,
    mode: LinkMode,
    skip_tags: tuple[bytes, ...],
    flags: int,
) -> Iterator[tuple[LinkKind, Span]]:
    size = len(data)
    pattern = _TRIGGER_PATTERNS[mode]
    last_end = 0
    pos = 0

    while pos < size:
        found = pattern.search(data, pos)
        if found is None:
            break
        pos = found.start()
        trigger = data[pos]

        if trigger == LT:
            resume = skip_tag(data, pos, skip_tags)
            logger.debug("Skipped tag at %d-%d", pos, resume)
            pos = resume
            continue

        kind = _TRIGGER_KINDS[trigger]
        span = MATCHERS[kind](data, size, pos, flags)
        if span is None:
            pos += 1
            continue

        if span.start < last_end:
            logger.debug(
                "Rejected %s match %s overlapping link ending at %d", kind.value, span, last_end
            )
            pos += 1
            continue

        yield kind, span
        pos = last_end = span.end


def _resolve(
    mode: LinkMode | str | None,
    skip_tags: Iterable[str] | None,
    flags: int | None,
) -> tuple[LinkMode, tuple[bytes, ...], int]:
    config = get_link_config()
    resolved_mode = LinkMode.coerce(mode) if mode is not None else config.mode
    tags = normalize_skip_tags(skip_tags) if skip_tags is not None else config.skip_tags
    resolved_flags = int(flags) if flags is not None else int(config.flags)
    return resolved_mode, tuple(t.encode("utf-8") for t in tags), resolved_flags


def find_links(
    text: str | bytes | bytearray,
    mode: LinkMode | str | None = None,
    skip_tags: Iterable[str] | None = None,
    flags: int | None = None,
) -> Iterator[AutolinkMatch]:
    """Yield every link in ``text``, left to right.

    Args:
        text: Plain text or escaped HTML
        mode: LinkMode or its name (default: from LinkConfig)
        skip_tags: Element names whose content is not scanned
        flags: AutolinkFlags bits, e.g. SHORT_DOMAINS

    Returns:
        Iterator of AutolinkMatch, one per link; matches never overlap

    Raises:
        LinkModeError: If ``mode`` is not a known mode

    Example:
        >>> [m.href for m in find_links("mail a@b.com or see www.x.org")]
        ['mailto:a@b.com', 'http://www.x.org']
    """
    resolved_mode, tags, resolved_flags = _resolve(mode, skip_tags, flags)
    data = _encode(text)
    return (
        AutolinkMatch(kind, span, span.slice(data).decode("utf-8", errors="surrogateescape"))
        for kind, span in _scan(data, resolved_mode, tags, resolved_flags)
    )


@overload
def auto_link(
    text: str,
    mode: LinkMode | str | None = ...,
    link_attr: str | None = ...,
    skip_tags: Iterable[str] | None = ...,
    flags: int | None = ...,
    link_text: Callable[[str], str] | None = ...,
) -> str: ...


@overload
def auto_link(
    text: bytes | bytearray,
    mode: LinkMode | str | None = ...,
    link_attr: str | None = ...,
    skip_tags: Iterable[str] | None = ...,
    flags: int | None = ...,
    link_text: Callable[[str], str] | None = ...,
) -> bytes | bytearray: ...


def auto_link(
    text: str | bytes | bytearray,
    mode: LinkMode | str | None = None,
    link_attr: str | None = None,
    skip_tags: Iterable[str] | None = None,
    flags: int | None = None,
    link_text: Callable[[str], str] | None = None,
) -> str | bytes | bytearray:
    """Wrap every URL, www. hostname and email address in ``text`` in a link.

    The text may be plain text or HTML. HTML is expected to be escaped
    already: no escaping is performed except for ``"`` inside the href.
    Content of the skip tags (``a pre code kbd script`` by default) is
    left alone, so existing links are not linked twice.

    Args:
        text: Plain text or escaped HTML
        mode: ``"all"``, ``"urls"`` or ``"email_addresses"`` (or LinkMode)
        link_attr: Attributes added verbatim to every ``<a>`` tag
        skip_tags: Element names whose content is not linked
        flags: AutolinkFlags bits; SHORT_DOMAINS accepts ``http://localhost``
        link_text: Callback mapping the matched URL to the link text

    Returns:
        The linked text, of the same type as ``text``. If nothing was
        linked, ``text`` itself is returned.

    Raises:
        LinkModeError: If ``mode`` is not a known mode
        LinkTextError: If ``link_text`` returns something other than str

    Example:
        >>> auto_link("Check it out at http://www.pokemon.com")
        'Check it out at <a href="http://www.pokemon.com">http://www.pokemon.com</a>'
        >>> auto_link("www.x.org", link_attr='target="_blank"')
        '<a href="http://www.x.org" target="_blank">www.x.org</a>'
    """
    config = get_link_config()
    resolved_mode, tags, resolved_flags = _resolve(mode, skip_tags, flags)
    if link_attr is None:
        link_attr = config.link_attr
    if link_text is None:
        link_text = config.link_text

    attrs = b""
    if link_attr:
        attrs = b" " + link_attr.lstrip().encode("utf-8")

    data = _encode(text)
    out = ByteBuilder()
    copied = 0
    count = 0

    for kind, span in _scan(data, resolved_mode, tags, resolved_flags):
        raw = span.slice(data)
        if link_text is not None:
            url = raw.decode("utf-8", errors="surrogateescape")
            label = link_text(url)
            if not isinstance(label, str):
                raise LinkTextError(url, label)
            label_bytes = label.encode("utf-8", errors="surrogateescape")
        else:
            label_bytes = raw

        out.append(data[copied : span.start])
        out.extend([
            b'<a href="',
            kind.href_prefix.encode("ascii"),
            escape_href(raw),
            b'"',
            attrs,
            b">",
            label_bytes,
            b"</a>",
        ])
        copied = span.end
        count += 1

    logger.debug("Linked %d span(s) in %d bytes (mode=%s)", count, len(data), resolved_mode.value)

    if count == 0:
        return text

    out.append(data[copied:])
    result = out.build()
    if isinstance(text, str):
        return result.decode("utf-8")
    return result
