"""Flag and mode definitions.

AutolinkFlags is a bit-set passed to the matchers. LinkMode selects which
kinds of link the scanner looks for, and LinkKind records which matcher
produced a link.

Thread Safety:
All are enums (inherently immutable).

"""

from enum import Enum, IntFlag

from enlace.errors import LinkModeError


class AutolinkFlags(IntFlag):
    """Matcher options.

    Plain integers are accepted wherever flags are expected, so
    ``AutolinkFlags.SHORT_DOMAINS`` and ``1`` are interchangeable.

    """

    NONE = 0

    # Accept hostnames without a dot (http://localhost)
    SHORT_DOMAINS = 1 << 0


class LinkMode(Enum):
    """Kinds of link the scanner detects."""

    ALL = "all"
    URLS = "urls"
    EMAIL_ADDRESSES = "email_addresses"

    @property
    def urls(self) -> bool:
        """Whether URL and www. triggers are active."""
        return self is not LinkMode.EMAIL_ADDRESSES

    @property
    def emails(self) -> bool:
        """Whether @ triggers are active."""
        return self is not LinkMode.URLS

    @classmethod
    def coerce(cls, value: "LinkMode | str") -> "LinkMode":
        """Resolve a LinkMode member or its name.

        Raises:
            LinkModeError: If the value names no mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise LinkModeError(value)


class LinkKind(Enum):
    """Which matcher produced a link."""

    URL = "url"
    WWW = "www"
    EMAIL = "email"

    @property
    def href_prefix(self) -> str:
        """Scheme prepended to the matched text to build the href."""
        if self is LinkKind.WWW:
            return "http://"
        if self is LinkKind.EMAIL:
            return "mailto:"
        return ""
