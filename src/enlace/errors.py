"""Exception classes for enlace.

The matchers never raise: "no link here" is an ordinary result and is
reported as ``None``. Exceptions are reserved for misuse of the
host-facing API (unknown modes, callbacks returning the wrong type).
"""

from __future__ import annotations


class EnlaceError(Exception):
    """Base exception for all enlace errors.

    Subclass this for specific error categories.
    """

    pass


class LinkModeError(EnlaceError, ValueError):
    """Unknown linking mode.

    Raised when a mode is neither a LinkMode member nor one of its names.
    """

    def __init__(self, mode: object) -> None:
        """Initialize mode error.

        Args:
            mode: The rejected mode value
        """
        self.mode = mode
        super().__init__(
            f"Invalid linking mode {mode!r} "
            "(possible values are 'all', 'urls', 'email_addresses')"
        )


class LinkTextError(EnlaceError, TypeError):
    """A link text callback returned something other than a string.

    Carries the URL that was passed to the callback so the caller can
    find the offending link.
    """

    def __init__(self, url: str, result: object) -> None:
        """Initialize link text error.

        Args:
            url: Matched link text handed to the callback
            result: Value the callback returned
        """
        self.url = url
        self.result = result
        super().__init__(
            f"link_text callback must return str, got {type(result).__name__} for {url!r}"
        )
