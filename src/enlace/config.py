"""ContextVar-based link configuration for enlace.

Provides thread-local defaults for auto_link() and find_links() using
Python's ContextVars (PEP 567). Arguments passed explicitly to those
functions always win; anything left as None is read from here.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from enlace.config import LinkConfig, link_config_context

    with link_config_context(LinkConfig(link_attr='rel="nofollow"')):
        html = auto_link(text)

    # Or set it for the rest of the current context
    set_link_config(LinkConfig(skip_tags=("a", "pre")))
    try:
        html = auto_link(text)
    finally:
        reset_link_config()

"""

from collections.abc import Callable, Iterable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from enlace.flags import AutolinkFlags, LinkMode
from enlace.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SKIP_TAGS: tuple[str, ...] = ("a", "pre", "code", "kbd", "script")


@dataclass(frozen=True, slots=True)
class LinkConfig:
    """Immutable linking configuration.

    Attributes:
        mode: Which kinds of link to detect (LinkMode or its name)
        link_attr: Extra attributes inserted verbatim into every ``<a>`` tag
        skip_tags: Elements whose content is never linked
        flags: Matcher flags (AutolinkFlags or int)
        link_text: Optional callback turning the matched URL into link text

    """

    mode: LinkMode = LinkMode.ALL
    link_attr: str | None = None
    skip_tags: tuple[str, ...] = DEFAULT_SKIP_TAGS
    flags: AutolinkFlags = AutolinkFlags.NONE
    link_text: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", LinkMode.coerce(self.mode))
        object.__setattr__(self, "skip_tags", normalize_skip_tags(self.skip_tags))
        object.__setattr__(self, "flags", AutolinkFlags(int(self.flags)))

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LinkConfig":
        """Create LinkConfig from dictionary.

        Only includes keys that are valid LinkConfig fields; unknown keys
        are ignored (and logged at DEBUG).

        Args:
            config_dict: Dictionary with config values. Keys should match
                LinkConfig attribute names.

        Returns:
            New LinkConfig instance with values from dict.

        Example:
            >>> config = LinkConfig.from_dict({
            ...     "mode": "urls",
            ...     "flags": 1,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.mode
            <LinkMode.URLS: 'urls'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        unknown = sorted(k for k in config_dict if k not in valid_fields)
        if unknown:
            logger.debug("Ignoring unknown LinkConfig keys: %s", ", ".join(unknown))
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


def normalize_skip_tags(tags: Iterable[str]) -> tuple[str, ...]:
    """Turn any iterable of tag names into a tuple, dropping empty names.

    A bare string is rejected rather than iterated character by character.
    """
    if isinstance(tags, (str, bytes)):
        msg = f"skip_tags must be a sequence of tag names, not {type(tags).__name__}"
        raise TypeError(msg)
    return tuple(t for t in tags if t)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LinkConfig = LinkConfig()

_link_config: ContextVar[LinkConfig] = ContextVar(
    "link_config",
    default=_DEFAULT_CONFIG,
)


def get_link_config() -> LinkConfig:
    """Get current link configuration (thread-local)."""
    return _link_config.get()


def set_link_config(config: LinkConfig) -> None:
    """Set link configuration for current context.

    Args:
        config: LinkConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _link_config.set(config)


def reset_link_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _link_config.set(_DEFAULT_CONFIG)


@contextmanager
def link_config_context(config: LinkConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LinkConfig to use within the context.

    Example:
        >>> with link_config_context(LinkConfig(mode="urls")):
        ...     get_link_config().mode
        <LinkMode.URLS: 'urls'>

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _link_config.get()
    _link_config.set(config)
    try:
        yield
    finally:
        _link_config.set(previous)


__all__ = [
    "DEFAULT_SKIP_TAGS",
    "LinkConfig",
    "get_link_config",
    "set_link_config",
    "reset_link_config",
    "link_config_context",
    "normalize_skip_tags",
]
