"""Tests for ContextVar-based link configuration.

Validates defaults, coercion, context manager behavior and thread isolation.
"""

from threading import Thread

import pytest

from enlace import (
    DEFAULT_SKIP_TAGS,
    AutolinkFlags,
    LinkConfig,
    LinkMode,
    LinkModeError,
    auto_link,
    get_link_config,
    link_config_context,
    reset_link_config,
    set_link_config,
)


class TestLinkConfigDataclass:
    """Test LinkConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LinkConfig()
        assert config.mode is LinkMode.ALL
        assert config.link_attr is None
        assert config.skip_tags == DEFAULT_SKIP_TAGS == ("a", "pre", "code", "kbd", "script")
        assert config.flags == AutolinkFlags.NONE
        assert config.link_text is None

    def test_immutability(self) -> None:
        config = LinkConfig()
        with pytest.raises(AttributeError):
            config.mode = LinkMode.URLS  # type: ignore[misc]

    def test_mode_name_coerced(self) -> None:
        assert LinkConfig(mode="urls").mode is LinkMode.URLS  # type: ignore[arg-type]
        assert LinkConfig(mode="EMAIL_ADDRESSES").mode is LinkMode.EMAIL_ADDRESSES  # type: ignore[arg-type]

    def test_invalid_mode(self) -> None:
        with pytest.raises(LinkModeError):
            LinkConfig(mode="everything")  # type: ignore[arg-type]

    def test_skip_tags_normalized(self) -> None:
        config = LinkConfig(skip_tags=["a", "", "pre"])  # type: ignore[arg-type]
        assert config.skip_tags == ("a", "pre")

    def test_skip_tags_rejects_bare_string(self) -> None:
        with pytest.raises(TypeError):
            LinkConfig(skip_tags="pre")  # type: ignore[arg-type]

    def test_int_flags(self) -> None:
        config = LinkConfig(flags=1)  # type: ignore[arg-type]
        assert config.flags is AutolinkFlags.SHORT_DOMAINS


class TestLinkConfigFromDict:
    """Test LinkConfig.from_dict()."""

    def test_known_keys(self) -> None:
        config = LinkConfig.from_dict({"mode": "urls", "link_attr": "rel=x", "flags": 1})
        assert config.mode is LinkMode.URLS
        assert config.link_attr == "rel=x"
        assert config.flags & AutolinkFlags.SHORT_DOMAINS

    def test_unknown_keys_ignored(self) -> None:
        config = LinkConfig.from_dict({"unknown_key": True, "skip_tags": ["a"]})
        assert config.skip_tags == ("a",)

    def test_empty_dict(self) -> None:
        assert LinkConfig.from_dict({}) == LinkConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_link_config()

    def test_default_config(self) -> None:
        assert get_link_config() == LinkConfig()

    def test_set_and_get(self) -> None:
        set_link_config(LinkConfig(mode=LinkMode.URLS))
        assert get_link_config().mode is LinkMode.URLS

    def test_reset_restores_default(self) -> None:
        set_link_config(LinkConfig(link_attr="rel=x"))
        reset_link_config()
        assert get_link_config().link_attr is None


class TestLinkConfigContext:
    """Test link_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with link_config_context(LinkConfig(link_attr="rel=x")):
            assert get_link_config().link_attr == "rel=x"
        assert get_link_config().link_attr is None

    def test_nested_contexts(self) -> None:
        with link_config_context(LinkConfig(mode=LinkMode.URLS)):
            with link_config_context(LinkConfig(mode=LinkMode.EMAIL_ADDRESSES)):
                assert get_link_config().mode is LinkMode.EMAIL_ADDRESSES
            assert get_link_config().mode is LinkMode.URLS
        assert get_link_config().mode is LinkMode.ALL

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with link_config_context(LinkConfig(link_attr="rel=x")):
                raise ValueError("test")
        assert get_link_config().link_attr is None


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        results: dict[int, str] = {}

        def worker(thread_id: int) -> None:
            set_link_config(LinkConfig(link_attr=f'data-t="{thread_id}"'))
            results[thread_id] = auto_link("http://x.com")

        threads = [Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5.0)

        for i in range(8):
            assert results[i] == f'<a href="http://x.com" data-t="{i}">http://x.com</a>'

        # Main thread unaffected
        assert get_link_config().link_attr is None
