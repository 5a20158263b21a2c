"""Unit tests for TransformRegistry."""

import logging

import pytest

from dialect_pipeline.core.transform_registry import TransformRegistry, edge_key


def first(file) -> None:
    pass


def second(file) -> None:
    pass


def test_edge_key() -> None:
    assert edge_key(".svelte", ".html") == ".svelte>.html"
    assert edge_key(".svelte", ".svelte") == ".svelte>.svelte"


class TestRegistry:
    def test_lookup_preserves_registration_order(self) -> None:
        registry = TransformRegistry()
        registry.register(".a", ".a", first)
        registry.register(".a", ".a", second)
        registry.register(".a", ".a", first)

        assert registry.lookup(".a", ".a") == [first, second, first]
        assert registry.count(".a", ".a") == 3

    def test_lookup_missing_pair_is_empty(self) -> None:
        assert TransformRegistry().lookup(".a", ".b") == []

    def test_pairs_are_ordered(self) -> None:
        registry = TransformRegistry()
        registry.register(".a", ".b", first)

        assert (".a", ".b") in registry
        assert (".b", ".a") not in registry
        assert registry.lookup(".b", ".a") == []

    def test_lookup_returns_copy(self) -> None:
        registry = TransformRegistry()
        registry.register(".a", ".b", first)

        registry.lookup(".a", ".b").append(second)

        assert registry.lookup(".a", ".b") == [first]

    def test_keys_and_counts(self) -> None:
        registry = TransformRegistry()
        registry.register(".b", ".c", first)
        registry.register(".a", ".b", first)
        registry.register(".b", ".c", second)

        assert registry.keys() == [".b>.c", ".a>.b"]
        assert list(registry) == [".b>.c", ".a>.b"]
        assert registry.counts() == {".b>.c": 2, ".a>.b": 1}
        assert len(registry) == 2

    def test_rejects_non_callable(self) -> None:
        registry = TransformRegistry()
        with pytest.raises(TypeError, match="must be callable, got NoneType"):
            registry.register(".a", ".b", None)  # type: ignore[arg-type]
        assert len(registry) == 0

    def test_registration_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="dialect_pipeline")
        TransformRegistry().register(".md", ".html", first)

        assert any(
            "Registered transform 'first' for '.md>.html'" in r.message
            for r in caplog.records
        )
