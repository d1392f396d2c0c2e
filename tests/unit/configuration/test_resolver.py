"""Tests for class-scoped configuration resolution."""

from typing import Any

import pytest

from seedcore.configuration.class_configuration import ClassConfiguration
from seedcore.configuration.resolver import resolve, scope_properties
from seedcore.configuration.store import BackingStore
from seedcore.configuration.tree import ConfigurationTree
from seedcore.errors import ConfigurationError, ErrorCode


class RecordingStore(BackingStore):
    """Store double recording the paths it was queried with."""

    def __init__(self, layers: dict[str, Any]) -> None:
        self.layers = layers
        self.queried: list[str] = []

    def get(self, path: str, type_: Any = Any) -> Any | None:
        self.queried.append(path)
        return self.layers.get(path)

    def map(self, template: str) -> str:
        return template


@pytest.fixture
def tree() -> ConfigurationTree:
    return ConfigurationTree({
        "classes": {
            "com": {
                "timeout": 10,
                "retries": 1,
                "acme": {
                    "retries": 3,
                    "Billing": {"retries": 5, "currency": "EUR"},
                },
            },
        },
    })


class TestResolve:
    """Tests for resolve."""

    def test_most_specific_wins_per_key(self, tree: ConfigurationTree) -> None:
        """Finer scopes override; coarse defaults survive for other keys."""
        config = resolve(tree, "com.acme.Billing")
        assert config.as_dict() == {"timeout": 10, "retries": 5, "currency": "EUR"}
        assert config.target_type == "com.acme.Billing"

    def test_sibling_type_only_sees_shared_scopes(self, tree: ConfigurationTree) -> None:
        config = resolve(tree, "com.acme.Shipping")
        assert config.as_dict() == {"timeout": 10, "retries": 3}

    def test_nested_tables_are_not_properties(self, tree: ConfigurationTree) -> None:
        """Child tables belong to deeper scopes."""
        assert "acme" not in resolve(tree, "com.acme")
        assert "Billing" not in resolve(tree, "com.acme")

    def test_no_matching_scope_returns_empty(self, tree: ConfigurationTree) -> None:
        config = resolve(tree, "org.other.Thing")
        assert isinstance(config, ClassConfiguration)
        assert len(config) == 0

    def test_empty_store_returns_empty(self) -> None:
        assert len(resolve(ConfigurationTree(), "a.b.C")) == 0

    def test_accepts_class(self) -> None:
        """Classes are resolved through their module-qualified name."""
        node: dict[str, Any] = {"TestResolve": {"flag": True}}
        for part in reversed(__name__.split(".")):
            node = {part: node}
        store = ConfigurationTree({"classes": node})

        config = resolve(store, TestResolve)
        assert config["flag"] is True
        assert config.target_type == f"{__name__}.TestResolve"

    def test_queries_scopes_in_order(self) -> None:
        store = RecordingStore({"classes.a": {"X": 1}, "classes.a.b.C": {"X": 2, "Y": 3}})
        config = resolve(store, "a.b.C")
        assert store.queried == ["classes.a", "classes.a.b", "classes.a.b.C"]
        assert config.as_dict() == {"X": 2, "Y": 3}

    def test_reverse_layering(self) -> None:
        """The specific layer is applied last regardless of content."""
        store = RecordingStore({"classes.a": {"X": 2, "Y": 3}, "classes.a.b.C": {"X": 1}})
        assert resolve(store, "a.b.C").as_dict() == {"X": 1, "Y": 3}

    def test_fresh_result_every_call(self, tree: ConfigurationTree) -> None:
        first = resolve(tree, "com.acme.Billing")
        first.overlay({"retries": 99})
        assert resolve(tree, "com.acme.Billing")["retries"] == 5
        assert first is not resolve(tree, "com.acme.Billing")

    def test_typed_values(self, tree: ConfigurationTree) -> None:
        store = ConfigurationTree({"classes": {"a": {"port": "8080", "ratio": 1}}})
        config = resolve(store, "a.B", float)
        assert config.as_dict() == {"port": 8080.0, "ratio": 1.0}

    def test_conversion_failure_aborts(self, tree: ConfigurationTree) -> None:
        """A failure at any scope raises with the scope and type, no partial result."""
        with pytest.raises(ConfigurationError) as exc_info:
            resolve(tree, "com.acme.Billing", int)

        error = exc_info.value
        assert error.code == ErrorCode.CONVERSION_FAILED
        assert error.scope == "classes.com.acme.Billing"
        assert error.target_type == "com.acme.Billing"


class TestScopeProperties:
    """Tests for scope_properties."""

    def test_scalar_node_declares_nothing(self) -> None:
        assert scope_properties("value") == {}
        assert scope_properties(None) == {}

    def test_keeps_scalars_and_arrays(self) -> None:
        node = {"a": 1, "tags": ["x"], "child": {"b": 2}}
        assert scope_properties(node) == {"a": 1, "tags": ["x"]}
