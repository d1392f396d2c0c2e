"""Merge engine for class-scoped configuration."""

from collections.abc import Mapping
from typing import Any

from seedcore.configuration.class_configuration import ClassConfiguration
from seedcore.configuration.scopes import resolve_scopes, type_name_of
from seedcore.configuration.store import BackingStore, convert
from seedcore.observability.logging import get_logger

logger = get_logger(__name__)


def scope_properties(node: Any) -> dict[str, Any]:
    """Properties declared directly at a scope.

    Nested tables belong to deeper scopes and are excluded. A scope whose
    node is not a table declares nothing.
    """
    if not isinstance(node, Mapping):
        return {}
    return {
        key: value for key, value in node.items() if not isinstance(value, Mapping)
    }


def resolve(
    store: BackingStore,
    target: type | str,
    value_type: Any = Any,
) -> ClassConfiguration[Any]:
    """Resolve the configuration of a type by overlaying its scopes.

    Every scope from general to specific contributes the properties it
    declares, so the most specific scope wins per key while defaults from
    coarser scopes survive for keys it does not mention. The result is
    computed afresh on every call.

    Args:
        store: Configuration source
        target: Class or fully-qualified type name
        value_type: Type every property value is converted to

    Returns:
        The merged configuration, empty if no scope declares anything

    Raises:
        ConfigurationError: If a property fails conversion at any scope
    """
    type_name = target if isinstance(target, str) else type_name_of(target)
    configuration: ClassConfiguration[Any] = ClassConfiguration.empty(type_name)
    matched: list[str] = []

    for scope in resolve_scopes(type_name):
        properties = scope_properties(store.get(scope))
        if not properties:
            continue
        layer = convert(
            properties, dict[str, value_type], scope, target_type=type_name
        )
        configuration.overlay(layer)
        matched.append(scope)

    logger.debug(
        "class_configuration_resolved",
        target_type=type_name,
        scopes=matched,
        keys=sorted(configuration),
    )
    return configuration
