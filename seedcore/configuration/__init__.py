"""Class-scoped configuration resolution.

    from seedcore.configuration import ConfigurationTree, resolve

    tree = ConfigurationTree({"classes": {"com": {"retries": 3}}})
    resolve(tree, "com.foo.Bar", int)["retries"]  # 3
"""

from seedcore.configuration.class_configuration import ClassConfiguration
from seedcore.configuration.resolver import resolve, scope_properties
from seedcore.configuration.scopes import CLASSES_PREFIX, resolve_scopes, type_name_of
from seedcore.configuration.store import BackingStore
from seedcore.configuration.substitution import ValueSubstitutor
from seedcore.configuration.tree import ConfigurationTree

__all__ = [
    "CLASSES_PREFIX",
    "BackingStore",
    "ClassConfiguration",
    "ConfigurationTree",
    "ValueSubstitutor",
    "resolve",
    "resolve_scopes",
    "scope_properties",
    "type_name_of",
]
