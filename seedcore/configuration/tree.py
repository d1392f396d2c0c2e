"""Nested-mapping configuration store with placeholder expansion."""

import copy
import os
import re
from collections.abc import Mapping
from typing import Any

from seedcore.configuration.store import BackingStore, convert
from seedcore.errors import ConfigurationError, ErrorCode

# ${path} or ${path:fallback}; a leading backslash escapes the placeholder
PLACEHOLDER_PATTERN = re.compile(r"(\\?)\$\{([^}]*)\}")
UNTERMINATED_PATTERN = re.compile(r"(?<!\\)\$\{[^}]*$")

ENV_PREFIX = "env."

_MISSING = object()


class ConfigurationTree(BackingStore):
    """Read-only configuration store over a nested mapping.

    The mapping is usually the merged TOML produced by
    `seedcore.config.loader.load_config`. Paths are dotted keys into nested
    tables, e.g. `classes.com.acme.Billing`.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(dict(data or {}))

    def get(self, path: str, type_: Any = Any) -> Any | None:
        node = self._lookup(path)
        if node is _MISSING:
            return None
        return convert(copy.deepcopy(node), type_, path)

    def contains(self, path: str) -> bool:
        return self._lookup(path) is not _MISSING

    def map(self, template: str) -> str:
        """Expand `${...}` placeholders in a single pass.

        Supported forms:
            ${a.b.c}          value at a dotted path
            ${a.b.c:fallback} fallback when the path is absent
            ${env.NAME}       environment variable NAME
            \\${...}           literal, not expanded

        Expanded values are never re-scanned for placeholders.
        """
        if UNTERMINATED_PATTERN.search(template):
            raise ConfigurationError(
                f"Unterminated placeholder in '{template}'",
                code=ErrorCode.INVALID_TEMPLATE,
            )

        def _replace(match: re.Match[str]) -> str:
            escape, expression = match.groups()
            if escape:
                return "${" + expression + "}"
            return self._expand(expression)

        return PLACEHOLDER_PATTERN.sub(_replace, template)

    def _expand(self, expression: str) -> str:
        key, has_fallback, fallback = expression.partition(":")
        key = key.strip()
        if not key:
            raise ConfigurationError(
                f"Empty placeholder '${{{expression}}}'",
                code=ErrorCode.INVALID_TEMPLATE,
            )

        if key.startswith(ENV_PREFIX):
            value: Any = os.environ.get(key[len(ENV_PREFIX):], _MISSING)
        else:
            value = self._lookup(key)

        if value is _MISSING:
            if has_fallback:
                return fallback
            raise ConfigurationError(
                f"Unresolved configuration reference '{key}'",
                code=ErrorCode.UNRESOLVED_REFERENCE,
                scope=key,
            )

        if isinstance(value, Mapping | list):
            raise ConfigurationError(
                f"Configuration reference '{key}' is not a scalar value",
                code=ErrorCode.INVALID_REFERENCE,
                scope=key,
            )
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _lookup(self, path: str) -> Any:
        node: Any = self._data
        if not path:
            return node
        for part in path.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return _MISSING
            node = node[part]
        return node
