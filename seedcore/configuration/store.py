"""BackingStore abstract interface."""

from abc import ABC, abstractmethod
from typing import Any, get_origin

from pydantic import TypeAdapter, ValidationError

from seedcore.errors import ConfigurationError


class BackingStore(ABC):
    """Abstract interface for a hierarchical configuration source.

    Stores are loaded once and read-only afterwards, so implementations
    need no locking for concurrent reads.
    """

    @abstractmethod
    def get(self, path: str, type_: Any = Any) -> Any | None:
        """Get the value at a dotted path converted to `type_`.

        Returns None when nothing is configured at `path`.

        Raises:
            ConfigurationError: If the value cannot be converted
        """
        pass

    @abstractmethod
    def map(self, template: str) -> str:
        """Expand the placeholders of a template string.

        Raises:
            ConfigurationError: If a placeholder cannot be resolved
        """
        pass


def type_display_name(type_: Any) -> str:
    """Readable name for plain classes and generic aliases alike."""
    if get_origin(type_) is None and isinstance(type_, type):
        return type_.__name__
    return repr(type_).replace("typing.", "")


def convert(
    value: Any,
    type_: Any,
    path: str,
    target_type: str | None = None,
) -> Any:
    """Validate and coerce a raw configuration value with pydantic.

    Args:
        value: Raw value read from the store
        type_: Requested type, Any skips conversion
        path: Dotted path the value was read from
        target_type: Type name reported in errors, defaults to `type_`

    Raises:
        ConfigurationError: If validation fails
    """
    if type_ is Any:
        return value

    try:
        return TypeAdapter(type_).validate_python(value)
    except ValidationError as e:
        reported = target_type or type_display_name(type_)
        raise ConfigurationError(
            f"Cannot convert configuration at '{path}' to {type_display_name(type_)}: "
            f"{e.error_count()} validation error(s)",
            scope=path,
            target_type=reported,
            cause=e,
        ) from e
