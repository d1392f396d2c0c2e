"""Per-type configuration accumulated across scopes."""

from collections.abc import Iterator, Mapping
from typing import Any, Generic, TypeVar

V = TypeVar("V")


class ClassConfiguration(Mapping[str, V], Generic[V]):
    """Configuration properties bound to one target type.

    Behaves as a read-only mapping for consumers. Layers are combined with
    `overlay`, which overwrites keys present in the incoming layer and
    leaves every other key untouched.
    """

    def __init__(self, target_type: str, values: Mapping[str, V] | None = None) -> None:
        self._target_type = target_type
        self._values: dict[str, V] = dict(values or {})

    @classmethod
    def empty(cls, target_type: str) -> "ClassConfiguration[V]":
        return cls(target_type)

    @classmethod
    def of(cls, target_type: str, values: Mapping[str, V]) -> "ClassConfiguration[V]":
        return cls(target_type, values)

    @property
    def target_type(self) -> str:
        return self._target_type

    def overlay(self, other: Mapping[str, V]) -> "ClassConfiguration[V]":
        """Apply another layer on top of this one, in place.

        Returns:
            self, to allow chaining
        """
        for key, value in other.items():
            self._values[key] = value
        return self

    def as_dict(self) -> dict[str, V]:
        return dict(self._values)

    def __getitem__(self, key: str) -> V:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ClassConfiguration):
            return (
                self._target_type == other._target_type
                and self._values == other._values
            )
        return super().__eq__(other)

    def __repr__(self) -> str:
        return f"ClassConfiguration({self._target_type!r}, {self._values!r})"
