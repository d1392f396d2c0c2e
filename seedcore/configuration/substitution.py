"""Placeholder substitution backed by the configuration store."""

from seedcore.configuration.store import BackingStore


class ValueSubstitutor:
    """Expand configuration references embedded in arbitrary strings.

    Delegates to the store's mapper; failures to resolve a reference
    propagate as ConfigurationError.
    """

    def __init__(self, store: BackingStore) -> None:
        self._store = store

    def substitute(self, template: str) -> str:
        return self._store.map(template)
