"""Application runtime context.

The Application is the object every other component queries for its
identity, for class-scoped configuration and for a writable local storage
directory.

Example usage:

    from seedcore.application import create_application

    app = create_application()
    config = app.get_configuration("com.acme.billing.InvoiceService", int)
    timeout = config.get("timeout", 30)
"""

from pathlib import Path
from typing import Any

from seedcore.config import get_settings
from seedcore.config.loader import load_config
from seedcore.config.models.application import ApplicationConfig
from seedcore.config.settings import Settings
from seedcore.configuration import (
    BackingStore,
    ClassConfiguration,
    ConfigurationTree,
    ValueSubstitutor,
    resolve,
)
from seedcore.observability.logging import get_logger, setup_logging
from seedcore.storage import StorageContext, storage_disabled

logger = get_logger(__name__)


class Application:
    """Runtime context owning the configuration store and local storage.

    When storage is enabled the root directory is validated at construction
    and a failure is fatal.
    """

    def __init__(self, config: ApplicationConfig, store: BackingStore) -> None:
        self._config = config
        self._store = store
        self._substitutor = ValueSubstitutor(store)

        logger.info("application_info", name=config.name, version=config.version)

        self._storage: StorageContext | None = None
        if config.storage is not None:
            self._storage = StorageContext(config.storage)
            root = self._storage.ensure_root()
            logger.info("application_storage", path=str(root.absolute()))

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def id(self) -> str:
        return self._config.id

    @property
    def version(self) -> str:
        return self._config.version

    @property
    def configuration(self) -> BackingStore:
        return self._store

    def get_configuration(
        self, target: type | str, value_type: Any = Any
    ) -> ClassConfiguration[Any]:
        """Resolve the class-scoped configuration of a type.

        Args:
            target: Class or fully-qualified type name
            value_type: Type every property value is converted to

        Raises:
            ConfigurationError: If a property fails conversion
        """
        return resolve(self._store, target, value_type)

    def substitute_with_configuration(self, value: str) -> str:
        """Expand configuration references in a string.

        Raises:
            ConfigurationError: If a reference cannot be resolved
        """
        return self._substitutor.substitute(value)

    def get_storage_location(self, context: str) -> Path:
        """Get the writable directory dedicated to a storage context.

        Raises:
            StorageError: If storage is disabled or the directory is unusable
        """
        if self._storage is None:
            raise storage_disabled(context)
        return self._storage.get_context_directory(context)

    def is_storage_enabled(self) -> bool:
        return self._storage is not None


def create_application(
    settings: Settings | None = None,
    store: BackingStore | None = None,
) -> Application:
    """Build the Application from the loaded configuration files.

    Logging is configured from `observability.logging` before the
    Application logs its startup information.

    Args:
        settings: Pre-built settings, defaults to `get_settings()`
        store: Configuration store, defaults to a tree over the TOML
            files of the current config directory and environment
    """
    if settings is None:
        settings = get_settings()
    if store is None:
        store = ConfigurationTree(load_config())

    logging_config = settings.observability.logging
    setup_logging(
        level=logging_config.level,
        format=logging_config.format,
        redact_secrets=logging_config.redact_secrets,
    )

    return Application(settings.application, store)
