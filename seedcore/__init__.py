"""seedcore: application runtime context with class-scoped configuration.

Usage:
    from seedcore import create_application

    app = create_application()
    config = app.get_configuration("com.acme.billing.InvoiceService")
    retries = config.get("retries", 3)
    cache_dir = app.get_storage_location("invoice-cache")
"""

from seedcore.application import Application, create_application
from seedcore.configuration import ClassConfiguration, ConfigurationTree
from seedcore.errors import ConfigurationError, SeedcoreError, StorageError

__all__ = [
    "Application",
    "ClassConfiguration",
    "ConfigurationError",
    "ConfigurationTree",
    "SeedcoreError",
    "StorageError",
    "create_application",
]
