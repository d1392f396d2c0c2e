"""Configuration model exports.

    from seedcore.config.models import ApplicationConfig, LoggingConfig
"""

from seedcore.config.models.application import ApplicationConfig
from seedcore.config.models.observability import LoggingConfig, ObservabilityConfig

__all__ = [
    "ApplicationConfig",
    "LoggingConfig",
    "ObservabilityConfig",
]
