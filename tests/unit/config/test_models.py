"""Unit tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from seedcore.config.models import ApplicationConfig, LoggingConfig


class TestApplicationConfig:
    """Tests for ApplicationConfig model."""

    def test_valid_config(self) -> None:
        """Valid configuration is accepted."""
        config = ApplicationConfig(name="billing", id="billing-eu", version="1.2.0")
        assert config.name == "billing"
        assert config.id == "billing-eu"
        assert config.version == "1.2.0"

    def test_id_defaults_to_name(self) -> None:
        """Missing id falls back to the application name."""
        config = ApplicationConfig(name="billing")
        assert config.id == "billing"

    def test_storage_disabled_by_default(self) -> None:
        """No storage path means storage is disabled."""
        config = ApplicationConfig()
        assert config.storage is None
        assert config.is_storage_enabled is False

    def test_blank_storage_is_disabled(self) -> None:
        """A blank storage string disables storage."""
        config = ApplicationConfig(storage="  ")
        assert config.is_storage_enabled is False

    def test_storage_expands_user(self) -> None:
        """Storage path expands ~ to the home directory."""
        config = ApplicationConfig(storage="~/seed-storage")
        assert config.storage == Path.home() / "seed-storage"
        assert config.is_storage_enabled is True

    def test_empty_name_rejected(self) -> None:
        """Empty name fails validation."""
        with pytest.raises(ValidationError):
            ApplicationConfig(name="")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_invalid_level_rejected(self) -> None:
        """Unknown log level fails validation."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")

    def test_invalid_format_rejected(self) -> None:
        """Unknown format fails validation."""
        with pytest.raises(ValidationError):
            LoggingConfig(format="xml")
