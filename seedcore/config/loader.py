"""Layered TOML configuration files.

The configuration directory holds a required `default.toml` and, per
environment, an optional `{environment}.toml` laid over it. The merged
mapping feeds both the Settings model and the class-scoped configuration
tree (`[classes.*]` tables).
"""

import os
import tomllib
from functools import reduce
from pathlib import Path
from typing import Any

from seedcore.observability.logging import get_logger

logger = get_logger(__name__)

CONFIG_DIR_VAR = "SEEDCORE_CONFIG_DIR"
ENVIRONMENT_VAR = "SEEDCORE_ENV"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_FILE = "default.toml"

# How many directories above the working directory are searched for config/
SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the configuration directory.

    SEEDCORE_CONFIG_DIR wins when set and must name an existing directory.
    Otherwise the nearest `config/` at or above the working directory is
    used, falling back to a relative `config/`.

    Raises:
        FileNotFoundError: If SEEDCORE_CONFIG_DIR names no directory
    """
    explicit = os.environ.get(CONFIG_DIR_VAR)
    if explicit:
        path = Path(explicit)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {explicit}")
        return path

    cwd = Path.cwd()
    candidates = [cwd, *cwd.parents][:SEARCH_DEPTH]
    return next(
        (base / "config" for base in candidates if (base / "config").is_dir()),
        Path("config"),
    )


def get_environment() -> str:
    """Name of the active environment (SEEDCORE_ENV, default 'development')."""
    return os.environ.get(ENVIRONMENT_VAR, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    try:
        with file_path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Configuration file not found: {file_path}") from e


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Lay `override` over `base`, table by table.

    Tables present on both sides are merged recursively so an environment
    file can change one key of a `[classes.*]` table and keep its siblings.
    Any other value in `override` replaces the base value. Neither input is
    modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_layers(config_dir: Path, environment: str) -> list[Path]:
    """Files to load, lowest precedence first.

    Raises:
        FileNotFoundError: If default.toml is missing
    """
    default_path = config_dir / DEFAULT_FILE
    if not default_path.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/{DEFAULT_FILE} or set {CONFIG_DIR_VAR}."
        )

    layers = [default_path]
    environment_path = config_dir / f"{environment}.toml"
    if environment_path.is_file():
        layers.append(environment_path)
    return layers


def load_config() -> dict[str, Any]:
    """Load and merge the configuration layers of the active environment."""
    layers = config_layers(get_config_dir(), get_environment())
    logger.debug("configuration_layers_loaded", files=[str(path) for path in layers])
    return reduce(deep_merge, (load_toml(path) for path in layers), {})
