"""Local storage directories for application features.

Each feature asks for a named context and receives a writable directory
beneath the configured storage root. Directories are validated on every
access and never cached, so external interference between calls (a
directory deleted or made read-only) is detected.
"""

import os
from pathlib import Path, PurePath

from seedcore.errors import ErrorCode, StorageError
from seedcore.observability.logging import get_logger

logger = get_logger(__name__)


def ensure_directory(path: Path, context: str | None = None) -> Path:
    """Make sure `path` is an existing, writable directory.

    Checks, in order:
    1. Missing directories are created together with their parents. A
       creation failure caused by a concurrent creator is not an error.
    2. The path must be a directory.
    3. The process must be able to write to it.

    Args:
        path: Directory to validate
        context: Storage context name, reported in errors

    Returns:
        The validated path

    Raises:
        StorageError: If any check fails
    """
    if not path.exists():
        try:
            path.mkdir(parents=True)
            logger.debug("storage_directory_created", path=str(path.absolute()))
        except OSError as e:
            if not path.exists():
                raise StorageError(
                    f"Unable to create storage directory {path.absolute()}: {e}",
                    code=ErrorCode.CANNOT_CREATE,
                    path=path.absolute(),
                    context=context,
                ) from e

    if not path.is_dir():
        raise StorageError(
            f"Storage path {path.absolute()} is not a directory",
            code=ErrorCode.NOT_A_DIRECTORY,
            path=path.absolute(),
            context=context,
        )

    if not os.access(path, os.W_OK):
        raise StorageError(
            f"Storage directory {path.absolute()} is not writable",
            code=ErrorCode.NOT_WRITABLE,
            path=path.absolute(),
            context=context,
        )

    return path


def storage_disabled(context: str | None = None) -> StorageError:
    """Error for a storage request made while no root is configured."""
    if context is None:
        message = "No local storage is configured"
    else:
        message = f"No local storage is configured, cannot provide context '{context}'"
    return StorageError(message, code=ErrorCode.STORAGE_DISABLED, context=context)


def context_path(root: Path, context: str) -> Path:
    """Location of a context beneath the root.

    Anchors are stripped so an absolute context is re-rooted. Contexts that
    still leave the root (e.g. through `..`) are rejected.

    Raises:
        StorageError: INVALID_CONTEXT if the location is outside the root
    """
    relative = PurePath(context)
    if relative.anchor:
        relative = relative.relative_to(relative.anchor)

    location = root / relative
    if not location.resolve().is_relative_to(root.resolve()):
        raise StorageError(
            f"Storage context '{context}' is outside the storage root {root.absolute()}",
            code=ErrorCode.INVALID_CONTEXT,
            path=location.absolute(),
            context=context,
        )
    return location


class StorageContext:
    """Lifecycle of the storage root and its per-context subdirectories."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = root

    @property
    def root(self) -> Path | None:
        return self._root

    def is_storage_enabled(self) -> bool:
        return self._root is not None

    def ensure_root(self, context: str | None = None) -> Path:
        """Validate the storage root itself.

        Raises:
            StorageError: If storage is disabled or the root is unusable
        """
        if self._root is None:
            raise storage_disabled(context)
        return ensure_directory(self._root, context)

    def get_context_directory(self, context: str) -> Path:
        """Get the validated directory of a storage context.

        The root is re-validated on every call before the context directory.

        Raises:
            StorageError: STORAGE_DISABLED when no root is configured
                (the filesystem is not touched), INVALID_CONTEXT when the
                context leaves the root, or any ensure_directory failure
        """
        root = self.ensure_root(context)
        return ensure_directory(context_path(root, context), context)
