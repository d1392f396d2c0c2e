"""Exception hierarchy for configuration resolution and local storage.

All seedcore exceptions inherit from SeedcoreError, which carries a
machine-readable error code alongside the human-readable message.
"""

from enum import Enum
from pathlib import Path


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    CONVERSION_FAILED = "CONVERSION_FAILED"
    """A configuration node could not be converted to the requested type."""

    UNRESOLVED_REFERENCE = "UNRESOLVED_REFERENCE"
    """A template referenced a key that is absent from the configuration."""

    INVALID_REFERENCE = "INVALID_REFERENCE"
    """A template referenced a table or array instead of a scalar value."""

    INVALID_TEMPLATE = "INVALID_TEMPLATE"
    """A template is malformed (e.g. an unterminated placeholder)."""

    CANNOT_CREATE = "CANNOT_CREATE"
    """A storage directory did not exist and could not be created."""

    NOT_A_DIRECTORY = "NOT_A_DIRECTORY"
    """A storage path exists but is not a directory."""

    NOT_WRITABLE = "NOT_WRITABLE"
    """A storage directory exists but the process cannot write to it."""

    STORAGE_DISABLED = "STORAGE_DISABLED"
    """Local storage was requested but no storage root is configured."""

    INVALID_CONTEXT = "INVALID_CONTEXT"
    """A storage context name resolves outside the storage root."""


class SeedcoreError(Exception):
    """Base exception for all seedcore errors."""

    code: ErrorCode

    def __init__(self, message: str, code: ErrorCode) -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigurationError(SeedcoreError):
    """Raised when a typed lookup or template expansion fails.

    Attributes:
        scope: Dotted configuration path being read, if known
        target_type: Name of the type the value was converted to, if known
        cause: Underlying library exception, if any
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONVERSION_FAILED,
        scope: str | None = None,
        target_type: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, code)
        self.scope = scope
        self.target_type = target_type
        self.cause = cause


class StorageError(SeedcoreError):
    """Raised when a local storage directory cannot be provided.

    Attributes:
        path: Absolute path of the offending location, None when storage
            is disabled
        context: Storage context name requested by the caller, if any
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        path: Path | None = None,
        context: str | None = None,
    ) -> None:
        super().__init__(message, code)
        self.path = path
        self.context = context
