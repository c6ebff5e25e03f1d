"""
Structured error types for scriptfolders.

Every failure raised while resolving version folders is a
``ScriptFoldersError`` subclass carrying a category, structured context and
an optional chained cause. None of them is caught inside the resolver: a
malformed version, an ambiguous folder pair or a failed read aborts the
whole resolution and reaches the caller unchanged.

Hierarchy:
    ::

        ScriptFoldersError              (INTERNAL)
        ├── ParseError                  (PARSE)
        │   └── MalformedVersionError
        ├── ValidationError             (VALIDATION)
        │   └── AmbiguousVersionError
        ├── StorageError                (STORAGE)
        │   └── ScriptIOError
        └── ConfigError                 (CONFIG)

Examples:
    >>> error = MalformedVersionError("v1.2")
    >>> error.category
    <ErrorCategory.PARSE: 'PARSE'>
    >>> error.to_dict()["text"]
    'v1.2'

    Chaining an underlying OS error:

    >>> try:
    ...     open("/nope/1.0/a.sql", "rb")
    ... except OSError as exc:
    ...     error = ScriptIOError("/nope/1.0/a.sql", cause=exc)
    >>> isinstance(error.cause, FileNotFoundError)
    True

Tags:
    error-handling, exception-hierarchy, error-context, scriptfolders
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and reporting."""

    PARSE = "PARSE"               # Version strings, folder names
    VALIDATION = "VALIDATION"     # Ambiguous or inconsistent folder sets
    STORAGE = "STORAGE"           # Directory listing, file reads, decoding
    CONFIG = "CONFIG"             # Missing or invalid settings
    INTERNAL = "INTERNAL"         # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"           # Uncategorized errors


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        root: Root directory being resolved
        folder: Version folder name involved in the failure
        script: Composite ``folder/file`` script name
        version: Version string (as rendered) involved in the failure
        metadata: Additional key-value pairs
    """

    root: str | None = None
    folder: str | None = None
    script: str | None = None
    version: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["root", "folder", "script", "version"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class ScriptFoldersError(Exception):
    """
    Base exception for all scriptfolders errors.

    Subclasses set ``default_category`` so callers can route failures
    without matching on concrete types.

    Attributes:
        message: Human-readable description
        category: ErrorCategory of the failure
        context: ErrorContext with structured metadata
        cause: Underlying exception, also chained as ``__cause__``
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> ScriptFoldersError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ScriptIOError(path, cause=exc).with_context(root=str(root))
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
            "context": self.context.to_dict(),
        }
        if self.cause is not None:
            result["cause"] = repr(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


# =============================================================================
# PARSE ERRORS
# =============================================================================


class ParseError(ScriptFoldersError):
    """Error parsing input text."""

    default_category = ErrorCategory.PARSE


class MalformedVersionError(ParseError):
    """A target version or version folder name has no recognizable version prefix."""

    def __init__(self, text: str, **kwargs: Any):
        self.text = text
        super().__init__(f"Error parsing version from string '{text}'.", **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["text"] = self.text
        return result


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(ScriptFoldersError):
    """Input is well-formed but inconsistent."""

    default_category = ErrorCategory.VALIDATION


class AmbiguousVersionError(ValidationError):
    """Two accepted version folders parse to the same version."""

    def __init__(self, version: Any, folder: str, **kwargs: Any):
        self.version = version
        self.folder = folder
        kwargs.setdefault("context", ErrorContext(folder=folder, version=str(version)))
        super().__init__(
            f"Version '{version}' parsed for folder '{folder}' is ambiguous.",
            **kwargs,
        )


# =============================================================================
# STORAGE ERRORS
# =============================================================================


class StorageError(ScriptFoldersError):
    """Filesystem-related error."""

    default_category = ErrorCategory.STORAGE


class ScriptIOError(StorageError):
    """Listing a directory, or opening, reading or decoding a script failed."""

    def __init__(self, path: Any, message: str | None = None, **kwargs: Any):
        self.path = str(path)
        cause = kwargs.get("cause")
        if message is None:
            message = f"Could not read '{self.path}'"
            if cause is not None:
                message = f"{message}: {cause}"
        super().__init__(message, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["path"] = self.path
        return result


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(ScriptFoldersError):
    """Missing or invalid configuration."""

    default_category = ErrorCategory.CONFIG


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def categorize_error(error: BaseException) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, ScriptFoldersError):
        return error.category

    if isinstance(error, (OSError, UnicodeError)):
        return ErrorCategory.STORAGE
    if isinstance(error, ValueError):
        return ErrorCategory.VALIDATION
    if isinstance(error, (KeyError, AttributeError)):
        return ErrorCategory.CONFIG

    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "ScriptFoldersError",
    "ParseError",
    "MalformedVersionError",
    "ValidationError",
    "AmbiguousVersionError",
    "StorageError",
    "ScriptIOError",
    "ConfigError",
    "categorize_error",
]
