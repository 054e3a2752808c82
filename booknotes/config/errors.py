"""
Error Taxonomy - Consistent error codes and exit codes across the application.

Usage:
    from booknotes.config.errors import MissingArgumentError

    raise MissingArgumentError()
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Input errors
    MISSING_ARGUMENT = "MISSING_ARGUMENT"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    FILE_UNREADABLE = "FILE_UNREADABLE"

    # Extraction errors
    FIELD_NOT_FOUND = "FIELD_NOT_FOUND"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Process exit codes reported by the command layer
EXIT_CODES: dict[ErrorCode, int] = {
    ErrorCode.MISSING_ARGUMENT: 1,
    ErrorCode.FILE_NOT_FOUND: 2,
    ErrorCode.FILE_UNREADABLE: 2,
    ErrorCode.FIELD_NOT_FOUND: 3,
    ErrorCode.INTERNAL_ERROR: 70,
}

MISSING_ARGUMENT_MESSAGE = "Missing argument file"


class BooknotesError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    @property
    def exit_code(self) -> int:
        """Non-zero process exit code for this error."""
        return EXIT_CODES.get(self.code, 1)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a serializable dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "exit_code": self.exit_code,
            "details": self.details,
        }


# Specific exceptions for cleaner imports
class MissingArgumentError(BooknotesError):
    """No file path was supplied."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.MISSING_ARGUMENT, MISSING_ARGUMENT_MESSAGE, details)


class DocumentNotFoundError(BooknotesError):
    """Path was supplied but does not name a readable file."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        self.path = path
        super().__init__(
            ErrorCode.FILE_NOT_FOUND,
            f"File not found: {path}",
            {"path": path, **(details or {})},
        )


class DocumentReadError(BooknotesError):
    """File exists but its content could not be loaded."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        self.path = path
        super().__init__(
            ErrorCode.FILE_UNREADABLE,
            f"Unable to read file: {path}",
            {"path": path, **(details or {})},
        )


class FieldNotFoundError(BooknotesError):
    """Requested field label does not occur in the document."""

    def __init__(self, label: str, details: dict[str, Any] | None = None) -> None:
        self.label = label
        super().__init__(
            ErrorCode.FIELD_NOT_FOUND,
            f"Field not found: {label}",
            {"label": label, **(details or {})},
        )
