"""
Path Validator - Presence and readability checks for input files.
"""

from __future__ import annotations

import logging
import os

from booknotes.config.errors import DocumentNotFoundError, MissingArgumentError

from .contracts import PathArg

logger = logging.getLogger(__name__)

__all__ = ["PathValidator"]


class PathValidator:
    """
    Validates the file argument of a command.

    Example:
        >>> validator = PathValidator(check_exists=False)
        >>> validator.validate("notes.md")
        'notes.md'
    """

    def __init__(self, check_exists: bool = True) -> None:
        """
        Initialize validator.

        Args:
            check_exists: Also require the path to be a readable file.
                When False only the presence check runs.
        """
        self._check_exists = check_exists

    def validate(self, path: PathArg) -> str | os.PathLike[str]:
        """
        Validate a path and hand it back unchanged.

        Args:
            path: Path supplied by the caller

        Returns:
            The same path object

        Raises:
            MissingArgumentError: If path is None or blank
            DocumentNotFoundError: If path is not a readable regular file
        """
        if path is None or not os.fspath(path).strip():
            logger.debug("Rejected empty path argument")
            raise MissingArgumentError()

        if self._check_exists:
            raw = os.fspath(path)
            if not os.path.isfile(raw) or not os.access(raw, os.R_OK):
                logger.debug("Rejected unreadable path: %s", raw)
                raise DocumentNotFoundError(raw)

        return path
