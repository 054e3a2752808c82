"""
Booknotes Service - Validate, load and extract in one call.

Each command runs START -> VALIDATING -> READING -> EXTRACTING and ends
either FAILED (with the error's message and exit code) or SUCCEEDED.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from booknotes.config.errors import BooknotesError, FieldNotFoundError
from booknotes.config.settings import Settings, get_settings
from booknotes.domains.extraction import (
    Document,
    ExtractedField,
    FieldExtractor,
    FieldLabel,
    InputValidator,
    PathValidator,
    RegexFieldExtractor,
)
from booknotes.domains.extraction.contracts import PathArg
from booknotes.domains.extraction.models import label_text

from .models import CommandResult, MissingFieldPolicy

logger = logging.getLogger(__name__)

__all__ = ["BooknotesService", "get_author", "get_title"]


class BooknotesService:
    """
    Stateless service exposing the book-notes commands.

    Example:
        >>> service = BooknotesService()
        >>> result = service.get_author("notes.md")
        >>> result.exit_code, result.first_line
        (0, 'Kilian Jornet')
    """

    def __init__(
        self,
        validator: InputValidator | None = None,
        extractor: FieldExtractor | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize service.

        Args:
            validator: Path validator (default: PathValidator from settings)
            extractor: Field extractor (default: RegexFieldExtractor)
            settings: Application settings (default: cached settings)
        """
        self._settings = settings or get_settings()
        self._validator = validator or PathValidator(
            check_exists=self._settings.check_exists
        )
        self._extractor = extractor or RegexFieldExtractor()

    @property
    def missing_field_policy(self) -> MissingFieldPolicy:
        """Policy applied when a field is absent."""
        return self._settings.missing_field_policy

    def load(self, path: PathArg) -> Document:
        """
        Validate a path and read its content.

        Raises:
            MissingArgumentError: If no path was given
            DocumentNotFoundError: If the path is not a readable file
            DocumentReadError: If the file cannot be read or decoded
        """
        valid = self._validator.validate(path)
        return Document.from_path(valid, encoding=self._settings.encoding)

    def get_fields(
        self,
        path: PathArg,
        labels: Iterable[FieldLabel | str],
    ) -> dict[str, ExtractedField]:
        """
        Load a document once and extract several labels from it.

        Args:
            path: Notes file
            labels: Labels to look up

        Returns:
            Mapping of label text to extracted field

        Raises:
            BooknotesError: On validation or read failure
        """
        document = self.load(path)
        return self._extractor.extract_many(document, labels)

    def get_field(self, path: PathArg, label: FieldLabel | str) -> CommandResult:
        """
        Run one extraction command.

        Args:
            path: Notes file, possibly missing
            label: Field label to extract

        Returns:
            Command result; the value or error message is the first line
        """
        name = label_text(label)
        try:
            document = self.load(path)
        except BooknotesError as e:
            logger.info("Command for %r failed: %s", name, e)
            return CommandResult.failure(e)

        field = self._extractor.extract(document, name)
        if field.value is not None:
            return CommandResult.success(field.value)

        logger.info("Field %r absent from %s", name, document.source)
        if self.missing_field_policy is MissingFieldPolicy.ERROR:
            return CommandResult.failure(
                FieldNotFoundError(name, {"path": document.source})
            )
        return CommandResult.success("")

    def get_author(self, path: PathArg) -> CommandResult:
        """Extract the ``Author`` field."""
        return self.get_field(path, FieldLabel.AUTHOR)

    def get_title(self, path: PathArg) -> CommandResult:
        """Extract the ``Full Title`` field."""
        return self.get_field(path, FieldLabel.FULL_TITLE)


def get_author(path: str | os.PathLike[str] | None = None) -> CommandResult:
    """Extract the author from a notes file with default settings."""
    return BooknotesService().get_author(path)


def get_title(path: str | os.PathLike[str] | None = None) -> CommandResult:
    """Extract the full title from a notes file with default settings."""
    return BooknotesService().get_title(path)
