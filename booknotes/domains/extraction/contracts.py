"""
Extraction Contracts - Interfaces for extraction domain.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .models import Document, ExtractedField, FieldLabel

PathArg = str | os.PathLike[str] | None


@runtime_checkable
class InputValidator(Protocol):
    """
    Contract for validating a user-supplied file path.

    Example:
        >>> class MyValidator:
        ...     def validate(self, path):
        ...         return path
        >>> assert isinstance(MyValidator(), InputValidator)
    """

    def validate(self, path: PathArg) -> str | os.PathLike[str]:
        """
        Check that a path was supplied and is usable.

        Args:
            path: Path given by the caller, possibly empty

        Returns:
            The same path, unchanged

        Raises:
            MissingArgumentError: If no path was given
            DocumentNotFoundError: If the path is not a readable file
        """
        ...


@runtime_checkable
class FieldExtractor(Protocol):
    """Contract for pulling labelled values out of text."""

    def extract(self, document: Document | str, label: FieldLabel | str) -> ExtractedField:
        """
        Find the first value for a label.

        Args:
            document: Document or raw text to search
            label: Field label, e.g. "Author"

        Returns:
            Extracted field; ``value`` is None when the label is absent
        """
        ...

    def extract_many(
        self,
        document: Document | str,
        labels: Iterable[FieldLabel | str],
    ) -> dict[str, ExtractedField]:
        """Extract several labels independently, keyed by label text."""
        ...
