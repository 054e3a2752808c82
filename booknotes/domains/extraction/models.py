"""
Extraction Models - Data types for extraction domain.
"""

from __future__ import annotations

import logging
import os
from enum import Enum

from pydantic import BaseModel

from booknotes.config.errors import DocumentReadError

logger = logging.getLogger(__name__)


class FieldLabel(str, Enum):
    """Well-known metadata labels in book notes."""

    AUTHOR = "Author"
    FULL_TITLE = "Full Title"


class Document(BaseModel):
    """Text content of a notes file, loaded once per command."""

    text: str
    source: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], encoding: str = "utf-8") -> Document:
        """
        Read a whole file into a Document.

        Args:
            path: File to read
            encoding: Text encoding of the file

        Returns:
            Document holding the file content

        Raises:
            DocumentReadError: If the file cannot be opened or decoded
        """
        source = os.fspath(path)
        try:
            with open(source, encoding=encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s: %s", source, e)
            raise DocumentReadError(source, {"reason": str(e)}) from e

        logger.debug("Loaded %s (%d chars)", source, len(text))
        return cls(text=text, source=source)


class ExtractedField(BaseModel):
    """Result of looking up one label in a document."""

    label: str
    value: str | None = None  # None when the label does not occur
    line_number: int | None = None  # 1-based

    model_config = {"frozen": True}

    @property
    def found(self) -> bool:
        """Whether the label occurred (an empty value still counts)."""
        return self.value is not None


def label_text(label: FieldLabel | str) -> str:
    """Plain string form of a label."""
    if isinstance(label, FieldLabel):
        return label.value
    return label
