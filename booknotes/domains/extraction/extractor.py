"""
Regex Field Extractor - Label/value lookup in semi-structured text.

Matches lines such as ``- Full Title: Above the Clouds: How I Carved...``
and returns everything after the first ``<Label>:`` plus whitespace.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from functools import lru_cache

from .models import Document, ExtractedField, FieldLabel, label_text

logger = logging.getLogger(__name__)

__all__ = ["RegexFieldExtractor", "field_pattern"]


@lru_cache(maxsize=128)
def field_pattern(label: str) -> re.Pattern[str]:
    """
    Compile the search pattern for a label.

    The label is matched literally and case-sensitively, followed by a colon
    and at least one space or tab. The rest of that line is group 1.
    """
    return re.compile(re.escape(label) + r":[ \t]+(.*)")


class RegexFieldExtractor:
    """
    Stateless extractor for ``Label: value`` lines.

    Example:
        >>> extractor = RegexFieldExtractor()
        >>> extractor.extract("- Author: Kilian Jornet", "Author").value
        'Kilian Jornet'
    """

    def extract(self, document: Document | str, label: FieldLabel | str) -> ExtractedField:
        """
        Find the first value for a label.

        Args:
            document: Document or raw text to search
            label: Field label, e.g. FieldLabel.AUTHOR or "Author"

        Returns:
            Extracted field; ``value`` is None when no line matches
        """
        name = label_text(label)
        if not name:
            raise ValueError("label must not be empty")

        text = document.text if isinstance(document, Document) else document
        match = field_pattern(name).search(text)

        if match is None:
            logger.debug("Label %r not found", name)
            return ExtractedField(label=name)

        line_number = text.count("\n", 0, match.start()) + 1
        logger.debug("Label %r found on line %d", name, line_number)
        return ExtractedField(label=name, value=match.group(1), line_number=line_number)

    def extract_many(
        self,
        document: Document | str,
        labels: Iterable[FieldLabel | str],
    ) -> dict[str, ExtractedField]:
        """
        Extract several labels independently.

        Args:
            document: Document or raw text to search
            labels: Labels to look up

        Returns:
            Mapping of label text to extracted field, in request order
        """
        return {label_text(label): self.extract(document, label) for label in labels}
