"""
Extraction Domain - Metadata fields from semi-structured text.

This domain handles:
- Input path validation
- Document loading
- Pattern-based field extraction
"""

from .contracts import FieldExtractor, InputValidator
from .extractor import RegexFieldExtractor
from .models import Document, ExtractedField, FieldLabel
from .validator import PathValidator

__all__ = [
    # Contracts
    "FieldExtractor",
    "InputValidator",
    # Models
    "Document",
    "ExtractedField",
    "FieldLabel",
    # Implementations
    "PathValidator",
    "RegexFieldExtractor",
]
