"""
Booknotes - Metadata field extraction for Markdown book notes.

Example:
    >>> from booknotes import get_author
    >>> result = get_author("notes/above-the-clouds.md")
    >>> result.first_line
    'Kilian Jornet'
"""

__version__ = "1.0.0"

from .domains.extraction import FieldLabel
from .domains.orchestration import BooknotesService, CommandResult, get_author, get_title

__all__ = [
    "__version__",
    "BooknotesService",
    "CommandResult",
    "FieldLabel",
    "get_author",
    "get_title",
]
