"""
Orchestration Domain - Command-style operations over the extraction domain.

Composes validation, document loading and extraction into one-shot
commands that report an exit code and output lines.
"""

from .models import CommandResult, MissingFieldPolicy
from .service import BooknotesService, get_author, get_title

__all__ = [
    "BooknotesService",
    "CommandResult",
    "MissingFieldPolicy",
    "get_author",
    "get_title",
]
