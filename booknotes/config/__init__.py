"""
Configuration - Application settings and error taxonomy.
"""

from .errors import (
    BooknotesError,
    DocumentNotFoundError,
    DocumentReadError,
    ErrorCode,
    FieldNotFoundError,
    MissingArgumentError,
)
from .settings import MissingFieldPolicy, Settings, get_settings

__all__ = [
    # Settings
    "MissingFieldPolicy",
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "BooknotesError",
    "MissingArgumentError",
    "DocumentNotFoundError",
    "DocumentReadError",
    "FieldNotFoundError",
]
