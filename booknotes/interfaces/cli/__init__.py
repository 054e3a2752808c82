"""
CLI Interface - Command-line tools for Booknotes.

Provides commands for:
- Author and title extraction
- Arbitrary field extraction
- Metadata summaries
"""

from .main import app, main

__all__ = ["app", "main"]
