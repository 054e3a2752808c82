"""
Orchestration Models - Data types for orchestration domain.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from booknotes.config.errors import BooknotesError, ErrorCode
from booknotes.config.settings import MissingFieldPolicy

__all__ = ["CommandResult", "MissingFieldPolicy"]


class CommandResult(BaseModel):
    """Outcome of one command: exit code plus output lines."""

    exit_code: int = 0
    lines: list[str] = Field(default_factory=list)
    error: ErrorCode | None = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        return self.exit_code == 0

    @property
    def first_line(self) -> str:
        """First output line, or an empty string."""
        return self.lines[0] if self.lines else ""

    @classmethod
    def success(cls, value: str) -> CommandResult:
        """Build a successful single-line result."""
        return cls(exit_code=0, lines=[value])

    @classmethod
    def failure(cls, error: BooknotesError) -> CommandResult:
        """Build a failed result from an application error."""
        return cls(exit_code=error.exit_code, lines=[error.message], error=error.code)
