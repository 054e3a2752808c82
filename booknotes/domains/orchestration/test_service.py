"""
Tests for the orchestration service and command results.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from booknotes.config.errors import ErrorCode, MissingArgumentError
from booknotes.config.settings import MissingFieldPolicy, Settings
from booknotes.domains.extraction import ExtractedField, FieldLabel

from .models import CommandResult
from .service import BooknotesService, get_author, get_title

TITLE = "Above the Clouds: How I Carved My Own Path to the Top of the World"


@pytest.fixture
def notes_file(tmp_path: Path) -> Path:
    """Write a notes file with both fields."""
    path = tmp_path / "notes.md"
    path.write_text(
        "## Metadata\n"
        "- Author: Kilian Jornet\n"
        f"- Full Title: {TITLE}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def author_only_file(tmp_path: Path) -> Path:
    """Write a notes file without a Full Title line."""
    path = tmp_path / "author-only.md"
    path.write_text("## Metadata\n- Author: Kilian Jornet\n", encoding="utf-8")
    return path


@pytest.fixture
def service() -> BooknotesService:
    """Create a service with default settings."""
    return BooknotesService(settings=Settings(_env_file=None))


@pytest.fixture
def strict_service() -> BooknotesService:
    """Create a service that fails on absent fields."""
    return BooknotesService(
        settings=Settings(_env_file=None, missing_field_policy=MissingFieldPolicy.ERROR)
    )


# --- CommandResult Tests ---


def test_command_result_success() -> None:
    """Test CommandResult.success builds a zero-exit result."""
    result = CommandResult.success("Kilian Jornet")
    assert result.ok is True
    assert result.exit_code == 0
    assert result.first_line == "Kilian Jornet"
    assert result.error is None


def test_command_result_failure() -> None:
    """Test CommandResult.failure copies message and exit code."""
    result = CommandResult.failure(MissingArgumentError())
    assert result.ok is False
    assert result.exit_code == 1
    assert result.lines == ["Missing argument file"]
    assert result.error is ErrorCode.MISSING_ARGUMENT


def test_command_result_first_line_empty() -> None:
    """Test first_line on a result without output."""
    assert CommandResult().first_line == ""


# --- Missing Argument Tests ---


@pytest.mark.parametrize("path", [None, ""])
def test_get_author_missing_argument(service: BooknotesService, path: str | None) -> None:
    """Test get_author without a path."""
    result = service.get_author(path)
    assert result.exit_code == 1
    assert result.first_line == "Missing argument file"


@pytest.mark.parametrize("path", [None, ""])
def test_get_title_missing_argument(service: BooknotesService, path: str | None) -> None:
    """Test get_title without a path."""
    result = service.get_title(path)
    assert result.exit_code == 1
    assert result.first_line == "Missing argument file"


# --- Extraction Tests ---


def test_get_author(service: BooknotesService, notes_file: Path) -> None:
    """Test get_author prints the author."""
    result = service.get_author(str(notes_file))
    assert result.exit_code == 0
    assert result.lines == ["Kilian Jornet"]


def test_get_title(service: BooknotesService, notes_file: Path) -> None:
    """Test get_title keeps the colon inside the title."""
    result = service.get_title(notes_file)
    assert result.exit_code == 0
    assert result.first_line == TITLE


def test_commands_are_idempotent(service: BooknotesService, notes_file: Path) -> None:
    """Test repeated calls give identical results."""
    assert service.get_author(notes_file) == service.get_author(notes_file)
    assert service.get_title(notes_file) == service.get_title(notes_file)


def test_get_title_absent_empty_policy(
    service: BooknotesService, author_only_file: Path
) -> None:
    """Test an absent title yields an empty successful line by default."""
    assert service.get_author(author_only_file).first_line == "Kilian Jornet"

    result = service.get_title(author_only_file)
    assert result.exit_code == 0
    assert result.lines == [""]


def test_get_title_absent_error_policy(
    strict_service: BooknotesService, author_only_file: Path
) -> None:
    """Test an absent title fails under the ERROR policy."""
    result = strict_service.get_title(author_only_file)
    assert result.exit_code == 3
    assert result.first_line == "Field not found: Full Title"
    assert result.error is ErrorCode.FIELD_NOT_FOUND

    assert strict_service.get_author(author_only_file).ok is True


def test_get_field_nonexistent_file(service: BooknotesService, tmp_path: Path) -> None:
    """Test a missing file is reported distinctly."""
    missing = tmp_path / "missing.md"
    result = service.get_field(missing, "Author")
    assert result.exit_code == 2
    assert result.first_line == f"File not found: {missing}"
    assert result.error is ErrorCode.FILE_NOT_FOUND


def test_get_field_undecodable_file(service: BooknotesService, tmp_path: Path) -> None:
    """Test undecodable content is reported as unreadable."""
    path = tmp_path / "latin1.md"
    path.write_bytes("- Author: Jos\xe9".encode("latin-1"))
    result = service.get_field(path, "Author")
    assert result.exit_code == 2
    assert result.error is ErrorCode.FILE_UNREADABLE


def test_get_field_respects_encoding(tmp_path: Path) -> None:
    """Test the configured encoding is used to read documents."""
    path = tmp_path / "latin1.md"
    path.write_bytes("- Author: Jos\xe9\n".encode("latin-1"))
    service = BooknotesService(settings=Settings(_env_file=None, encoding="latin-1"))
    assert service.get_author(path).first_line == "Jos\xe9"


def test_nonexistent_file_passes_without_existence_check(tmp_path: Path) -> None:
    """Test check_exists=False defers failure to the read step."""
    service = BooknotesService(settings=Settings(_env_file=None, check_exists=False))
    result = service.get_author(tmp_path / "missing.md")
    assert result.exit_code == 2
    assert result.error is ErrorCode.FILE_UNREADABLE


def test_get_fields(service: BooknotesService, notes_file: Path) -> None:
    """Test get_fields reads once and returns every label."""
    fields = service.get_fields(notes_file, [FieldLabel.AUTHOR, "Full Title", "ISBN"])
    assert fields["Author"].value == "Kilian Jornet"
    assert fields["Full Title"].value == TITLE
    assert fields["ISBN"].found is False


def test_get_fields_raises_on_missing_argument(service: BooknotesService) -> None:
    """Test the library-level API raises instead of encoding errors."""
    with pytest.raises(MissingArgumentError):
        service.get_fields(None, [FieldLabel.AUTHOR])


def test_service_uses_injected_components(notes_file: Path) -> None:
    """Test validator and extractor can be injected."""
    validator = MagicMock()
    validator.validate.return_value = notes_file
    extractor = MagicMock()
    extractor.extract.return_value = ExtractedField(label="Author", value="Someone")

    service = BooknotesService(
        validator=validator, extractor=extractor, settings=Settings(_env_file=None)
    )
    result = service.get_author("anything.md")

    assert result.first_line == "Someone"
    validator.validate.assert_called_once_with("anything.md")
    extractor.extract.assert_called_once()


# --- Module Function Tests ---


def test_module_level_helpers(notes_file: Path) -> None:
    """Test get_author/get_title convenience functions."""
    assert get_author(notes_file).first_line == "Kilian Jornet"
    assert get_title(notes_file).first_line == TITLE
    assert get_author().first_line == "Missing argument file"
