"""Tests for argument validation (core/validation.py).

All functions are pure except ``validate_directory``, which is exercised
against ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from devprep.core.models import default_purposes
from devprep.core.validation import (
    default_output_name,
    normalize_extension,
    parse_depth,
    validate_directory,
    validate_env_name,
    validate_purpose,
)
from devprep.exceptions import InvalidConfigError


# ---------------------------------------------------------------------------
# Environment name
# ---------------------------------------------------------------------------

class TestValidateEnvName:
    @pytest.mark.parametrize("name", ["", "/", "///", ".", ".."])
    def test_rejects_invalid_names(self, name: str) -> None:
        with pytest.raises(InvalidConfigError, match="Invalid environment directory name"):
            validate_env_name(name)

    @pytest.mark.parametrize("name", [".venv", "env", "my-env", "..env", "nested/env"])
    def test_accepts_valid_names(self, name: str) -> None:
        assert validate_env_name(name) == name


# ---------------------------------------------------------------------------
# Purpose
# ---------------------------------------------------------------------------

class TestValidatePurpose:
    @pytest.mark.parametrize("purpose", ["data", "bs4"])
    def test_accepts_known_keys(self, purpose: str) -> None:
        assert validate_purpose(purpose, default_purposes()) == purpose

    @pytest.mark.parametrize("purpose", [None, ""])
    def test_empty_means_no_purpose(self, purpose: str | None) -> None:
        assert validate_purpose(purpose, default_purposes()) is None

    @pytest.mark.parametrize("purpose", ["web", "DATA", "bs", " data"])
    def test_rejects_unknown_keys(self, purpose: str) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            validate_purpose(purpose, default_purposes())
        message = str(exc_info.value)
        assert f"'{purpose}'" in message
        assert "'data' 'bs4'" in message

    def test_uses_injected_table(self) -> None:
        table = {"ml": ("torch",)}
        assert validate_purpose("ml", table) == "ml"
        with pytest.raises(InvalidConfigError, match="'ml'"):
            validate_purpose("data", table)


# ---------------------------------------------------------------------------
# Catalog arguments
# ---------------------------------------------------------------------------

class TestValidateDirectory:
    def test_existing_directory(self, tmp_path: Path) -> None:
        assert validate_directory(str(tmp_path)) == tmp_path

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidConfigError, match="not found or is not a directory"):
            validate_directory(str(tmp_path / "missing"))

    def test_regular_file(self, tmp_path: Path) -> None:
        target = tmp_path / "a.py"
        target.write_text("x = 1\n")
        with pytest.raises(InvalidConfigError):
            validate_directory(str(target))


class TestNormalizeExtension:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("py", "py"), (".py", "py"), ("tar.gz", "tar.gz"), ("..md", ".md")],
    )
    def test_strips_one_leading_dot(self, raw: str, expected: str) -> None:
        assert normalize_extension(raw) == expected

    @pytest.mark.parametrize("raw", ["", "."])
    def test_rejects_empty(self, raw: str) -> None:
        with pytest.raises(InvalidConfigError, match="cannot be empty"):
            normalize_extension(raw)


class TestParseDepth:
    def test_none_is_unlimited(self) -> None:
        assert parse_depth(None) is None

    @pytest.mark.parametrize(("raw", "expected"), [("0", 0), ("3", 3), ("010", 10)])
    def test_non_negative_integers(self, raw: str, expected: int) -> None:
        assert parse_depth(raw) == expected

    @pytest.mark.parametrize("raw", ["-1", "1.5", "abc", "", " 2", "+3", "2 "])
    def test_rejects_everything_else(self, raw: str) -> None:
        with pytest.raises(InvalidConfigError, match="non-negative integer"):
            parse_depth(raw)


class TestDefaultOutputName:
    @pytest.mark.parametrize(
        ("directory", "expected"),
        [
            ("src", "src.md"),
            ("src/", "src.md"),
            ("path/to/project", "project.md"),
            ("/", "output.md"),
            ("", "output.md"),
        ],
    )
    def test_names(self, directory: str, expected: str) -> None:
        assert default_output_name(directory) == expected

    def test_current_directory_uses_its_real_name(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        project = tmp_path / "project"
        project.mkdir()
        monkeypatch.chdir(project)
        assert default_output_name(".") == "project.md"
        assert default_output_name("..") == f"{tmp_path.name}.md"
