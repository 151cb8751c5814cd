"""Tests for file-backed age sources."""

import tempfile
from pathlib import Path

import pytest

from age_census.source import DirectorySourceFactory, FileAgeSource, parse_age_line


def test_parse_age_line_valid() -> None:
    assert parse_age_line(b"42\n") == 42
    assert parse_age_line(b"  7 \r\n") == 7
    assert parse_age_line(b"-1\n") == -1


def test_parse_age_line_blank() -> None:
    assert parse_age_line(b"") is None
    assert parse_age_line(b"\n") is None
    assert parse_age_line(b"   \n") is None


def test_parse_age_line_invalid() -> None:
    with pytest.raises(ValueError):
        parse_age_line(b"forty\n")


class TestFileAgeSource:
    """Test cases for FileAgeSource."""

    def test_yields_ages_and_skips_blank_lines(self) -> None:
        """Blank lines are skipped; negatives are passed through to the caller."""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".txt", delete=False, encoding="utf-8"
        ) as f:
            f.write("10\n")
            f.write("\n")
            f.write("-1\n")
            f.write("15")  # No trailing newline
            path = f.name

        try:
            source = FileAgeSource(path)
            try:
                assert list(source) == [10, -1, 15]
            finally:
                source.close()
        finally:
            Path(path).unlink()

    def test_close_is_idempotent(self) -> None:
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".txt", delete=False, encoding="utf-8"
        ) as f:
            f.write("1\n")
            path = f.name

        try:
            source = FileAgeSource(path)
            assert not source.closed
            source.close()
            source.close()
            assert source.closed
        finally:
            Path(path).unlink()

    def test_missing_file_fails_at_open(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            FileAgeSource(tmp_path / "missing.txt")


class TestDirectorySourceFactory:
    """Test cases for DirectorySourceFactory."""

    def test_maps_region_to_file(self, tmp_path) -> None:
        (tmp_path / "north.txt").write_text("3\n4\n", encoding="utf-8")
        factory = DirectorySourceFactory(tmp_path)

        assert factory.path_for("north") == tmp_path / "north.txt"

        source = factory("north")
        try:
            assert list(source) == [3, 4]
        finally:
            source.close()

    def test_custom_suffix(self, tmp_path) -> None:
        factory = DirectorySourceFactory(tmp_path, suffix=".ages")
        assert factory.path_for("south") == tmp_path / "south.ages"

    def test_rejects_path_like_regions(self, tmp_path) -> None:
        factory = DirectorySourceFactory(tmp_path)

        for region in ["../secret", "a/b", ""]:
            with pytest.raises(ValueError):
                factory.path_for(region)
