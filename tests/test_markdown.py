"""Tests for splicing generated tables into READMEs."""

from pathlib import Path

import pytest

from tsdoc_readme.output.markdown import (
    END_TOKEN,
    START_TOKEN,
    ReadmeWriter,
    insert_table,
)

README = (
    "# Drawer\n"
    "\n"
    "## API\n"
    "\n"
    f"{START_TOKEN}\n"
    "placeholder\n"
    "more placeholder\n"
    f"{END_TOKEN}\n"
    "\n"
    "## Footer\n"
)


@pytest.fixture
def writer() -> ReadmeWriter:
    """Create a ReadmeWriter instance."""
    return ReadmeWriter()


@pytest.fixture
def readme(tmp_path: Path) -> Path:
    """Create a README with a generated section."""
    path = tmp_path / "README.md"
    path.write_text(README, encoding="utf-8")
    return path


class TestInsertTable:
    """Tests for the region replacement."""

    def test_sentinel_text(self) -> None:
        assert START_TOKEN == (
            "<!-- docgen-tsdoc-replacer:start "
            "__DO NOT EDIT, This section is automatically generated__ -->"
        )
        assert END_TOKEN == "<!-- docgen-tsdoc-replacer:end -->"

    def test_replaces_region(self) -> None:
        updated, count = insert_table(README, "TABLE")
        assert count == 1
        assert f"{START_TOKEN}\nTABLE\n{END_TOKEN}\n" in updated
        assert "placeholder" not in updated

    def test_surrounding_text_preserved(self) -> None:
        updated, _ = insert_table(README, "TABLE")
        assert updated.startswith("# Drawer\n\n## API\n\n")
        assert updated.endswith("\n\n## Footer\n")

    def test_backslashes_inserted_literally(self) -> None:
        updated, _ = insert_table(README, r"`a\1b` | \n \g<0>")
        assert r"`a\1b` | \n \g<0>" in updated

    def test_empty_region(self) -> None:
        readme = f"{START_TOKEN}\n{END_TOKEN}\n"
        updated, count = insert_table(readme, "TABLE")
        assert count == 1
        assert updated == f"{START_TOKEN}\nTABLE\n{END_TOKEN}\n"

    def test_start_token_must_begin_line(self) -> None:
        readme = f"text {START_TOKEN}\nplaceholder\n{END_TOKEN}\n"
        updated, count = insert_table(readme, "TABLE")
        assert count == 0
        assert updated == readme

    def test_missing_markers(self) -> None:
        updated, count = insert_table("# No markers\n", "TABLE")
        assert count == 0
        assert updated == "# No markers\n"

    def test_idempotent(self) -> None:
        once, _ = insert_table(README, "| a | b |")
        twice, _ = insert_table(once, "| a | b |")
        assert once == twice


class TestReadmeWriter:
    """Tests for rewriting README files."""

    def test_write(self, writer: ReadmeWriter, readme: Path) -> None:
        assert writer.write(readme, "TABLE") is True
        content = readme.read_text(encoding="utf-8")
        assert f"{START_TOKEN}\nTABLE\n{END_TOKEN}" in content

    def test_write_twice_byte_identical(
        self, writer: ReadmeWriter, readme: Path
    ) -> None:
        writer.write(readme, "TABLE")
        first = readme.read_bytes()
        writer.write(readme, "TABLE")
        assert readme.read_bytes() == first

    def test_missing_file_logged(
        self,
        writer: ReadmeWriter,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level("ERROR"):
            result = writer.write(tmp_path / "missing" / "README.md", "TABLE")
        assert result is False
        assert "Could not read" in caplog.text

    def test_no_markers_left_unchanged(
        self,
        writer: ReadmeWriter,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = tmp_path / "README.md"
        path.write_text("# Plain\n", encoding="utf-8")
        with caplog.at_level("INFO", logger="tsdoc_readme"):
            result = writer.write(path, "TABLE")
        assert result is False
        assert path.read_text(encoding="utf-8") == "# Plain\n"
        assert "No generated section markers" in caplog.text
        assert "~~ generated" not in caplog.text

    def test_crlf_without_markers_keeps_bytes(
        self, writer: ReadmeWriter, tmp_path: Path
    ) -> None:
        path = tmp_path / "README.md"
        original = b"# Drawer\r\n\r\nNo markers here.\r\n"
        path.write_bytes(original)
        assert writer.write(path, "TABLE") is False
        assert path.read_bytes() == original

    def test_crlf_line_endings_kept(self, writer: ReadmeWriter, tmp_path: Path) -> None:
        path = tmp_path / "README.md"
        path.write_bytes(
            f"# Drawer\r\n\r\n{START_TOKEN}\r\nold\r\n{END_TOKEN}\r\n\r\n"
            "## Footer\r\n".encode("utf-8")
        )
        assert writer.write(path, "| a |\n| b |") is True
        assert path.read_bytes() == (
            f"# Drawer\r\n\r\n{START_TOKEN}\r\n| a |\r\n| b |\r\n{END_TOKEN}\r\n\r\n"
            "## Footer\r\n".encode("utf-8")
        )
