"""
Tests for bookpack/file/manager.py

Tests the layout builder: reset_directory, clear_directory, build_epub_dir.
"""

import os
import pytest
from pathlib import Path
from bookpack.core.exceptions import ValidationError
from bookpack.file.manager import EpubLayout, reset_directory, clear_directory, build_epub_dir


def snapshot(root: Path):
    """Return every path below root with file contents."""
    return sorted(
        (str(p.relative_to(root)), p.read_bytes() if p.is_file() else None)
        for p in root.rglob('*')
    )


# ============================================================================
# Tests for reset_directory()
# ============================================================================

@pytest.mark.unit
class TestResetDirectory:
    """Test the guarded directory reset."""

    @pytest.mark.parametrize("name", ["", "/", "/tmp", ".", "..", ".hidden", "1st", "_build", "-x"])
    def test_rejects_invalid_names(self, temp_dir, name):
        """Names not starting with an ASCII letter leave the filesystem unchanged."""
        (temp_dir / ".hidden").mkdir()
        (temp_dir / ".hidden" / "keep.txt").write_text("keep")
        (temp_dir / "1st").mkdir()
        before = snapshot(temp_dir)

        assert reset_directory(name, str(temp_dir)) is False
        assert snapshot(temp_dir) == before

    def test_rejects_without_parent(self, temp_dir, monkeypatch):
        """Relative names are rejected the same way when no parent is given."""
        monkeypatch.chdir(temp_dir)
        (temp_dir / "data.txt").write_text("data")
        before = snapshot(temp_dir)

        assert reset_directory(".") is False
        assert reset_directory("") is False
        assert snapshot(temp_dir) == before

    def test_creates_missing_directory(self, temp_dir):
        """A missing directory is created."""
        assert reset_directory("OEBPS", str(temp_dir)) is True
        assert (temp_dir / "OEBPS").is_dir()

    def test_empties_existing_directory(self, temp_dir):
        """An existing directory is removed with its contents and recreated."""
        target = temp_dir / "OEBPS"
        (target / "nested").mkdir(parents=True)
        (target / "nested" / "old.xhtml").write_text("old")

        assert reset_directory("OEBPS", str(temp_dir)) is True
        assert target.is_dir()
        assert list(target.iterdir()) == []

    def test_nested_name(self, temp_dir):
        """Slash separated names resolve below the parent."""
        (temp_dir / "assets").mkdir()
        assert reset_directory("assets/images", str(temp_dir)) is True
        assert (temp_dir / "assets" / "images").is_dir()

    def test_relative_to_cwd(self, temp_dir, monkeypatch):
        """Without a parent the name is relative to the working directory."""
        monkeypatch.chdir(temp_dir)
        assert reset_directory("META-INF") is True
        assert (temp_dir / "META-INF").is_dir()


# ============================================================================
# Tests for clear_directory()
# ============================================================================

@pytest.mark.unit
class TestClearDirectory:
    """Test clearing of the output root."""

    def test_creates_missing_root(self, temp_dir):
        """A missing output root is created."""
        root = temp_dir / "out" / "book"
        clear_directory(str(root))
        assert root.is_dir()

    def test_removes_everything(self, temp_dir):
        """Files, hidden files and directories are removed."""
        (temp_dir / "a.txt").write_text("a")
        (temp_dir / ".hidden").write_text("h")
        (temp_dir / "sub" / "deep").mkdir(parents=True)

        clear_directory(str(temp_dir))

        assert temp_dir.is_dir()
        assert list(temp_dir.iterdir()) == []

    def test_rejects_empty_path(self):
        """An empty path is a validation error."""
        with pytest.raises(ValidationError):
            clear_directory("")

    def test_rejects_filesystem_root(self):
        """The filesystem root is never cleared."""
        with pytest.raises(ValidationError):
            clear_directory(os.sep)

    def test_rejects_home(self, temp_dir, monkeypatch):
        """The home directory is never cleared."""
        monkeypatch.setenv("HOME", str(temp_dir))
        (temp_dir / "precious.txt").write_text("x")

        with pytest.raises(ValidationError):
            clear_directory(str(temp_dir))
        assert (temp_dir / "precious.txt").exists()


# ============================================================================
# Tests for build_epub_dir()
# ============================================================================

@pytest.mark.unit
class TestBuildEpubDir:
    """Test creation of the package skeleton."""

    def test_creates_skeleton(self, output_dir):
        """All package directories exist after the call."""
        layout = build_epub_dir(str(output_dir))

        assert sorted(p.name for p in output_dir.iterdir()) == ["META-INF", "OEBPS"]
        assert Path(layout.meta_inf).is_dir()
        assert Path(layout.images).is_dir()
        assert Path(layout.stylesheets).is_dir()
        assert Path(layout.fonts).is_dir()
        assert Path(layout.images) == output_dir / "OEBPS" / "assets" / "images"

    def test_clears_previous_output(self, output_dir):
        """Leftover files from an earlier build are deleted."""
        (output_dir / "OEBPS" / "assets" / "images").mkdir(parents=True)
        (output_dir / "OEBPS" / "assets" / "images" / "stale.png").write_bytes(b"x")
        (output_dir / "stray.txt").write_text("stray")

        build_epub_dir(str(output_dir))

        assert not (output_dir / "stray.txt").exists()
        assert list((output_dir / "OEBPS" / "assets" / "images").iterdir()) == []

    def test_does_not_change_cwd(self, output_dir):
        """The working directory is left alone."""
        cwd = os.getcwd()
        build_epub_dir(str(output_dir))
        assert os.getcwd() == cwd

    def test_layout_paths_are_absolute(self, temp_dir, monkeypatch):
        """Relative output paths are resolved against the working directory."""
        monkeypatch.chdir(temp_dir)
        layout = EpubLayout.for_root("build")
        assert os.path.isabs(layout.root)
        assert os.path.basename(layout.root) == "build"
        assert layout.oebps == os.path.join(layout.root, "OEBPS")


@pytest.mark.unit
class TestResetDirectoryLogging:
    """Test that rejected names are reported."""

    def test_rejection_is_logged(self, temp_dir, caplog):
        with caplog.at_level("WARNING", logger="bookpack.file.manager"):
            reset_directory(".git", str(temp_dir))
        assert "invalid name" in caplog.text


@pytest.mark.unit
class TestResetDirectoryOverFile:
    """Test resetting a path currently taken by a file."""

    def test_replaces_regular_file(self, temp_dir):
        (temp_dir / "OEBPS").write_text("not a directory")
        assert reset_directory("OEBPS", str(temp_dir)) is True
        assert (temp_dir / "OEBPS").is_dir()
