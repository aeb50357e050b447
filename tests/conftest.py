"""
Pytest configuration and shared fixtures.

This module provides:
- Temporary directory fixtures
- A small rendered site with images and other resources
- Chapter and book factories
"""
import sys
from pathlib import Path
from typing import List
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from bookpack.epub.models import Book, BookMetadata
from bookpack.epub.chapter import Chapter
from bookpack.epub.resources import FileResource, collect_resources
from bookpack.file.manager import EpubLayout, build_epub_dir

# Smallest valid PNG: 1x1 transparent pixel
PNG_BYTES = bytes.fromhex(
    '89504e470d0a1a0a0000000d4948445200000001000000010806000000'
    '1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082'
)


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Return a fresh temporary directory."""
    return tmp_path


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """
    Create a rendered site with one image, the images placeholder and a
    few resources that must not be imported.
    """
    site = tmp_path / "site"
    images = site / "assets" / "images"
    images.mkdir(parents=True)
    (images / "foo.png").write_bytes(PNG_BYTES)
    (images / ".keep").write_bytes(b"")
    (site / "assets" / "stylesheets").mkdir(parents=True)
    (site / "assets" / "stylesheets" / "site.css").write_text("body { color: red; }\n")
    (site / "index.html").write_text("<html><body>Home</body></html>\n")
    return site


@pytest.fixture
def resources(site_dir: Path) -> List[FileResource]:
    """Return the site resources in sorted path order."""
    return collect_resources(str(site_dir))


@pytest.fixture
def chapters() -> List[Chapter]:
    """Return the two chapters used by most build scenarios."""
    return [
        Chapter(index=0, title="Intro", body="<h1>Intro</h1><p>Hello.</p>"),
        Chapter(index=1, title="Conclusion", body="<h1>Conclusion</h1><p>Goodbye.</p>"),
    ]


@pytest.fixture
def book() -> Book:
    """Return a book without cover."""
    return Book(metadata=BookMetadata(
        title="Test Book",
        identifier="urn:uuid:12345678-1234-5678-1234-567812345678",
        creator="Test Author",
        modified="2024-01-01T00:00:00Z"
    ))


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return a not yet existing output root."""
    return tmp_path / "build"


@pytest.fixture
def layout(output_dir: Path) -> EpubLayout:
    """Return a freshly created package layout."""
    return build_epub_dir(str(output_dir))
