"""
bookpack
Assembles unpacked EPUB packages from pre-rendered chapters and resources.
"""

from .epub import (
    Book,
    BookMetadata,
    Chapter,
    Epub,
    EpubLayout,
    FileResource,
    ManifestEntry,
    NavEntry,
    collect_resources,
)

__version__ = '0.3.0'

__all__ = [
    'Book',
    'BookMetadata',
    'Chapter',
    'Epub',
    'EpubLayout',
    'FileResource',
    'ManifestEntry',
    'NavEntry',
    'collect_resources',
    '__version__',
]
