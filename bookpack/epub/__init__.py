"""
EPUB Module
Provides the build state, build steps and orchestration of an EPUB package.
"""

from bookpack.file.manager import EpubLayout
from .models import Book, BookMetadata, ManifestEntry, NavEntry, EpubChapter, EpubResource
from .resources import FileResource, collect_resources
from .chapter import Chapter
from .templates import load_template, render_template
from .importer import select_images, copy_images
from .pages import (
    emit_page,
    build_container,
    build_cover_page,
    build_toc_nav,
    build_epub_css,
    build_toc_ncx,
    build_package_descriptor
)
from .chapters import check_slugs, build_chapters
from .builder import Epub

__all__ = [
    # Models
    'Book',
    'BookMetadata',
    'ManifestEntry',
    'NavEntry',
    'EpubChapter',
    'EpubResource',
    'EpubLayout',
    # Resources
    'FileResource',
    'collect_resources',
    'Chapter',
    # Templates
    'load_template',
    'render_template',
    # Steps
    'select_images',
    'copy_images',
    'emit_page',
    'build_container',
    'build_cover_page',
    'build_toc_nav',
    'build_epub_css',
    'build_toc_ncx',
    'build_package_descriptor',
    'check_slugs',
    'build_chapters',
    # Orchestration
    'Epub',
]
