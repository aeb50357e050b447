"""
EPUB Pages Module
Writes the template-rendered and static pages of the package and registers
their manifest and navigation entries.
"""

import os
import logging
from typing import Optional

from bookpack.conf import (
    XHTML_MEDIA_TYPE, NCX_MEDIA_TYPE, CSS_MEDIA_TYPE,
    NAV_PROPERTY, STYLESHEETS_DIR, stylesheet_name
)
from bookpack.file.manager import EpubLayout
from .models import Book, ManifestEntry, NavEntry
from .templates import render_template, read_static

logger = logging.getLogger(__name__)

COVER_PLAY_ORDER = 0
TOC_PLAY_ORDER = 1


def _write_text(path: str, text: str) -> str:
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(text)
    logger.debug(f"Wrote {path}")
    return path


def emit_page(template_name: str, book: Book, layout: EpubLayout,
              templates_dir: Optional[str] = None) -> str:
    """
    Render a template against the book and write it into OEBPS.

    The template sees the build state as the single variable 'book' and
    the output file carries the template's logical name.

    Args:
        template_name: Logical template name, e.g. 'toc.xhtml'
        book: Build state exposed to the template
        layout: Package layout to write into
        templates_dir: Template directory override

    Returns:
        str: Path of the written file
    """
    rendered = render_template(template_name, templates_dir, book=book)
    return _write_text(os.path.join(layout.oebps, template_name), rendered)


def build_container(layout: EpubLayout, templates_dir: Optional[str] = None) -> str:
    """Write META-INF/container.xml pointing readers at the package descriptor."""
    logger.info("Writing container descriptor")
    rendered = render_template('container.xml', templates_dir)
    return _write_text(os.path.join(layout.meta_inf, 'container.xml'), rendered)


def build_cover_page(book: Book, layout: EpubLayout, templates_dir: Optional[str] = None) -> bool:
    """
    Write cover.xhtml and register it at play order 0.

    Returns:
        bool: False if the book has no cover, True otherwise
    """
    if not book.cover:
        return False

    logger.info(f"Writing cover page for {book.cover}")
    if book.cover_item is None:
        logger.warning(f"Cover {book.cover} matches no imported image")
    emit_page('cover.xhtml', book, layout, templates_dir)
    book.add_item(ManifestEntry(
        id='coverpage',
        href='cover.xhtml',
        media_type=XHTML_MEDIA_TYPE
    ))
    book.add_navpoint(NavEntry(
        src='cover.xhtml',
        text='Cover',
        id='coverpage',
        play_order=COVER_PLAY_ORDER
    ))
    return True


def build_toc_nav(book: Book, layout: EpubLayout, templates_dir: Optional[str] = None) -> str:
    """Write the navigation document toc.xhtml and register it at play order 1."""
    logger.info("Writing table of contents")
    path = emit_page('toc.xhtml', book, layout, templates_dir)
    book.add_item(ManifestEntry(
        id='toc',
        href='toc.xhtml',
        media_type=XHTML_MEDIA_TYPE,
        properties=NAV_PROPERTY
    ))
    book.add_navpoint(NavEntry(
        src='toc.xhtml',
        text='Contents',
        id='toc',
        play_order=TOC_PLAY_ORDER
    ))
    return path


def build_epub_css(book: Book, layout: EpubLayout, extra_css: Optional[str] = None,
                   templates_dir: Optional[str] = None) -> str:
    """
    Copy the package stylesheet and register it.

    Args:
        book: Build state receiving the manifest entry
        layout: Package layout to write into
        extra_css: Path of a user stylesheet appended after the default rules
        templates_dir: Template directory override

    Returns:
        str: Path of the written stylesheet
    """
    logger.info("Writing stylesheet")
    css = read_static(stylesheet_name, templates_dir)
    if extra_css:
        with open(extra_css, 'r', encoding='utf-8') as f:
            custom = f.read()
        if css and not css.endswith('\n'):
            css += '\n'
        css += custom

    path = _write_text(os.path.join(layout.stylesheets, stylesheet_name), css)
    book.add_item(ManifestEntry(
        id=stylesheet_name,
        href=f"{STYLESHEETS_DIR}/{stylesheet_name}",
        media_type=CSS_MEDIA_TYPE
    ))
    return path


def build_toc_ncx(book: Book, layout: EpubLayout, templates_dir: Optional[str] = None) -> str:
    """Write the navigation control file toc.ncx and register it."""
    logger.info(f"Writing navigation control file with {len(book.navmap)} navigation points")
    path = emit_page('toc.ncx', book, layout, templates_dir)
    book.add_item(ManifestEntry(
        id='toc.ncx',
        href='toc.ncx',
        media_type=NCX_MEDIA_TYPE
    ))
    return path


def build_package_descriptor(book: Book, layout: EpubLayout, templates_dir: Optional[str] = None) -> str:
    """
    Write content.opf from the complete manifest and navigation map.

    The package descriptor is not listed in its own manifest.
    """
    logger.info(f"Writing package descriptor with {len(book.manifest)} manifest entries")
    return emit_page('content.opf', book, layout, templates_dir)
