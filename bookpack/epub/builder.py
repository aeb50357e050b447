"""
EPUB Builder Module
Runs the fixed sequence of steps that turns a book, its chapters and the
site resources into a complete unpacked EPUB package.
"""

import os
import logging
from typing import Iterable, List, Optional, Sequence

from bookpack.file.manager import EpubLayout, build_epub_dir
from .models import Book, EpubChapter, EpubResource
from .importer import copy_images
from .chapters import build_chapters
from .pages import (
    build_container,
    build_cover_page,
    build_toc_nav,
    build_epub_css,
    build_toc_ncx,
    build_package_descriptor
)

logger = logging.getLogger(__name__)


class Epub:
    """
    Builds one EPUB package directory.

    Steps run in a fixed order and each one finishes before the next
    starts. toc.ncx and content.opf come last because they serialize the
    complete manifest and navigation map. A failing step propagates its
    exception and leaves the partial output in place.
    """

    def __init__(
        self,
        book: Book,
        chapters: Sequence[EpubChapter],
        output_path: str,
        templates_dir: Optional[str] = None,
        extra_css: Optional[str] = None
    ):
        """
        Args:
            book: Build state; its manifest and navmap are rebuilt by build()
            chapters: Chapters in reading order
            output_path: Output root; its previous contents are deleted
            templates_dir: Template directory override
            extra_css: User stylesheet appended to epub.css
        """
        self.book = book
        self.chapters = list(chapters)
        self.output_path = output_path
        self.templates_dir = templates_dir
        self.extra_css = extra_css
        self.layout: Optional[EpubLayout] = None

    def build(self, resources: Iterable[EpubResource]) -> EpubLayout:
        """
        Build the complete package.

        Args:
            resources: Site resources; images among them are imported

        Returns:
            EpubLayout: Paths of the built package
        """
        logger.info(f"Building EPUB package at {self.output_path}")

        self.book.clear()
        self.book.chapters = self.chapters
        if self.templates_dir:
            for chapter in self.chapters:
                if getattr(chapter, 'templates_dir', False) is None:
                    chapter.templates_dir = self.templates_dir

        self.layout = build_epub_dir(self.output_path)
        copy_images(resources, self.book, self.layout)
        build_container(self.layout, self.templates_dir)
        build_cover_page(self.book, self.layout, self.templates_dir)
        build_toc_nav(self.book, self.layout, self.templates_dir)
        build_chapters(self.chapters, self.book, self.layout)
        build_epub_css(self.book, self.layout, self.extra_css, self.templates_dir)
        build_toc_ncx(self.book, self.layout, self.templates_dir)
        build_package_descriptor(self.book, self.layout, self.templates_dir)

        logger.info(
            f"Built EPUB package: {len(self.book.manifest)} manifest entries, "
            f"{len(self.book.navmap)} navigation points"
        )
        return self.layout

    def missing_files(self) -> List[str]:
        """
        List manifest hrefs that have no file in the built package.

        Returns:
            list: Missing hrefs, empty when every entry resolves
        """
        layout = self.layout or EpubLayout.for_root(self.output_path)
        return [
            item.href for item in self.book.manifest
            if not os.path.isfile(os.path.join(layout.oebps, *item.href.split('/')))
        ]
