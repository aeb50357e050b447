"""
EPUB Chapters Module
Writes each chapter file and registers its manifest and navigation entries.
"""

import os
import logging
from dataclasses import replace
from typing import Sequence, List

from bookpack.core.exceptions import SlugCollisionError
from bookpack.file.manager import EpubLayout
from .models import Book, EpubChapter, NavEntry

logger = logging.getLogger(__name__)

# Play orders 0 and 1 belong to the cover and the table of contents
FIRST_CHAPTER_PLAY_ORDER = 2


def check_slugs(chapters: Sequence[EpubChapter]) -> None:
    """
    Make sure no two chapters are written to the same file.

    Raises:
        SlugCollisionError: On the first slug shared by two chapters
    """
    seen = {}
    for chapter in chapters:
        slug = chapter.slug()
        if slug in seen:
            raise SlugCollisionError(slug, seen[slug], chapter.title)
        seen[slug] = chapter.title


def build_chapters(chapters: Sequence[EpubChapter], book: Book, layout: EpubLayout) -> List[NavEntry]:
    """
    Write every chapter to OEBPS/<slug>.xhtml and register it.

    The chapter at position index gets nav id np_<index> and play order
    index + 2. Slugs are checked for collisions before anything is written.

    Args:
        chapters: Chapters in reading order
        book: Build state receiving the entries
        layout: Package layout to write into

    Returns:
        list: Navigation entries registered, in order
    """
    check_slugs(chapters)
    navpoints = []

    for index, chapter in enumerate(chapters):
        path = os.path.join(layout.oebps, f"{chapter.slug()}.xhtml")
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(chapter.format_for_epub())

        item = chapter.manifest_item()
        navpoint = replace(
            chapter.navpoint(),
            id=f"np_{index}",
            play_order=index + FIRST_CHAPTER_PLAY_ORDER
        )

        book.add_navpoint(navpoint)
        book.add_item(item)
        navpoints.append(navpoint)
        logger.debug(f"Wrote chapter {chapter.title!r} to {path}")

    logger.info(f"Wrote {len(navpoints)} chapter(s)")
    return navpoints
