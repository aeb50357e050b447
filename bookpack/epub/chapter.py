"""
EPUB Chapter Module
Reference chapter implementation backed by an XHTML body fragment.
"""

from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

from bookpack.conf import XHTML_MEDIA_TYPE
from bookpack.text.utils import slugify
from .models import ManifestEntry, NavEntry
from .templates import render_template


@dataclass
class Chapter:
    """
    Represents a single chapter of the book.
    """
    index: int
    title: str
    body: str = ''  # XHTML fragment placed inside <body>
    language: Optional[str] = None
    templates_dir: Optional[str] = None

    def slug(self) -> str:
        """File stem derived from the title, chapter-<index> for titles without letters."""
        return slugify(self.title) or f"chapter-{self.index}"

    @property
    def filename(self) -> str:
        return f"{self.slug()}.xhtml"

    def format_for_epub(self) -> str:
        """Render the chapter as a complete XHTML document."""
        return render_template('chapter.xhtml', self.templates_dir, chapter=self)

    def manifest_item(self) -> ManifestEntry:
        return ManifestEntry(
            id=f"chapter_{self.index}",
            href=self.filename,
            media_type=XHTML_MEDIA_TYPE
        )

    def navpoint(self) -> NavEntry:
        return NavEntry(src=self.filename, text=self.title)

    @classmethod
    def from_html(cls, index: int, html: str, **kwargs) -> 'Chapter':
        """
        Build a chapter from an HTML document.

        The title comes from <head><title>, falling back to the first <h1>
        and then to 'Chapter <index + 1>'. The body keeps the inner markup
        of <body> (or the whole document if it has none).

        Args:
            index: Position of the chapter in the book
            html: HTML document or fragment

        Returns:
            Chapter: New chapter
        """
        soup = BeautifulSoup(html, 'html.parser')

        title = None
        title_tag = soup.select_one('head > title')
        if title_tag and title_tag.text.strip():
            title = title_tag.text.strip()
        else:
            heading = soup.find('h1')
            if heading and heading.get_text(strip=True):
                title = heading.get_text(strip=True)

        if soup.body is None and soup.head is not None:
            soup.head.decompose()
        body = soup.body if soup.body else soup
        inner = ''.join(str(node) for node in body.contents).strip()

        return cls(
            index=index,
            title=title or f"Chapter {index + 1}",
            body=inner,
            **kwargs
        )
