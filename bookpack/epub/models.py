"""
EPUB Models Module
Defines the build state shared by every step and the capabilities expected
from chapters and resources.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Protocol, runtime_checkable

from bookpack.conf import default_language, COVER_IMAGE_PROPERTY
from bookpack.core.exceptions import DuplicateEntryError


@dataclass(frozen=True)
class ManifestEntry:
    """
    One file of the package as listed in the package descriptor.
    """
    id: str
    href: str
    media_type: str
    properties: Optional[str] = None  # 'cover-image', 'nav'


@dataclass(frozen=True)
class NavEntry:
    """
    One navigable destination. Chapters describe src and text only;
    id and play_order are assigned by the build.
    """
    src: str
    text: str
    id: Optional[str] = None
    play_order: Optional[int] = None


@runtime_checkable
class EpubChapter(Protocol):
    """Capabilities the chapter emitter needs from a chapter."""

    title: str

    def slug(self) -> str: ...

    def format_for_epub(self) -> str: ...

    def manifest_item(self) -> ManifestEntry: ...

    def navpoint(self) -> NavEntry: ...


@runtime_checkable
class EpubResource(Protocol):
    """Capabilities the resource importer needs from a resource."""

    path: str
    basename: str
    content_type: str

    def render(self) -> bytes: ...


@dataclass
class BookMetadata:
    """
    Represents the publication metadata written to the package descriptor.
    """
    title: str = 'Untitled'
    identifier: str = 'urn:uuid:00000000-0000-0000-0000-000000000000'
    language: str = default_language
    creator: Optional[str] = None  # Author
    publisher: Optional[str] = None
    description: Optional[str] = None
    rights: Optional[str] = None  # Copyright
    date: Optional[str] = None
    modified: Optional[str] = None  # dcterms:modified, e.g. 2024-01-01T00:00:00Z

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to dictionary."""
        return {
            'title': self.title,
            'identifier': self.identifier,
            'language': self.language,
            'creator': self.creator,
            'publisher': self.publisher,
            'description': self.description,
            'rights': self.rights,
            'date': self.date,
            'modified': self.modified
        }


@dataclass
class Book:
    """
    Build state of one package: metadata, the cover filename, the chapters
    being built and the manifest and navigation map accumulated by each step.
    """
    metadata: BookMetadata = field(default_factory=BookMetadata)
    cover: Optional[str] = None  # basename of the cover image
    chapters: List[Any] = field(default_factory=list)
    manifest: List[ManifestEntry] = field(default_factory=list)
    navmap: List[NavEntry] = field(default_factory=list)

    def add_item(self, item: ManifestEntry) -> ManifestEntry:
        """
        Register a manifest entry.

        Raises:
            DuplicateEntryError: If the id is already in the manifest
        """
        if any(existing.id == item.id for existing in self.manifest):
            raise DuplicateEntryError(f"Manifest id already registered: {item.id}")
        self.manifest.append(item)
        return item

    def add_navpoint(self, navpoint: NavEntry) -> NavEntry:
        """
        Register a navigation entry.

        Raises:
            DuplicateEntryError: If id or play order is missing or already used
        """
        if navpoint.id is None or navpoint.play_order is None:
            raise DuplicateEntryError(f"Nav entry for {navpoint.src} has no id or play order")
        for existing in self.navmap:
            if existing.id == navpoint.id:
                raise DuplicateEntryError(f"Nav id already registered: {navpoint.id}")
            if existing.play_order == navpoint.play_order:
                raise DuplicateEntryError(
                    f"Play order {navpoint.play_order} already used by {existing.id}"
                )
        self.navmap.append(navpoint)
        return navpoint

    def clear(self):
        """Forget every manifest and navigation entry."""
        self.manifest.clear()
        self.navmap.clear()

    @property
    def cover_item(self) -> Optional[ManifestEntry]:
        """Manifest entry of the cover image, if one was imported."""
        for item in self.manifest:
            if item.properties == COVER_IMAGE_PROPERTY:
                return item
        return None

    @property
    def spine(self) -> List[ManifestEntry]:
        """Manifest entries of the navigable pages in reading order."""
        by_href = {item.href: item for item in self.manifest}
        ordered = sorted(self.navmap, key=lambda point: point.play_order)
        return [by_href[point.src] for point in ordered if point.src in by_href]
