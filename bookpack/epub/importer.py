"""
EPUB Resource Importer Module
Copies image resources into the package and registers them in the manifest.
"""

import os
import logging
from typing import Iterable, List

from bookpack.conf import IMAGES_PREFIX, IMAGES_PLACEHOLDER, COVER_IMAGE_PROPERTY
from bookpack.core.exceptions import ResourceImportError
from bookpack.file.manager import EpubLayout
from .models import Book, EpubResource, ManifestEntry

logger = logging.getLogger(__name__)


def select_images(resources: Iterable[EpubResource]) -> List[EpubResource]:
    """
    Keep the resources below the images directory, in input order.

    The placeholder file that keeps the directory under version control
    is skipped.

    Args:
        resources: Full resource collection from the site pipeline

    Returns:
        list: Image resources
    """
    return [
        r for r in resources
        if str(r.path).startswith(IMAGES_PREFIX) and str(r.path) != IMAGES_PLACEHOLDER
    ]


def copy_images(resources: Iterable[EpubResource], book: Book, layout: EpubLayout) -> List[ManifestEntry]:
    """
    Copy image resources into the package and add them to the manifest.

    Each image is written below OEBPS at its resource path, so nested
    folders under assets/images are kept, and registered as img_<index>. The image whose basename equals book.cover
    is tagged as the cover image.

    Args:
        resources: Full resource collection from the site pipeline
        book: Build state receiving the manifest entries
        layout: Package layout to write into

    Returns:
        list: Manifest entries registered, in order

    Raises:
        ResourceImportError: If a resource cannot be rendered or written
    """
    images = select_images(resources)
    items = []

    for index, image in enumerate(images):
        filename = image.basename
        destination = os.path.join(layout.oebps, *str(image.path).split('/'))

        try:
            os.makedirs(os.path.dirname(destination), exist_ok=True)
            data = image.render()
            if isinstance(data, str):
                data = data.encode('utf-8')
            with open(destination, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise ResourceImportError(f"Could not import image {image.path}: {e}") from e

        properties = COVER_IMAGE_PROPERTY if filename == book.cover else None
        item = book.add_item(ManifestEntry(
            id=f"img_{index}",
            href=str(image.path),
            media_type=image.content_type,
            properties=properties
        ))
        items.append(item)
        logger.debug(f"Imported {image.path} as {item.id}")

    logger.info(f"Imported {len(items)} image(s)")
    return items
