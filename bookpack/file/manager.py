"""
File Manager Module
Creates and resets the on-disk directory skeleton of an EPUB package.
"""

import os
import shutil
import logging
from dataclasses import dataclass
from typing import Optional

import regex as re

from bookpack.conf import META_INF_DIR, OEBPS_DIR, OEBPS_SUBDIRS, IMAGES_DIR, STYLESHEETS_DIR, FONTS_DIR
from bookpack.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

VALID_START_CHARS = re.compile(r'[A-Za-z]')


@dataclass(frozen=True)
class EpubLayout:
    """
    Absolute paths of every directory in a package layout.
    """
    root: str
    meta_inf: str
    oebps: str
    images: str
    stylesheets: str
    fonts: str

    @classmethod
    def for_root(cls, output_path: str) -> 'EpubLayout':
        """Compose the layout paths below an output root without touching disk."""
        root = os.path.abspath(output_path)
        oebps = os.path.join(root, OEBPS_DIR)
        return cls(
            root=root,
            meta_inf=os.path.join(root, META_INF_DIR),
            oebps=oebps,
            images=os.path.join(oebps, *IMAGES_DIR.split('/')),
            stylesheets=os.path.join(oebps, *STYLESHEETS_DIR.split('/')),
            fonts=os.path.join(oebps, *FONTS_DIR.split('/')),
        )


def reset_directory(name: str, parent: Optional[str] = None) -> bool:
    """
    Remove a directory if it exists and recreate it empty.

    The name must start with an ASCII letter. This rejects empty names and
    names starting with '/' or '.', so a bad argument can never resolve to
    the filesystem root or the current directory.

    Args:
        name: Directory name (may contain '/' for nested layout entries)
        parent: Directory the name is relative to, if any

    Returns:
        bool: True if the directory was recreated, False if the name was rejected
    """
    if not name or not VALID_START_CHARS.match(name[0]):
        logger.warning(f"Refusing to reset directory with invalid name: {name!r}")
        return False

    path = os.path.join(parent, *name.split('/')) if parent else name

    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    elif os.path.lexists(path):
        os.remove(path)
    os.mkdir(path)

    logger.debug(f"Reset directory {path}")
    return True


def clear_directory(path: str) -> None:
    """
    Remove everything inside a directory, creating it if it does not exist.

    Args:
        path: Output root to clear

    Raises:
        ValidationError: If path is empty, the filesystem root or the home directory
    """
    if not path:
        raise ValidationError("Output path must not be empty")

    target = os.path.realpath(path)
    protected = {os.path.realpath(os.sep), os.path.realpath(os.path.expanduser('~'))}
    if target in protected:
        raise ValidationError(f"Refusing to clear protected directory: {target}")

    if not os.path.isdir(target):
        os.makedirs(target)
        return

    for entry in os.listdir(target):
        entry_path = os.path.join(target, entry)
        if os.path.isdir(entry_path) and not os.path.islink(entry_path):
            shutil.rmtree(entry_path)
        else:
            os.remove(entry_path)

    logger.debug(f"Cleared output directory {target}")


def build_epub_dir(output_path: str) -> EpubLayout:
    """
    Reset the output root and create the package directory skeleton.

    Layout created below the output root:
        META-INF/
        OEBPS/assets/{images,stylesheets,fonts}/

    Args:
        output_path: Output root; anything already in it is deleted

    Returns:
        EpubLayout: Absolute paths of the created directories
    """
    layout = EpubLayout.for_root(output_path)

    clear_directory(layout.root)

    for dirname in [META_INF_DIR, OEBPS_DIR]:
        reset_directory(dirname, layout.root)

    for dirname in OEBPS_SUBDIRS:
        reset_directory(dirname, layout.oebps)

    logger.info(f"Created package layout at {layout.root}")
    return layout
