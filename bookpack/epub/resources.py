"""
EPUB Resources Module
File-backed resources and collection of a source tree.
"""

import os
import mimetypes
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class FileResource:
    """
    A resource read from a file below a source directory.

    path is the POSIX path relative to the source directory, which is also
    the href the resource gets inside the package.
    """
    path: str
    source_path: str
    content_type: Optional[str] = None

    def __post_init__(self):
        if self.content_type is None:
            guessed, _ = mimetypes.guess_type(self.path)
            self.content_type = guessed or 'application/octet-stream'

    @property
    def basename(self) -> str:
        return self.path.rsplit('/', 1)[-1]

    def render(self) -> bytes:
        with open(self.source_path, 'rb') as f:
            return f.read()


def collect_resources(source_dir: str) -> List[FileResource]:
    """
    Collect every file below a directory as a resource.

    Args:
        source_dir: Root directory of the rendered site/assets

    Returns:
        list: FileResources in sorted path order
    """
    resources = []
    for dirpath, dirnames, filenames in os.walk(source_dir):
        dirnames.sort()
        for filename in sorted(filenames):
            full_path = os.path.join(dirpath, filename)
            relative = os.path.relpath(full_path, source_dir).replace(os.sep, '/')
            resources.append(FileResource(path=relative, source_path=full_path))
    return sorted(resources, key=lambda r: r.path)
