"""
File Module
Provides package layout management and file hashing utilities.
"""

from .manager import EpubLayout, reset_directory, clear_directory, build_epub_dir
from .hasher import calculate_hash, hash_tree, compare_trees

__all__ = [
    # Manager
    'EpubLayout',
    'reset_directory',
    'clear_directory',
    'build_epub_dir',
    # Hasher
    'calculate_hash',
    'hash_tree',
    'compare_trees',
]
