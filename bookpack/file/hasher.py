"""
File Hashing Module
Provides utilities for hashing files and whole output trees.
"""

import os
import hashlib
from typing import Dict


def calculate_hash(filepath: str, hash_algorithm: str = 'sha256') -> str:
    """
    Calculate the hash of a file.

    Args:
        filepath: Path to the file to hash
        hash_algorithm: Hash algorithm to use (default: 'sha256')

    Returns:
        str: Hexadecimal hash digest of the file
    """
    hash_func = hashlib.new(hash_algorithm)
    with open(filepath, 'rb') as f:
        while chunk := f.read(8192):  # Read in chunks to handle large files
            hash_func.update(chunk)
    return hash_func.hexdigest()


def hash_tree(root: str, hash_algorithm: str = 'sha256') -> Dict[str, str]:
    """
    Hash every file below a directory.

    Args:
        root: Directory to walk
        hash_algorithm: Hash algorithm to use (default: 'sha256')

    Returns:
        dict: POSIX relative path -> hex digest, for every file (sorted by path)
    """
    digests = {}
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            full_path = os.path.join(dirpath, filename)
            relative = os.path.relpath(full_path, root).replace(os.sep, '/')
            digests[relative] = calculate_hash(full_path, hash_algorithm)
    return dict(sorted(digests.items()))


def compare_trees(root1: str, root2: str, hash_algorithm: str = 'sha256') -> bool:
    """
    Compare two directory trees by file names and contents.

    Args:
        root1: First directory
        root2: Second directory
        hash_algorithm: Hash algorithm to use for comparison (default: 'sha256')

    Returns:
        bool: True if both trees hold the same files with identical bytes
    """
    return hash_tree(root1, hash_algorithm) == hash_tree(root2, hash_algorithm)
