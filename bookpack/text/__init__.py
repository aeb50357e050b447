"""
Text Module
Provides text utilities for naming package files.
"""

from .utils import slugify

__all__ = [
    'slugify',
]
