"""
Core Module
Provides the exception hierarchy shared by the build steps.
"""

from .exceptions import (
    EpubBuildError,
    ValidationError,
    TemplateMissingError,
    ResourceImportError,
    DuplicateEntryError,
    SlugCollisionError
)

__all__ = [
    'EpubBuildError',
    'ValidationError',
    'TemplateMissingError',
    'ResourceImportError',
    'DuplicateEntryError',
    'SlugCollisionError',
]
