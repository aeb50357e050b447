"""
Text Utilities Module
Provides utility functions for turning titles into file-safe names.
"""

import unicodedata

import regex as re

_NON_WORD = re.compile(r'[^\p{L}\p{N}\s_-]+')
_SEPARATORS = re.compile(r'[\s_-]+')


def slugify(text: str, separator: str = '-') -> str:
    """
    Convert a title into a lowercase, URL and filesystem safe slug.

    Accented Latin letters are folded to ASCII, other letters and digits are
    kept, punctuation is dropped and runs of whitespace, underscores and
    dashes collapse into a single separator.

    Args:
        text: Human readable title
        separator: String placed between words (default: '-')

    Returns:
        str: Slug, empty if the title holds no letters or digits
    """
    text = unicodedata.normalize('NFKD', str(text))
    # Drop combining marks left over from decomposition
    text = ''.join(ch for ch in text if not unicodedata.combining(ch))
    text = _NON_WORD.sub('', text.lower())
    return _SEPARATORS.sub(separator, text).strip(separator)
