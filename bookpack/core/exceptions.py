"""
Core Exceptions Module
Defines custom exceptions for the bookpack build.
"""


class EpubBuildError(Exception):
    """
    Base class for every error raised while assembling a package.
    """
    pass


class ValidationError(EpubBuildError):
    """
    Exception raised when build input validation fails.
    """
    pass


class TemplateMissingError(EpubBuildError):
    """
    Exception raised when a required template cannot be found.
    """

    def __init__(self, name: str, templates_dir: str = None):
        """
        Initialize the TemplateMissingError.

        Args:
            name: Logical template name (e.g. 'content.opf')
            templates_dir: Directory the template was looked up in
        """
        self.name = name
        self.templates_dir = templates_dir
        message = f"Template not found: {name}"
        if templates_dir:
            message += f" (in {templates_dir})"
        super().__init__(message)


class ResourceImportError(EpubBuildError):
    """
    Exception raised when a resource cannot be read or written.
    """
    pass


class DuplicateEntryError(EpubBuildError):
    """
    Exception raised when a manifest id, nav id or play order is registered twice.
    """
    pass


class SlugCollisionError(EpubBuildError):
    """
    Exception raised when two chapters would be written to the same file.
    """

    def __init__(self, slug: str, first: str, second: str):
        self.slug = slug
        self.titles = (first, second)
        super().__init__(
            f"Chapters {first!r} and {second!r} both map to '{slug}.xhtml'"
        )
