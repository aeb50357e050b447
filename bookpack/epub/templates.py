"""
EPUB Templates Module
Loads package templates from the template directory and renders them.
"""

import os
from functools import lru_cache
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from bookpack import conf
from bookpack.core.exceptions import TemplateMissingError


@lru_cache(maxsize=None)
def _template_env(templates_dir: str) -> Environment:
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def load_template(name: str, templates_dir: Optional[str] = None) -> Template:
    """
    Load a template by its logical name.

    The file on disk is the logical name plus the template suffix,
    e.g. 'content.opf' is read from 'content.opf.j2'.

    Args:
        name: Logical template name, which is also the output filename
        templates_dir: Directory to load from (default: conf.templates_dir)

    Returns:
        Template: Compiled jinja2 template

    Raises:
        TemplateMissingError: If no such template exists
    """
    templates_dir = os.path.abspath(templates_dir or conf.templates_dir)
    try:
        return _template_env(templates_dir).get_template(name + conf.template_suffix)
    except TemplateNotFound as e:
        raise TemplateMissingError(name, templates_dir) from e


def render_template(name: str, templates_dir: Optional[str] = None, **context) -> str:
    """Render a template by logical name with the given context."""
    return load_template(name, templates_dir).render(**context)


def read_static(filename: str, templates_dir: Optional[str] = None) -> str:
    """
    Read a static (non-rendered) file from the template directory.

    Raises:
        TemplateMissingError: If the file does not exist
    """
    templates_dir = os.path.abspath(templates_dir or conf.templates_dir)
    path = os.path.join(templates_dir, filename)
    if not os.path.isfile(path):
        raise TemplateMissingError(filename, templates_dir)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()
