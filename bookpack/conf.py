"""
Configuration Module
Package layout names, media types and defaults used across the build.
"""

import os

# Package layout
META_INF_DIR = 'META-INF'
OEBPS_DIR = 'OEBPS'
ASSETS_DIR = 'assets'
IMAGES_DIR = 'assets/images'
STYLESHEETS_DIR = 'assets/stylesheets'
FONTS_DIR = 'assets/fonts'
OEBPS_SUBDIRS = [ASSETS_DIR, IMAGES_DIR, STYLESHEETS_DIR, FONTS_DIR]

# Resource selection
IMAGES_PREFIX = 'assets/images/'
IMAGES_PLACEHOLDER = 'assets/images/.keep'

# Media types
XHTML_MEDIA_TYPE = 'application/xhtml+xml'
NCX_MEDIA_TYPE = 'application/x-dtbncx+xml'
CSS_MEDIA_TYPE = 'text/css'

# Manifest properties
COVER_IMAGE_PROPERTY = 'cover-image'
NAV_PROPERTY = 'nav'

# Templates
templates_dir = os.getenv(
    'BOOKPACK_TEMPLATES_DIR',
    os.path.join(os.path.dirname(os.path.abspath(__file__)), 'epub', 'templates')
)
template_suffix = '.j2'
stylesheet_name = 'epub.css'

# Metadata defaults
default_language = os.getenv('BOOKPACK_DEFAULT_LANGUAGE', 'en')
