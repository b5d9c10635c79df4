"""Configuration utility for CSS Document."""

import logging

# Project version
VERSION = "1.0.0"

# Media types whose `@media` rules are inlined when the caller gives none
DEFAULT_ALLOWED_MEDIA_TYPES = ('all', 'screen', 'print')

# The only charset supported downstream; `@charset` rules are discarded
DEFAULT_ENCODING = 'utf-8'

# File size limits (in bytes)
MAX_CSS_SIZE = 5 * 1024 * 1024      # 5 MB

# Logging
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# cssutils reports every unknown property and hack it meets
CSSUTILS_LOG_LEVEL = logging.CRITICAL

# Exported config
__all__ = [
    'VERSION',
    'DEFAULT_ALLOWED_MEDIA_TYPES', 'DEFAULT_ENCODING',
    'MAX_CSS_SIZE',
    'LOG_LEVEL', 'LOG_FORMAT', 'LOG_DATE_FORMAT',
    'CSSUTILS_LOG_LEVEL',
]
