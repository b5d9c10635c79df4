"""Error utility for CSS Document."""

class CssDocumentError(Exception):
    """Base exception for CSS Document."""
    pass

class CssParseError(CssDocumentError):
    """Raised when the CSS source cannot be turned into a stylesheet."""
    pass

class InputTooLargeError(CssParseError):
    """Raised when the CSS source exceeds the configured size limit."""
    pass

class FileOperationError(CssDocumentError):
    """Raised when file operations fail."""
    pass

class ConfigurationError(CssDocumentError):
    """Raised when configuration is invalid."""
    pass

# Exported exceptions
__all__ = [
    'CssDocumentError',
    'CssParseError',
    'InputTooLargeError',
    'FileOperationError',
    'ConfigurationError',
]
