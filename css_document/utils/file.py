"""File utility for CSS Document."""

import os
import sys

from .config import DEFAULT_ENCODING, MAX_CSS_SIZE
from .error import FileOperationError, InputTooLargeError

STDIN_MARKER = '-'

def safe_read_file(file_path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Safely read content from a file.

    Args:
        file_path: Path to the file, or ``-`` for standard input
        encoding: File encoding

    Returns:
        File content

    Raises:
        FileOperationError: If file read fails
        InputTooLargeError: If the file is larger than ``MAX_CSS_SIZE``
    """
    if file_path == STDIN_MARKER:
        try:
            content = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileOperationError(f"Failed to read standard input: {e}")
        if len(content.encode(encoding, errors='replace')) > MAX_CSS_SIZE:
            raise InputTooLargeError(
                f"Standard input too large (max {MAX_CSS_SIZE / 1024 / 1024:.1f}MB)"
            )
        return content

    try:
        size = os.path.getsize(file_path)
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")
    if size > MAX_CSS_SIZE:
        raise InputTooLargeError(
            f"File too large (max {MAX_CSS_SIZE / 1024 / 1024:.1f}MB): {file_path}"
        )

    try:
        with open(file_path, 'r', encoding=encoding) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

def safe_write_file(file_path: str, content: str, encoding: str = DEFAULT_ENCODING) -> bool:
    """Safely write content to a file.

    Args:
        file_path: Path to the file
        content: Content to write
        encoding: File encoding

    Returns:
        True if successful

    Raises:
        FileOperationError: If file write fails
    """
    try:
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(file_path, 'w', encoding=encoding) as f:
            f.write(content)
        return True
    except OSError as e:
        raise FileOperationError(f"Failed to write file {file_path}: {e}")

# Exported functions
__all__ = ['STDIN_MARKER', 'safe_read_file', 'safe_write_file']
