"""Sanitization utilities.

Provides functions for safely handling user input in HTML contexts and
building download file names from user-controlled text.
"""

import html
import re
from typing import Any


def safe_html(value: Any) -> str:
    """Escape a value for safe interpolation into HTML.

    Use this function whenever inserting user-controlled data (evidence
    notes, model output) into HTML rendered with unsafe_allow_html=True.

    Example:
        >>> safe_html("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'
    """
    return html.escape(str(value), quote=True)


def safe_multiline_html(value: Any) -> str:
    """Escape a value and keep its line breaks as <br/> tags."""
    return safe_html(value).replace('\n', '<br/>')


def sanitize_filename(filename: str, max_length: int = 255) -> str:
    """Sanitize a filename to prevent path traversal attacks.

    Removes directory separators and other dangerous characters.

    Args:
        filename: The filename to sanitize
        max_length: Maximum allowed length

    Returns:
        Sanitized filename
    """
    # Remove path separators and null bytes
    sanitized = filename.replace('/', '_').replace('\\', '_').replace('\x00', '')
    # Whitespace runs become a single underscore
    sanitized = re.sub(r'\s+', '_', sanitized.strip())
    # Remove leading dots (hidden files, parent directory)
    sanitized = sanitized.lstrip('.')
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length]
    return sanitized or 'unnamed'
