"""
Input Sanitization Module

Cleans free-text fields (names, categories, notes) received by the JSON
API before they are stored.
"""

import html
import re

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize text by HTML-escaping special characters.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = html.escape(text.strip())

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_name(name, max_length=100, default=''):
    """
    Sanitize a single-line name (ingredient, recipe, event, category).

    Control characters are removed and runs of whitespace collapsed.
    Returns default when nothing is left.
    """
    if not name:
        return default

    if not isinstance(name, str):
        name = str(name)

    name = _CONTROL_CHARS.sub('', name.strip())
    name = html.escape(name)
    name = re.sub(r'\s+', ' ', name)

    if len(name) > max_length:
        name = name[:max_length]

    return name or default


def sanitize_notes(notes, max_length=500):
    """Sanitize multi-line notes; newlines are preserved. None stays None."""
    if notes is None:
        return None

    return sanitize_text(notes, max_length) or None
