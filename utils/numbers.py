"""
Number Parsing Helpers

Lenient parsing of numeric form/JSON values with optional bounds.
"""

from datetime import date


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value not in (None, '') else default
    except (ValueError, TypeError):
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(float(value)) if value not in (None, '') else default
    except (ValueError, TypeError):
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def safe_bool(value, default=False):
    """Interpret JSON booleans and common string spellings."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


def optional_float(value, min_val=None):
    """Parse a float, keeping None/empty as None (e.g. a price override)."""
    if value in (None, ''):
        return None
    try:
        result = float(value)
    except (ValueError, TypeError):
        return None
    if min_val is not None:
        result = max(min_val, result)
    return result


def parse_date(value):
    """Parse an ISO date string (YYYY-MM-DD); invalid input gives None."""
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None
