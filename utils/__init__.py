# Utility modules for the cost calculator API
from .sanitizer import sanitize_text, sanitize_name, sanitize_notes
from .numbers import safe_float, safe_int, safe_bool, optional_float, parse_date
