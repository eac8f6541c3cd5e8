"""
Record Access Helpers

The cost engine reads plain records: ORM model instances (saved or
transient) or decoded JSON mappings. These helpers read a field from
either shape and coerce missing numbers to zero.
"""

from collections.abc import Mapping
from dataclasses import asdict


def field(record, name, default=None):
    """Read an attribute or mapping key, falling back to default."""
    if record is None:
        return default
    if isinstance(record, Mapping):
        value = record.get(name, default)
    else:
        value = getattr(record, name, default)
    return default if value is None else value


def number(record, name, default=0.0):
    """Read a numeric field as float; None and empty values give default."""
    value = field(record, name)
    if value is None or value == '':
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def index_by_id(records):
    """Build an id -> record lookup, skipping records without an id."""
    index = {}
    for record in records or []:
        record_id = field(record, 'id')
        if record_id is not None:
            index[record_id] = record
    return index


def camel_case(name):
    """snake_case -> camelCase"""
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


class Serializable:
    """Mixin for result dataclasses: to_dict() with camelCase keys."""

    def to_dict(self):
        return {camel_case(key): value for key, value in asdict(self).items()}
