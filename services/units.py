"""
Unit Conversion Service

Normalizes unit spellings and converts quantities between units of the
same category (mass, volume, count) through the category's base unit.
"""

from constants import UNITS, BASE_UNITS, PREFERRED_UNITS


class UnitConversionError(ValueError):
    """Raised by strict conversions when two units cannot be converted."""

    def __init__(self, from_unit, to_unit=None):
        self.from_unit = from_unit
        self.to_unit = to_unit
        if to_unit is None:
            message = f"Unknown unit: {from_unit!r}"
        else:
            message = f"Cannot convert {from_unit!r} to {to_unit!r}"
        super().__init__(message)


def _build_lookup():
    """Map lowercased symbols and aliases to canonical symbols."""
    lookup = {}
    for symbol, info in UNITS.items():
        lookup.setdefault(symbol.lower(), symbol)
        for alias in info.get('aliases', []):
            lookup.setdefault(alias.lower(), symbol)
    return lookup


_LOOKUP = _build_lookup()


def normalize_unit(unit):
    """
    Resolve a unit spelling or alias to its canonical symbol.

    Matching is case-insensitive. Input that matches nothing is returned
    trimmed but otherwise unchanged.
    """
    if not unit:
        return unit
    trimmed = unit.strip()
    if trimmed in UNITS:
        return trimmed
    return _LOOKUP.get(trimmed.lower(), trimmed)


def _definition(unit):
    return UNITS.get(normalize_unit(unit)) if unit else None


def is_valid_unit(unit):
    """Check whether a unit (or one of its aliases) is in the registry."""
    return _definition(unit) is not None


def get_unit_category(unit):
    """Return 'mass', 'volume' or 'count', or None for unknown units."""
    definition = _definition(unit)
    return definition['category'] if definition else None


def get_base_unit(unit):
    """Return the base unit symbol of the unit's category."""
    category = get_unit_category(unit)
    return BASE_UNITS[category] if category else None


def are_units_compatible(unit1, unit2):
    """Two units are compatible when both are known and share a category."""
    category = get_unit_category(unit1)
    return category is not None and category == get_unit_category(unit2)


def units_for_category(category):
    """List the canonical symbols belonging to a category."""
    return [symbol for symbol, d in UNITS.items() if d['category'] == category]


def convert_quantity(quantity, from_unit, to_unit, strict=False):
    """
    Convert a quantity from one unit to another within the same category.

    Args:
        quantity: Amount expressed in from_unit
        from_unit: Unit the quantity is in
        to_unit: Unit to convert into
        strict: Raise UnitConversionError instead of returning None

    Returns:
        Converted quantity, or None when the units are unknown or belong
        to different categories (mass cannot become volume).
    """
    source = normalize_unit(from_unit)
    target = normalize_unit(to_unit)
    if source == target:
        return quantity

    from_def = UNITS.get(source)
    to_def = UNITS.get(target)
    if not from_def or not to_def or from_def['category'] != to_def['category']:
        if strict:
            raise UnitConversionError(from_unit, to_unit)
        return None

    return quantity * from_def['to_base'] / to_def['to_base']


def to_base_unit(quantity, unit, strict=False):
    """Express a quantity in its category's base unit (kg, L or pcs).

    Unknown units return the quantity unchanged unless strict is set.
    """
    definition = _definition(unit)
    if definition is None:
        if strict:
            raise UnitConversionError(unit)
        return quantity
    return quantity * definition['to_base']


def from_base_unit(quantity, unit, strict=False):
    """Inverse of to_base_unit."""
    definition = _definition(unit)
    if definition is None:
        if strict:
            raise UnitConversionError(unit)
        return quantity
    return quantity / definition['to_base']


def smart_convert(quantity, unit):
    """
    Pick the most readable unit for a quantity.

    Tries the category's preferred units from largest to smallest and keeps
    the first whose value lands in [1, 1000). Falls back to the first one
    giving at least 0.001, then to the input unchanged.

    Returns:
        Tuple of (value, unit)
    """
    definition = _definition(unit)
    if definition is None:
        return quantity, unit

    base_value = quantity * definition['to_base']
    candidates = PREFERRED_UNITS.get(definition['category'], [unit])

    for target in candidates:
        value = round(base_value / UNITS[target]['to_base'], 10)
        if 1 <= value < 1000:
            return value, target

    for target in candidates:
        value = round(base_value / UNITS[target]['to_base'], 10)
        if value >= 0.001:
            return value, target

    return quantity, unit
