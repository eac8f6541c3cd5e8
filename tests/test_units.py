from itertools import permutations

import pytest

from constants import UNIT_CATEGORIES
from services.units import (
    UnitConversionError,
    normalize_unit,
    convert_quantity,
    to_base_unit,
    from_base_unit,
    get_unit_category,
    get_base_unit,
    are_units_compatible,
    units_for_category,
    smart_convert,
)


@pytest.mark.parametrize('raw, expected', [
    ('kilo', 'kg'),
    ('KG', 'kg'),
    ('γρ', 'g'),
    ('lbs', 'lb'),
    ('l', 'L'),
    (' ml ', 'ml'),
    ('Tablespoon', 'tbsp'),
    ('τεμ', 'pcs'),
    ('fl_oz', 'fl oz'),
])
def test_normalize_unit_aliases(raw, expected):
    assert normalize_unit(raw) == expected


def test_normalize_unit_unknown_returned_unchanged():
    assert normalize_unit('handful') == 'handful'
    assert normalize_unit(' handful ') == 'handful'
    assert normalize_unit('') == ''
    assert normalize_unit(None) is None


def test_convert_grams_to_kilograms():
    assert convert_quantity(150, 'g', 'kg') == pytest.approx(0.15)
    assert convert_quantity(2, 'tbsp', 'ml') == pytest.approx(29.5736)


def test_convert_same_unit_is_identity():
    assert convert_quantity(3.3, 'kilo', 'kg') == 3.3
    assert convert_quantity(7, 'handful', 'handful') == 7


def test_cross_category_conversion_rejected():
    for qty in (0, 1, 2.5, 1000):
        assert convert_quantity(qty, 'kg', 'L') is None
    assert convert_quantity(1, 'pcs', 'g') is None
    assert convert_quantity(1, 'kg', 'handful') is None


def test_strict_conversion_raises():
    with pytest.raises(UnitConversionError) as exc:
        convert_quantity(1, 'kg', 'L', strict=True)
    assert exc.value.from_unit == 'kg'
    assert exc.value.to_unit == 'L'


def test_round_trip_within_each_category():
    for category in UNIT_CATEGORIES:
        for a, b in permutations(units_for_category(category), 2):
            there = convert_quantity(3.7, a, b)
            assert convert_quantity(there, b, a) == pytest.approx(3.7)


def test_to_base_unit():
    assert to_base_unit(1, 'tbsp') == pytest.approx(0.0147868)
    assert to_base_unit(500, 'g') == pytest.approx(0.5)
    assert to_base_unit(2, 'dozen') == 24
    assert from_base_unit(0.5, 'g') == pytest.approx(500)


def test_to_base_unit_unknown_is_noop():
    assert to_base_unit(4, 'handful') == 4
    with pytest.raises(UnitConversionError):
        to_base_unit(4, 'handful', strict=True)


def test_categories_and_base_units():
    assert get_unit_category('oz') == 'mass'
    assert get_unit_category('cup') == 'volume'
    assert get_unit_category('bunch') == 'count'
    assert get_unit_category('handful') is None
    assert get_base_unit('tsp') == 'L'
    assert get_base_unit('lb') == 'kg'
    assert get_base_unit('dozen') == 'pcs'
    assert are_units_compatible('g', 'lb')
    assert not are_units_compatible('g', 'ml')
    assert not are_units_compatible('handful', 'handful')


def test_smart_convert():
    assert smart_convert(1500, 'g') == (1.5, 'kg')
    assert smart_convert(0.25, 'kg') == (250, 'g')
    assert smart_convert(2, 'dozen') == (24, 'pcs')
    assert smart_convert(3, 'handful') == (3, 'handful')
