import pytest

from models import Event, EventRecipe
from services.events import line_price, calculate_staff_cost, calculate_event_totals
from services.pricing import RecipePricing


def make_event(**overrides):
    """10 guests, one line of 4 servings at a fixed 5.00, 2 staff for 5 hours."""
    values = dict(
        id=1,
        name='Wedding',
        guests=10,
        pricing_mode='per_event',
        staff_count=2,
        staff_hours=5,
        include_staff_in_price=False,
        transport_km=40,
        equipment_cost=30,
        recipes=[EventRecipe(recipe_id=1, servings=4, price_override=5.0)],
    )
    values.update(overrides)
    return Event(**values)


def test_override_wins_over_computed_price():
    pricing = RecipePricing(price_per_serving=11.9, cost_per_serving=6.4)
    assert line_price({'price_override': 5}, pricing) == 5
    assert line_price({'price_override': 0}, pricing) == 0
    assert line_price({'price_override': None}, pricing) == 11.9
    assert line_price({'price_override': ''}, pricing) == 11.9


def test_staff_cost_by_rate_type(catering_settings):
    event = make_event()
    assert calculate_staff_cost(event, catering_settings) == pytest.approx(120)

    catering_settings.staff_rate_type = 'daily'
    assert calculate_staff_cost(event, catering_settings) == pytest.approx(160)

    assert calculate_staff_cost(event, None) == 0


def test_per_event_totals(stew, beef, catering_settings):
    totals = calculate_event_totals(make_event(), [stew], [beef], catering_settings)

    assert totals.base_total == pytest.approx(20)
    assert totals.staff_cost == pytest.approx(120)
    assert totals.transport_cost == pytest.approx(20)
    assert totals.equipment_cost == pytest.approx(30)
    # Staff excluded from the quoted price
    assert totals.total == pytest.approx(70)
    assert totals.per_guest == pytest.approx(7)
    assert totals.cost_total == pytest.approx(6.4 * 4)
    assert totals.profit_margin == pytest.approx((70 - 25.6 - 120 - 20 - 30) / 70 * 100)


def test_per_person_totals(stew, beef, catering_settings):
    totals = calculate_event_totals(make_event(pricing_mode='per_person'), [stew], [beef], catering_settings)

    assert totals.total == pytest.approx(5 * 10 + 50)
    assert totals.per_guest == pytest.approx(10)
    assert totals.base_total == pytest.approx(20)


def test_staff_billed_when_included(stew, beef, catering_settings):
    event = make_event(include_staff_in_price=True)
    totals = calculate_event_totals(event, [stew], [beef], catering_settings)

    assert totals.total == pytest.approx(20 + 120 + 20 + 30)
    assert totals.profit_margin == pytest.approx((190 - 25.6 - 170) / 190 * 100)


def test_computed_price_without_override(stew, beef, catering_settings):
    event = make_event(recipes=[EventRecipe(recipe_id=1, servings=4)],
                       staff_count=0, transport_km=0, equipment_cost=0)
    totals = calculate_event_totals(event, [stew], [beef], catering_settings)

    assert totals.base_total == pytest.approx(11.904 * 4)
    assert totals.profit_margin == pytest.approx((47.616 - 25.6) / 47.616 * 100)


def test_zero_guests_treated_as_one(stew, beef, catering_settings):
    totals = calculate_event_totals(make_event(guests=0, pricing_mode='per_person'), [stew], [beef], catering_settings)

    assert totals.total == pytest.approx(5 + 50)
    assert totals.per_guest == pytest.approx(totals.total)


def test_missing_recipe_skipped(stew, beef, catering_settings):
    event = make_event(recipes=[
        EventRecipe(recipe_id=1, servings=4, price_override=5.0),
        EventRecipe(recipe_id=42, servings=100, price_override=9.0),
    ])
    totals = calculate_event_totals(event, [stew], [beef], catering_settings)
    assert totals.base_total == pytest.approx(20)


def test_empty_event_has_no_margin(catering_settings):
    event = make_event(recipes=[], staff_count=0, transport_km=0, equipment_cost=0)
    totals = calculate_event_totals(event, [], [], catering_settings)
    assert totals.total == 0
    assert totals.profit_margin == 0


def test_without_settings(stew, beef):
    totals = calculate_event_totals(make_event(), [stew], [beef], None)

    assert totals.staff_cost == 0
    assert totals.transport_cost == 0
    assert totals.cost_total == 0
    assert totals.total == pytest.approx(20 + 30)


def test_plain_mapping_event(stew, beef, catering_settings):
    event = {
        'guests': 10,
        'pricing_mode': 'per_event',
        'staff_count': 2,
        'staff_hours': 5,
        'transport_km': 40,
        'equipment_cost': 30,
        'recipes': [{'recipe_id': 1, 'servings': 4, 'price_override': 5}],
    }
    totals = calculate_event_totals(event, [stew], [beef], catering_settings)
    assert totals.total == pytest.approx(70)
    assert totals.to_dict()['perGuest'] == pytest.approx(7)


def test_non_numeric_override_falls_back_to_computed_price(stew, beef, catering_settings):
    pricing = RecipePricing(price_per_serving=11.9, cost_per_serving=6.4)
    assert line_price({'price_override': 'abc'}, pricing) == 11.9
    assert line_price({'price_override': '7.5'}, pricing) == 7.5

    event = {'guests': 2, 'pricing_mode': 'per_event',
             'recipes': [{'recipe_id': 1, 'servings': 2, 'price_override': 'abc'}]}
    totals = calculate_event_totals(event, [stew], [beef], catering_settings)
    assert totals.base_total == pytest.approx(11.904 * 2)


@pytest.mark.parametrize('flag, billed', [
    ('false', False),
    ('0', False),
    ('true', True),
    (True, True),
    (None, False),
])
def test_include_staff_flag_spellings(catering_settings, flag, billed):
    event = {'guests': 1, 'pricing_mode': 'per_event', 'staff_count': 2, 'staff_hours': 5,
             'include_staff_in_price': flag, 'recipes': []}
    totals = calculate_event_totals(event, [], [], catering_settings)
    assert totals.staff_cost == pytest.approx(120)
    assert totals.total == pytest.approx(120 if billed else 0)
