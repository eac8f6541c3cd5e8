"""
Event Totals Service

Aggregates an event's menu into a quoted total, per-guest price and
profit margin, adding staff, transport and equipment costs.
"""

from dataclasses import dataclass

from constants import PRICING_PER_PERSON
from utils import optional_float, safe_bool
from .pricing import get_recipe_pricing, PERCENT_FACTOR
from .records import field, number, index_by_id, Serializable


@dataclass
class EventTotals(Serializable):
    total: float
    per_guest: float
    staff_cost: float
    transport_cost: float
    equipment_cost: float
    base_total: float
    cost_total: float
    profit_margin: float


def line_price(line, pricing):
    """Effective per-serving price of an event line: a numeric manual override wins."""
    override = optional_float(field(line, 'price_override'))
    if override is not None:
        return override
    return pricing.price_per_serving


def calculate_staff_cost(event, settings):
    """Staff cost from the settings rate type (hourly or daily)."""
    if settings is None:
        return 0.0
    staff_count = number(event, 'staff_count')
    if field(settings, 'staff_rate_type') == 'hourly':
        return staff_count * number(event, 'staff_hours') * number(settings, 'staff_hourly_rate')
    return staff_count * number(settings, 'staff_daily_rate')


def calculate_event_totals(event, recipes, ingredients, settings):
    """
    Calculate event totals including all costs and profit margin.

    Recipe lines whose recipe no longer exists are skipped. Staff cost is
    billed to the client only when the event includes it in the price,
    but always counts against the margin.

    Args:
        event: Event record with a `recipes` list of EventRecipe lines
        recipes: Recipe catalog
        ingredients: Ingredient catalog
        settings: Business settings (may be None)

    Returns:
        EventTotals
    """
    recipe_index = index_by_id(recipes)
    ingredient_index = index_by_id(ingredients)

    base_total = 0.0
    per_person_from_recipes = 0.0
    cost_total = 0.0

    for line in field(event, 'recipes', None) or []:
        recipe = recipe_index.get(field(line, 'recipe_id'))
        if recipe is None:
            continue

        pricing = get_recipe_pricing(recipe, ingredient_index, settings)
        price = line_price(line, pricing)
        servings = number(line, 'servings') or 1

        base_total += price * servings
        per_person_from_recipes += price
        cost_total += pricing.cost_per_serving * servings

    guests = max(number(event, 'guests') or 1, 1)

    staff_cost = calculate_staff_cost(event, settings)
    transport_cost = number(settings, 'transport_cost_per_km') * number(event, 'transport_km') if settings is not None else 0.0
    equipment_cost = number(event, 'equipment_cost')

    include_staff = safe_bool(field(event, 'include_staff_in_price'))
    extras = (staff_cost if include_staff else 0.0) + transport_cost + equipment_cost

    if field(event, 'pricing_mode') == PRICING_PER_PERSON:
        total = per_person_from_recipes * guests + extras
    else:
        total = base_total + extras

    per_guest = total / guests

    if total > 0:
        profit = total - cost_total - staff_cost - transport_cost - equipment_cost
        profit_margin = profit / total * PERCENT_FACTOR
    else:
        profit_margin = 0.0

    return EventTotals(
        total=total,
        per_guest=per_guest,
        staff_cost=staff_cost,
        transport_cost=transport_cost,
        equipment_cost=equipment_cost,
        base_total=base_total,
        cost_total=cost_total,
        profit_margin=profit_margin,
    )
