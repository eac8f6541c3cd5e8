"""
Reports Service

Profitability statistics over a set of events: period filtering, status
counts, revenue/cost/margin summary, top recipes and monthly trend.
Only confirmed and completed events count as revenue.
"""

from collections import Counter
from datetime import date, datetime

from constants import BILLABLE_EVENT_STATUSES
from .events import calculate_event_totals, line_price
from .pricing import get_recipe_pricing, PERCENT_FACTOR
from .records import field, number, index_by_id

MONTHS_PER_QUARTER = 3


def event_date(event):
    """The event's date as a date object, or None when missing or invalid."""
    value = field(event, 'event_date')
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def is_billable(event):
    return field(event, 'status') in BILLABLE_EVENT_STATUSES


def filter_events_by_period(events, period, year, month=None):
    """
    Keep events dated within a month, quarter or year.

    Args:
        events: Event records
        period: 'month', 'quarter' or 'year'
        year: Calendar year
        month: Month number 1-12 (used by month and quarter periods)
    """
    selected = []
    for event in events:
        when = event_date(event)
        if when is None or when.year != year:
            continue
        if period == 'month' and when.month != month:
            continue
        if period == 'quarter' and (when.month - 1) // MONTHS_PER_QUARTER != (month - 1) // MONTHS_PER_QUARTER:
            continue
        selected.append(event)
    return selected


def count_by_status(events):
    """Number of events per status."""
    return dict(Counter(field(event, 'status', 'draft') for event in events))


def summarize_revenue(events, recipes, ingredients, settings):
    """Revenue, cost, profit and margin across billable events."""
    total_revenue = 0.0
    total_cost = 0.0
    total_guests = 0

    for event in events:
        if not is_billable(event):
            continue
        totals = calculate_event_totals(event, recipes, ingredients, settings)
        total_revenue += totals.total
        total_cost += totals.cost_total + totals.staff_cost + totals.transport_cost + totals.equipment_cost
        total_guests += int(number(event, 'guests'))

    profit = total_revenue - total_cost
    profit_margin = profit / total_revenue * PERCENT_FACTOR if total_revenue > 0 else 0.0

    return {
        'totalRevenue': total_revenue,
        'totalCost': total_cost,
        'profit': profit,
        'profitMargin': profit_margin,
        'totalGuests': total_guests,
    }


def top_recipes(events, recipes, ingredients, settings, limit=5):
    """
    Most served recipes across billable events.

    Returns:
        List of dicts (recipeId, name, count, revenue) sorted by servings
    """
    recipe_index = index_by_id(recipes)
    ingredient_index = index_by_id(ingredients)
    stats = {}

    for event in events:
        if not is_billable(event):
            continue
        for line in field(event, 'recipes', None) or []:
            recipe_id = field(line, 'recipe_id')
            recipe = recipe_index.get(recipe_id)
            if recipe is None:
                continue

            entry = stats.setdefault(recipe_id, {
                'recipeId': recipe_id,
                'name': field(recipe, 'name', 'Unknown'),
                'count': 0,
                'revenue': 0.0,
            })
            servings = number(line, 'servings')
            pricing = get_recipe_pricing(recipe, ingredient_index, settings)
            entry['count'] += servings
            entry['revenue'] += line_price(line, pricing) * servings

    ranked = sorted(stats.values(), key=lambda s: s['count'], reverse=True)
    return ranked[:limit]


def monthly_trend(events, recipes, ingredients, settings, year):
    """Revenue and event count per month (YYYY-MM) for billable events."""
    months = {}
    for event in events:
        when = event_date(event)
        if when is None or when.year != year or not is_billable(event):
            continue

        key = f"{when.year}-{when.month:02d}"
        bucket = months.setdefault(key, {'month': key, 'revenue': 0.0, 'events': 0})
        bucket['revenue'] += calculate_event_totals(event, recipes, ingredients, settings).total
        bucket['events'] += 1

    return [months[key] for key in sorted(months)]
