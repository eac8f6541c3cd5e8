"""
Services Package

Cost-calculation engine and reports for the F&B cost calculator.
"""

from .units import (
    UnitConversionError,
    normalize_unit,
    convert_quantity,
    to_base_unit,
    from_base_unit,
    get_unit_category,
    get_base_unit,
    is_valid_unit,
    are_units_compatible,
    units_for_category,
    smart_convert,
)

from .fixed_costs import (
    FixedCost,
    generate_id,
    parse_fixed_costs,
    stringify_fixed_costs,
    calculate_monthly_fixed_costs,
    get_monthly_fixed_costs,
)

from .cost import (
    convert_to_ingredient_unit,
    calculate_ingredient_cost,
    calculate_food_cost,
)

from .pricing import (
    RecipePricing,
    RestaurantCosts,
    CateringCosts,
    PrivateChefCosts,
    UnpricedCosts,
    settings_profile,
    get_recipe_pricing,
    calculate_recipe_costs,
)

from .events import (
    EventTotals,
    calculate_staff_cost,
    calculate_event_totals,
)

from .reports import (
    filter_events_by_period,
    count_by_status,
    summarize_revenue,
    top_recipes,
    monthly_trend,
)

__all__ = [
    # Units
    'UnitConversionError',
    'normalize_unit',
    'convert_quantity',
    'to_base_unit',
    'from_base_unit',
    'get_unit_category',
    'get_base_unit',
    'is_valid_unit',
    'are_units_compatible',
    'units_for_category',
    'smart_convert',
    # Fixed costs
    'FixedCost',
    'generate_id',
    'parse_fixed_costs',
    'stringify_fixed_costs',
    'calculate_monthly_fixed_costs',
    'get_monthly_fixed_costs',
    # Food cost
    'convert_to_ingredient_unit',
    'calculate_ingredient_cost',
    'calculate_food_cost',
    # Pricing
    'RecipePricing',
    'RestaurantCosts',
    'CateringCosts',
    'PrivateChefCosts',
    'UnpricedCosts',
    'settings_profile',
    'get_recipe_pricing',
    'calculate_recipe_costs',
    # Events
    'EventTotals',
    'calculate_staff_cost',
    'calculate_event_totals',
    # Reports
    'filter_events_by_period',
    'count_by_status',
    'summarize_revenue',
    'top_recipes',
    'monthly_trend',
]
