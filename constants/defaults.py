"""
Default Values

Initial values for a new business settings record and for new
ingredients, recipes and events.
"""

DEFAULT_SETTINGS = {
    'mode': 'restaurant',

    # Common
    'vat_rate': 24.0,
    'fixed_costs_json': None,

    # Restaurant mode
    'labour_cost_per_hour': 15.0,
    'overhead_monthly': 3000.0,
    'portions_per_month': 1000,
    'packaging_per_portion': 0.5,
    'target_food_cost_percent': 30.0,

    # Catering mode
    'staff_rate_type': 'hourly',
    'staff_hourly_rate': 12.0,
    'staff_daily_rate': 80.0,
    'transport_cost_per_km': 0.5,
    'equipment_rental_default': 0.0,
    'disposables_per_person': 2.0,
    'catering_markup_percent': 50.0,

    # Private chef mode
    'chef_rate_type': 'hourly',
    'chef_fee_per_hour': 50.0,
    'chef_daily_rate': 300.0,
    'assistant_rate_type': 'hourly',
    'assistant_fee_per_hour': 20.0,
    'assistant_daily_rate': 120.0,
    'food_markup_percent': 30.0,
}

DEFAULT_INGREDIENT = {
    'category': 'Other',
    'unit': 'kg',
    'price': 0.0,
    'waste_percent': 0.0,
}

DEFAULT_RECIPE = {
    'category': 'Other',
    'servings': 4,
    'prep_time_minutes': 30,
}

DEFAULT_EVENT = {
    'guests': 1,
    'pricing_mode': 'per_person',
    'staff_count': 0,
    'staff_hours': 0.0,
    'include_staff_in_price': False,
    'transport_km': 0.0,
    'equipment_cost': 0.0,
    'status': 'draft',
}
