"""
Validation Constants

Contains whitelist values and numeric limits for validating user input
at the HTTP layer. The cost engine itself never rejects data.
"""

# Business modes (each selects one pricing formula)
MODE_RESTAURANT = 'restaurant'
MODE_CATERING = 'catering'
MODE_PRIVATE_CHEF = 'private_chef'
VALID_MODES = {MODE_RESTAURANT, MODE_CATERING, MODE_PRIVATE_CHEF}

# Staff / chef / assistant rate selectors
VALID_RATE_TYPES = {'hourly', 'daily'}

# Fixed cost frequencies
VALID_FREQUENCIES = {'monthly', 'yearly'}

# Event lifecycle
VALID_EVENT_STATUSES = {'draft', 'quote_sent', 'confirmed', 'completed', 'cancelled'}

# Statuses that count as revenue in reports
BILLABLE_EVENT_STATUSES = {'confirmed', 'completed'}

# Event pricing modes
PRICING_PER_PERSON = 'per_person'
PRICING_PER_EVENT = 'per_event'
VALID_PRICING_MODES = {PRICING_PER_PERSON, PRICING_PER_EVENT}

# Report periods
VALID_REPORT_PERIODS = {'month', 'quarter', 'year'}

# Valid ingredient categories
VALID_CATEGORIES = {
    'Meat', 'Poultry', 'Seafood', 'Vegetables', 'Fruit', 'Dairy',
    'Eggs', 'Legumes', 'Pasta/Rice', 'Flour', 'Oils/Fats', 'Spices',
    'Sauces', 'Beverages', 'Other'
}

# Valid recipe categories
VALID_RECIPE_CATEGORIES = {
    'Appetizers', 'Salads', 'Soups', 'Mains', 'Pasta', 'Seafood',
    'Desserts', 'Beverages', 'Other'
}

# Valid fixed cost categories
VALID_FIXED_COST_CATEGORIES = {
    'Rent', 'Electricity', 'Water', 'Phone/Internet', 'Insurance',
    'Accounting', 'Maintenance', 'Marketing', 'Other'
}

# Numeric bounds for form input
LIMITS = {
    'max_price': 99999.99,
    'max_quantity': 99999,
    'max_servings': 1000,
    'max_guests': 10000,
    'max_staff_count': 100,
    'max_staff_hours': 24,
    'max_transport_km': 1000,
    'max_percent': 100,
    'max_markup_percent': 500,
    'max_waste_percent': 50,
    'max_ingredients_per_recipe': 50,
    'max_recipes_per_event': 50,
}

# Maximum field lengths
MAX_LENGTHS = {
    'name': 100,
    'category': 50,
    'notes': 500,
    'supplier': 100,
}
