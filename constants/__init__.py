"""
Constants Package

Unit registry, default values and validation whitelists.
"""

from .units import (
    MASS, VOLUME, COUNT, UNIT_CATEGORIES, BASE_UNITS, UNITS,
    PREFERRED_UNITS, COMMON_UNITS,
)
from .defaults import DEFAULT_SETTINGS, DEFAULT_INGREDIENT, DEFAULT_RECIPE, DEFAULT_EVENT
from .validation import (
    MODE_RESTAURANT, MODE_CATERING, MODE_PRIVATE_CHEF, VALID_MODES,
    VALID_RATE_TYPES, VALID_FREQUENCIES, VALID_EVENT_STATUSES,
    BILLABLE_EVENT_STATUSES, PRICING_PER_PERSON, PRICING_PER_EVENT,
    VALID_PRICING_MODES, VALID_REPORT_PERIODS, VALID_CATEGORIES,
    VALID_RECIPE_CATEGORIES, VALID_FIXED_COST_CATEGORIES, LIMITS, MAX_LENGTHS,
)
