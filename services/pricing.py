"""
Recipe Pricing Service

Turns a recipe's food cost into per-serving cost and a suggested price.
Each business mode (restaurant, catering, private chef) allocates costs
differently, so settings are projected into a mode profile and priced by
the one calculator registered for that mode.

Two entry points share the formulas:
- get_recipe_pricing: lightweight, clamps bad denominators to 1
- calculate_recipe_costs: detailed breakdown, returns None when the
  recipe cannot be priced
"""

import logging
from dataclasses import dataclass, replace

from constants import MODE_RESTAURANT, MODE_CATERING, MODE_PRIVATE_CHEF
from .cost import calculate_food_cost
from .fixed_costs import get_monthly_fixed_costs
from .records import field, number, Serializable

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60
PERCENT_FACTOR = 100


# ============================================
# SETTINGS PROFILES (one per mode)
# ============================================

@dataclass(frozen=True)
class RestaurantProfile:
    vat_rate: float
    labour_cost_per_hour: float
    overhead_monthly: float
    portions_per_month: float
    packaging_per_portion: float
    target_food_cost_percent: float
    monthly_fixed: float
    mode = MODE_RESTAURANT

    @classmethod
    def from_settings(cls, settings, monthly_fixed):
        return cls(
            vat_rate=number(settings, 'vat_rate'),
            labour_cost_per_hour=number(settings, 'labour_cost_per_hour'),
            overhead_monthly=number(settings, 'overhead_monthly'),
            portions_per_month=number(settings, 'portions_per_month'),
            packaging_per_portion=number(settings, 'packaging_per_portion'),
            target_food_cost_percent=number(settings, 'target_food_cost_percent'),
            monthly_fixed=monthly_fixed,
        )

    def invalid_reason(self):
        if self.portions_per_month <= 0:
            return 'portions_per_month must be > 0 in restaurant mode'
        return None

    def clamped(self):
        return replace(self, portions_per_month=max(self.portions_per_month, 1))


@dataclass(frozen=True)
class CateringProfile:
    vat_rate: float
    disposables_per_person: float
    catering_markup_percent: float
    staff_hourly_rate: float
    transport_cost_per_km: float
    monthly_fixed: float
    mode = MODE_CATERING

    @classmethod
    def from_settings(cls, settings, monthly_fixed):
        return cls(
            vat_rate=number(settings, 'vat_rate'),
            disposables_per_person=number(settings, 'disposables_per_person'),
            catering_markup_percent=number(settings, 'catering_markup_percent'),
            staff_hourly_rate=number(settings, 'staff_hourly_rate'),
            transport_cost_per_km=number(settings, 'transport_cost_per_km'),
            monthly_fixed=monthly_fixed,
        )

    def invalid_reason(self):
        return None

    def clamped(self):
        return self


@dataclass(frozen=True)
class PrivateChefProfile:
    vat_rate: float
    chef_fee_per_hour: float
    assistant_fee_per_hour: float
    food_markup_percent: float
    monthly_fixed: float
    mode = MODE_PRIVATE_CHEF

    @classmethod
    def from_settings(cls, settings, monthly_fixed):
        return cls(
            vat_rate=number(settings, 'vat_rate'),
            chef_fee_per_hour=number(settings, 'chef_fee_per_hour'),
            assistant_fee_per_hour=number(settings, 'assistant_fee_per_hour'),
            food_markup_percent=number(settings, 'food_markup_percent'),
            monthly_fixed=monthly_fixed,
        )

    def invalid_reason(self):
        return None

    def clamped(self):
        return self


PROFILES = {
    MODE_RESTAURANT: RestaurantProfile,
    MODE_CATERING: CateringProfile,
    MODE_PRIVATE_CHEF: PrivateChefProfile,
}


def settings_profile(settings):
    """Project settings onto the profile of its mode (None for unknown modes)."""
    profile_cls = PROFILES.get(field(settings, 'mode'))
    if profile_cls is None:
        return None
    return profile_cls.from_settings(settings, get_monthly_fixed_costs(settings))


# ============================================
# RESULTS
# ============================================

@dataclass
class RecipePricing(Serializable):
    price_per_serving: float
    cost_per_serving: float


@dataclass
class RestaurantCosts(Serializable):
    food_cost: float
    food_cost_per_serving: float
    labour_cost: float
    overhead_cost: float
    packaging_cost: float
    total_cost: float
    cost_per_serving: float
    suggested_price: float
    price_with_vat: float
    monthly_fixed: float
    mode: str = MODE_RESTAURANT


@dataclass
class CateringCosts(Serializable):
    food_cost: float
    food_cost_per_serving: float
    disposables_cost: float
    total_cost: float
    cost_per_serving: float
    suggested_price: float
    price_with_vat: float
    staff_hourly_rate: float
    transport_per_km: float
    monthly_fixed: float
    mode: str = MODE_CATERING


@dataclass
class PrivateChefCosts(Serializable):
    food_cost: float
    food_cost_per_serving: float
    food_with_markup: float
    chef_cost_for_recipe: float
    prep_time_hours: float
    total_cost: float
    cost_per_serving: float
    price_with_vat: float
    chef_fee_per_hour: float
    assistant_fee_per_hour: float
    monthly_fixed: float
    mode: str = MODE_PRIVATE_CHEF


@dataclass
class UnpricedCosts(Serializable):
    """Placeholder breakdown while settings are not available."""
    food_cost: float = 0.0
    food_cost_per_serving: float = 0.0
    total_cost: float = 0.0
    cost_per_serving: float = 0.0
    price_with_vat: float = 0.0
    monthly_fixed: float = 0.0
    mode: str = 'none'


# ============================================
# MODE CALCULATORS
# ============================================

def _with_vat(price, profile):
    return price * (1 + profile.vat_rate / PERCENT_FACTOR)


def _restaurant_costs(profile, food_cost, servings, prep_minutes):
    """Overhead is amortized over the monthly portion forecast."""
    labour_cost = profile.labour_cost_per_hour * prep_minutes / MINUTES_PER_HOUR
    overhead_per_serving = (profile.overhead_monthly + profile.monthly_fixed) / profile.portions_per_month
    overhead_cost = overhead_per_serving * servings
    packaging_cost = profile.packaging_per_portion * servings
    total_cost = food_cost + labour_cost + overhead_cost + packaging_cost
    cost_per_serving = total_cost / servings
    # Never divide by less than 1%
    target_food_cost = max(profile.target_food_cost_percent, 1) / PERCENT_FACTOR
    suggested_price = cost_per_serving / target_food_cost

    return RestaurantCosts(
        food_cost=food_cost,
        food_cost_per_serving=food_cost / servings,
        labour_cost=labour_cost,
        overhead_cost=overhead_cost,
        packaging_cost=packaging_cost,
        total_cost=total_cost,
        cost_per_serving=cost_per_serving,
        suggested_price=suggested_price,
        price_with_vat=_with_vat(suggested_price, profile),
        monthly_fixed=profile.monthly_fixed,
    )


def _catering_costs(profile, food_cost, servings, prep_minutes):
    """Disposables per serving plus a flat markup."""
    disposables_cost = profile.disposables_per_person * servings
    total_cost = food_cost + disposables_cost
    cost_per_serving = total_cost / servings
    suggested_price = cost_per_serving * (1 + profile.catering_markup_percent / PERCENT_FACTOR)

    return CateringCosts(
        food_cost=food_cost,
        food_cost_per_serving=food_cost / servings,
        disposables_cost=disposables_cost,
        total_cost=total_cost,
        cost_per_serving=cost_per_serving,
        suggested_price=suggested_price,
        price_with_vat=_with_vat(suggested_price, profile),
        staff_hourly_rate=profile.staff_hourly_rate,
        transport_per_km=profile.transport_cost_per_km,
        monthly_fixed=profile.monthly_fixed,
    )


def _private_chef_costs(profile, food_cost, servings, prep_minutes):
    """Chef time billed directly; the food markup sits on the cost side."""
    prep_time_hours = prep_minutes / MINUTES_PER_HOUR
    chef_cost_for_recipe = prep_time_hours * profile.chef_fee_per_hour
    food_with_markup = food_cost * (1 + profile.food_markup_percent / PERCENT_FACTOR)
    total_cost = food_with_markup + chef_cost_for_recipe
    cost_per_serving = total_cost / servings

    return PrivateChefCosts(
        food_cost=food_cost,
        food_cost_per_serving=food_cost / servings,
        food_with_markup=food_with_markup,
        chef_cost_for_recipe=chef_cost_for_recipe,
        prep_time_hours=prep_time_hours,
        total_cost=total_cost,
        cost_per_serving=cost_per_serving,
        price_with_vat=_with_vat(cost_per_serving, profile),
        chef_fee_per_hour=profile.chef_fee_per_hour,
        assistant_fee_per_hour=profile.assistant_fee_per_hour,
        monthly_fixed=profile.monthly_fixed,
    )


MODE_CALCULATORS = {
    MODE_RESTAURANT: _restaurant_costs,
    MODE_CATERING: _catering_costs,
    MODE_PRIVATE_CHEF: _private_chef_costs,
}


def _price(recipe, ingredients, profile, servings):
    food_cost = calculate_food_cost(recipe, ingredients)
    calculator = MODE_CALCULATORS[profile.mode]
    return calculator(profile, food_cost, servings, number(recipe, 'prep_time_minutes'))


# ============================================
# ENTRY POINTS
# ============================================

def get_recipe_pricing(recipe, ingredients, settings):
    """
    Quick per-serving price and cost for a recipe.

    Used when aggregating events and reports. Never fails: missing
    settings give zeros and non-positive servings or portions_per_month
    are treated as 1.
    """
    if settings is None:
        return RecipePricing(price_per_serving=0.0, cost_per_serving=0.0)

    servings = max(number(recipe, 'servings'), 1)
    profile = settings_profile(settings)
    if profile is None:
        food_per_serving = calculate_food_cost(recipe, ingredients) / servings
        return RecipePricing(price_per_serving=food_per_serving, cost_per_serving=food_per_serving)

    costs = _price(recipe, ingredients, profile.clamped(), servings)
    return RecipePricing(price_per_serving=costs.price_with_vat, cost_per_serving=costs.cost_per_serving)


def calculate_recipe_costs(recipe, ingredients, settings):
    """
    Detailed, mode-specific cost breakdown for a recipe.

    Returns:
        RestaurantCosts, CateringCosts or PrivateChefCosts; UnpricedCosts
        when settings are missing; None when the recipe cannot be priced
        (servings <= 0, restaurant portions_per_month <= 0, unknown mode).
    """
    if settings is None:
        return UnpricedCosts()

    servings = number(recipe, 'servings')
    if servings <= 0:
        logger.warning("Recipe %r servings must be > 0", field(recipe, 'name'))
        return None

    profile = settings_profile(settings)
    if profile is None:
        logger.warning("Unknown pricing mode %r", field(settings, 'mode'))
        return None

    reason = profile.invalid_reason()
    if reason:
        logger.warning(reason)
        return None

    return _price(recipe, ingredients, profile, servings)
