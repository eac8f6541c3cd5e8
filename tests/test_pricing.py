import json
import logging

import pytest

from models import Recipe, RecipeIngredient, Settings
from services.pricing import (
    RestaurantCosts,
    CateringCosts,
    PrivateChefCosts,
    UnpricedCosts,
    settings_profile,
    get_recipe_pricing,
    calculate_recipe_costs,
)


def test_restaurant_breakdown(stew, beef, restaurant_settings):
    costs = calculate_recipe_costs(stew, [beef], restaurant_settings)

    assert isinstance(costs, RestaurantCosts)
    assert costs.mode == 'restaurant'
    assert costs.food_cost == pytest.approx(22)
    assert costs.food_cost_per_serving == pytest.approx(4.4)
    assert costs.labour_cost == pytest.approx(6)
    assert costs.overhead_cost == pytest.approx(2.5)
    assert costs.packaging_cost == pytest.approx(1)
    assert costs.total_cost == pytest.approx(31.5)
    assert costs.cost_per_serving == pytest.approx(6.3)
    assert costs.suggested_price == pytest.approx(21)
    assert costs.price_with_vat == pytest.approx(26.04)


def test_restaurant_overhead_includes_fixed_costs(stew, beef, restaurant_settings):
    restaurant_settings.fixed_costs_json = json.dumps([
        {'id': 'r', 'name': 'Rent', 'amount': 6000, 'frequency': 'yearly'},
    ])
    costs = calculate_recipe_costs(stew, [beef], restaurant_settings)
    assert costs.monthly_fixed == pytest.approx(500)
    # (500 + 500) / 1000 * 5
    assert costs.overhead_cost == pytest.approx(5)


def test_catering_breakdown(stew, beef, catering_settings):
    costs = calculate_recipe_costs(stew, [beef], catering_settings)

    assert isinstance(costs, CateringCosts)
    assert costs.disposables_cost == pytest.approx(10)
    assert costs.total_cost == pytest.approx(32)
    assert costs.cost_per_serving == pytest.approx(6.4)
    assert costs.suggested_price == pytest.approx(9.6)
    assert costs.price_with_vat == pytest.approx(11.904)
    assert costs.staff_hourly_rate == 12
    assert costs.transport_per_km == 0.5


def test_private_chef_breakdown(stew, beef, private_chef_settings):
    costs = calculate_recipe_costs(stew, [beef], private_chef_settings)

    assert isinstance(costs, PrivateChefCosts)
    assert costs.prep_time_hours == pytest.approx(0.5)
    assert costs.chef_cost_for_recipe == pytest.approx(25)
    assert costs.food_with_markup == pytest.approx(28.6)
    assert costs.total_cost == pytest.approx(53.6)
    assert costs.cost_per_serving == pytest.approx(10.72)
    assert costs.price_with_vat == pytest.approx(13.2928)
    assert costs.assistant_fee_per_hour == 20


def test_modes_compose_costs_differently(stew, beef, restaurant_settings, catering_settings, private_chef_settings):
    totals = {
        s.mode: calculate_recipe_costs(stew, [beef], s).total_cost
        for s in (restaurant_settings, catering_settings, private_chef_settings)
    }
    assert len(set(totals.values())) == 3


def test_quick_pricing_matches_breakdown(stew, beef, restaurant_settings, catering_settings, private_chef_settings):
    for settings in (restaurant_settings, catering_settings, private_chef_settings):
        costs = calculate_recipe_costs(stew, [beef], settings)
        pricing = get_recipe_pricing(stew, [beef], settings)
        assert pricing.price_per_serving == pytest.approx(costs.price_with_vat)
        assert pricing.cost_per_serving == pytest.approx(costs.cost_per_serving)


def test_missing_settings(stew, beef):
    pricing = get_recipe_pricing(stew, [beef], None)
    assert (pricing.price_per_serving, pricing.cost_per_serving) == (0, 0)

    costs = calculate_recipe_costs(stew, [beef], None)
    assert isinstance(costs, UnpricedCosts)
    assert costs.mode == 'none'
    assert costs.price_with_vat == 0


def test_zero_servings(beef, catering_settings, caplog):
    recipe = Recipe(id=9, name='Broken', servings=0, prep_time_minutes=0, ingredients=[
        RecipeIngredient(ingredient_id=1, quantity=1, unit='kg'),
    ])

    with caplog.at_level(logging.WARNING, logger='services.pricing'):
        assert calculate_recipe_costs(recipe, [beef], catering_settings) is None
    assert 'servings must be > 0' in caplog.text

    # Lightweight path prices the batch as one serving: (11 + 2) * 1.5
    pricing = get_recipe_pricing(recipe, [beef], catering_settings)
    assert pricing.cost_per_serving == pytest.approx(13)
    assert pricing.price_per_serving == pytest.approx(13 * 1.5 * 1.24)


def test_zero_portions_per_month(stew, beef, restaurant_settings, caplog):
    restaurant_settings.portions_per_month = 0

    with caplog.at_level(logging.WARNING, logger='services.pricing'):
        assert calculate_recipe_costs(stew, [beef], restaurant_settings) is None
    assert 'portions_per_month' in caplog.text

    # Clamped to one portion: overhead 500 per serving
    pricing = get_recipe_pricing(stew, [beef], restaurant_settings)
    assert pricing.cost_per_serving == pytest.approx((22 + 6 + 2500 + 1) / 5)


def test_zero_portions_ignored_outside_restaurant_mode(stew, beef, catering_settings):
    catering_settings.portions_per_month = 0
    assert calculate_recipe_costs(stew, [beef], catering_settings) is not None


def test_target_food_cost_clamped_to_one_percent(stew, beef, restaurant_settings):
    restaurant_settings.target_food_cost_percent = 0
    costs = calculate_recipe_costs(stew, [beef], restaurant_settings)
    assert costs.suggested_price == pytest.approx(6.3 / 0.01)


def test_unknown_mode(stew, beef):
    settings = Settings(mode='food_truck')
    assert settings_profile(settings) is None
    assert calculate_recipe_costs(stew, [beef], settings) is None

    pricing = get_recipe_pricing(stew, [beef], settings)
    assert pricing.price_per_serving == pytest.approx(4.4)
    assert pricing.cost_per_serving == pytest.approx(4.4)


def test_profile_only_carries_mode_fields(restaurant_settings, catering_settings):
    profile = settings_profile(restaurant_settings)
    assert profile.mode == 'restaurant'
    assert not hasattr(profile, 'disposables_per_person')
    assert not hasattr(settings_profile(catering_settings), 'portions_per_month')


def test_breakdown_serializes_camel_case(stew, beef, restaurant_settings):
    data = calculate_recipe_costs(stew, [beef], restaurant_settings).to_dict()
    assert data['mode'] == 'restaurant'
    assert data['priceWithVat'] == pytest.approx(26.04)
    assert 'foodCostPerServing' in data
    assert get_recipe_pricing(stew, [beef], restaurant_settings).to_dict().keys() == {
        'pricePerServing', 'costPerServing'
    }


def test_mapping_settings_include_fixed_costs(stew, beef):
    settings = {
        'mode': 'restaurant',
        'labour_cost_per_hour': 12,
        'overhead_monthly': 500,
        'portions_per_month': 1000,
        'packaging_per_portion': 0.2,
        'target_food_cost_percent': 30,
        'vat_rate': 24,
        'fixed_costs_json': [{'amount': 6000, 'frequency': 'yearly'}],
    }
    costs = calculate_recipe_costs(stew, [beef], settings)
    assert costs.monthly_fixed == pytest.approx(500)
    assert costs.overhead_cost == pytest.approx(5)
