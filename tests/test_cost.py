import pytest

from models import Ingredient, Recipe, RecipeIngredient
from services.cost import convert_to_ingredient_unit, calculate_ingredient_cost, calculate_food_cost
from services.units import UnitConversionError


def test_waste_amplifies_cost(beef, stew):
    # 2 kg * 10/kg * 1.10
    assert calculate_food_cost(stew, [beef]) == pytest.approx(22.0)


def test_recipe_unit_rescaled_to_ingredient_unit(beef):
    beef.waste_percent = 0
    recipe = Recipe(id=2, name='Burger', servings=1, ingredients=[
        RecipeIngredient(ingredient_id=1, quantity=150, unit='g'),
    ])
    assert calculate_food_cost(recipe, [beef]) == pytest.approx(1.5)


def test_alias_units_are_normalized():
    oil = Ingredient(id=3, name='Olive oil', unit='λίτρο', price=8.0)
    line = RecipeIngredient(ingredient_id=3, quantity=2, unit='κ.σ.')
    assert calculate_ingredient_cost(line, oil) == pytest.approx(2 * 0.0147868 * 8.0)


def test_missing_ingredient_is_skipped(beef):
    recipe = Recipe(id=2, name='Stew with deleted item', servings=4, ingredients=[
        RecipeIngredient(ingredient_id=1, quantity=1, unit='kg'),
        RecipeIngredient(ingredient_id=99, quantity=5, unit='kg'),
    ])
    assert calculate_food_cost(recipe, [beef]) == pytest.approx(11.0)


def test_recipe_without_lines_costs_nothing(beef):
    assert calculate_food_cost(Recipe(id=5, name='Water', servings=1, ingredients=[]), [beef]) == 0


def test_plain_mapping_records():
    ingredients = [{'id': 7, 'unit': 'kg', 'price': 4.0, 'waste_percent': 25}]
    recipe = {'servings': 2, 'ingredients': [{'ingredient_id': 7, 'quantity': 500, 'unit': 'g'}]}
    assert calculate_food_cost(recipe, ingredients) == pytest.approx(2.5)


def test_count_units():
    eggs = Ingredient(id=4, name='Eggs', unit='pcs', price=0.3)
    recipe = Recipe(id=3, name='Omelette', servings=2, ingredients=[
        RecipeIngredient(ingredient_id=4, quantity=1, unit='dozen'),
    ])
    assert calculate_food_cost(recipe, [eggs]) == pytest.approx(3.6)


def test_incompatible_units_fall_back_to_base_ratio(beef):
    # 500 ml against a kg price: scaled by base magnitudes (0.5 L / 1 kg)
    assert convert_to_ingredient_unit(500, 'ml', beef) == pytest.approx(0.5)


def test_incompatible_units_strict_raises(beef):
    line = RecipeIngredient(ingredient_id=1, quantity=500, unit='ml')
    with pytest.raises(UnitConversionError):
        calculate_ingredient_cost(line, beef, strict=True)


def test_missing_line_unit_uses_ingredient_unit(beef):
    assert convert_to_ingredient_unit(3, None, beef) == 3
