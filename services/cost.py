"""
Cost Calculation Service

Functions for calculating ingredient and recipe food costs.
"""

from .records import field, number, index_by_id
from .units import convert_quantity, to_base_unit, normalize_unit, UnitConversionError

PERCENT_FACTOR = 100


def convert_to_ingredient_unit(qty, from_unit, ingredient, strict=False):
    """
    Convert a recipe quantity into the unit the ingredient is priced in.

    Compatible units go through convert_quantity. When the units cannot be
    converted (different categories, unknown symbols) the lenient path
    scales by the ratio of base-unit values instead, so existing recipes
    keep a price. With strict=True the failure raises UnitConversionError.

    Args:
        qty: The quantity used in the recipe
        from_unit: The unit the recipe records it in (g, tbsp, pcs, etc.)
        ingredient: The ingredient record with its pricing unit

    Returns:
        Quantity expressed in the ingredient's unit
    """
    ingredient_unit = field(ingredient, 'unit', '')
    if not from_unit:
        from_unit = ingredient_unit

    converted = convert_quantity(qty, from_unit, ingredient_unit)
    if converted is not None:
        return converted

    if strict:
        raise UnitConversionError(from_unit, ingredient_unit)

    # Can't convert: compare base-unit magnitudes
    return to_base_unit(qty, normalize_unit(from_unit)) / to_base_unit(1, normalize_unit(ingredient_unit))


def calculate_ingredient_cost(line, ingredient, strict=False):
    """
    Calculate the cost of one recipe ingredient line.

    The quantity is rescaled into the ingredient's pricing unit, priced,
    and amplified by the ingredient's waste percentage.
    """
    if ingredient is None:
        return 0.0

    qty = convert_to_ingredient_unit(number(line, 'quantity'), field(line, 'unit'), ingredient, strict=strict)
    waste_factor = 1 + number(ingredient, 'waste_percent') / PERCENT_FACTOR
    return qty * number(ingredient, 'price') * waste_factor


def calculate_food_cost(recipe, ingredients, strict=False):
    """
    Calculate the raw ingredient cost of one full recipe batch.

    Lines referencing an ingredient that is not in the catalog contribute
    nothing, so a recipe using a deleted ingredient still prices the rest.

    Args:
        recipe: Recipe record with an `ingredients` list of usage lines
        ingredients: Ingredient catalog (records with an `id`)
        strict: Raise UnitConversionError on unconvertible units

    Returns:
        Total food cost for the batch (not per serving)
    """
    catalog = ingredients if isinstance(ingredients, dict) else index_by_id(ingredients)

    food_cost = 0.0
    for line in field(recipe, 'ingredients', None) or []:
        ingredient = catalog.get(field(line, 'ingredient_id'))
        if ingredient is None:
            continue
        food_cost += calculate_ingredient_cost(line, ingredient, strict=strict)
    return food_cost
