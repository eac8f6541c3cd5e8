"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .ingredient import Ingredient
from .recipe import Recipe, RecipeIngredient
from .event import Event, EventRecipe
from .settings import Settings

__all__ = [
    'db',
    'Ingredient',
    'Recipe',
    'RecipeIngredient',
    'Event',
    'EventRecipe',
    'Settings',
]
