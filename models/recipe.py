"""
Recipe Models

Contains the Recipe and RecipeIngredient models. A recipe's cost is never
stored; it is derived from current ingredient prices on demand.
"""

from constants import DEFAULT_RECIPE
from .base import db, DefaultsMixin


class Recipe(DefaultsMixin, db.Model):
    """Recipe yielding `servings` portions per batch."""
    __defaults__ = DEFAULT_RECIPE

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False, index=True)
    category = db.Column(db.String(50), default='Other', index=True)
    servings = db.Column(db.Integer, nullable=False, default=4)
    prep_time_minutes = db.Column(db.Integer, nullable=False, default=30)
    notes = db.Column(db.Text, nullable=True)
    ingredients = db.relationship('RecipeIngredient', backref='recipe', lazy=True,
                                  order_by='RecipeIngredient.position',
                                  cascade='all, delete-orphan')

    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'servings': self.servings,
            'prep_time_minutes': self.prep_time_minutes,
            'notes': self.notes,
            'ingredients': [ri.to_dict() for ri in self.ingredients],
        }


class RecipeIngredient(db.Model):
    """Usage line: quantity of an ingredient, in any compatible unit."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id'), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    quantity = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(20), nullable=False)
    ingredient = db.relationship('Ingredient')

    def to_dict(self):
        return {
            'id': self.id,
            'ingredient_id': self.ingredient_id,
            'ingredient_name': self.ingredient.name if self.ingredient else None,
            'quantity': self.quantity,
            'unit': self.unit,
        }
