"""
Ingredient Model

A purchasable item priced per one of its own units.
"""

from constants import DEFAULT_INGREDIENT
from .base import db, DefaultsMixin


class Ingredient(DefaultsMixin, db.Model):
    """
    Ingredient priced per `unit` (kg, L, pcs...).

    waste_percent is the expected loss during prep (0-100); recipe costs
    are amplified by it.
    """
    __defaults__ = DEFAULT_INGREDIENT

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False, index=True)
    category = db.Column(db.String(50), default='Other', index=True)

    # Natural purchase unit and cost per ONE unit
    unit = db.Column(db.String(20), nullable=False, default='kg')
    price = db.Column(db.Float, nullable=False, default=0.0)

    waste_percent = db.Column(db.Float, nullable=False, default=0.0)
    supplier = db.Column(db.String(100), nullable=True)
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'unit': self.unit,
            'price': self.price,
            'waste_percent': self.waste_percent,
            'supplier': self.supplier,
            'notes': self.notes,
        }
