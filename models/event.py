"""
Event Models

Contains the Event and EventRecipe models for catering and private-chef
engagements. Totals are always recomputed, never stored.
"""

from constants import DEFAULT_EVENT
from .base import db, DefaultsMixin


class Event(DefaultsMixin, db.Model):
    """A priced engagement for a number of guests."""
    __defaults__ = DEFAULT_EVENT

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    client_name = db.Column(db.String(100), nullable=True)
    client_email = db.Column(db.String(100), nullable=True)
    client_phone = db.Column(db.String(30), nullable=True)
    event_date = db.Column(db.Date, nullable=True, index=True)
    event_location = db.Column(db.String(200), nullable=True)

    guests = db.Column(db.Integer, nullable=False, default=1)
    pricing_mode = db.Column(db.String(20), nullable=False, default='per_person')

    staff_count = db.Column(db.Integer, nullable=False, default=0)
    staff_hours = db.Column(db.Float, nullable=False, default=0.0)
    include_staff_in_price = db.Column(db.Boolean, nullable=False, default=False)
    transport_km = db.Column(db.Float, nullable=False, default=0.0)
    equipment_cost = db.Column(db.Float, nullable=False, default=0.0)
    equipment_notes = db.Column(db.Text, nullable=True)

    notes = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), nullable=False, default='draft', index=True)

    recipes = db.relationship('EventRecipe', backref='event', lazy=True,
                              order_by='EventRecipe.position',
                              cascade='all, delete-orphan')

    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'client_name': self.client_name,
            'client_email': self.client_email,
            'client_phone': self.client_phone,
            'event_date': self.event_date.isoformat() if self.event_date else None,
            'event_location': self.event_location,
            'guests': self.guests,
            'pricing_mode': self.pricing_mode,
            'staff_count': self.staff_count,
            'staff_hours': self.staff_hours,
            'include_staff_in_price': self.include_staff_in_price,
            'transport_km': self.transport_km,
            'equipment_cost': self.equipment_cost,
            'equipment_notes': self.equipment_notes,
            'notes': self.notes,
            'status': self.status,
            'recipes': [er.to_dict() for er in self.recipes],
        }


class EventRecipe(db.Model):
    """Menu line: servings of a recipe, optionally at a fixed price."""
    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey('event.id'), nullable=False, index=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    servings = db.Column(db.Integer, nullable=False, default=1)
    # Manual per-serving price; replaces the computed one for this line only
    price_override = db.Column(db.Float, nullable=True)
    recipe = db.relationship('Recipe')

    def to_dict(self):
        return {
            'id': self.id,
            'recipe_id': self.recipe_id,
            'recipe_name': self.recipe.name if self.recipe else None,
            'servings': self.servings,
            'price_override': self.price_override,
        }
