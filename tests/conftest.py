import os
import sys

import pytest

os.environ['FLASK_ENV'] = 'testing'
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models import Ingredient, Recipe, RecipeIngredient, Settings  # noqa: E402


@pytest.fixture
def app():
    from app import app as flask_app, db
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def beef():
    return Ingredient(id=1, name='Beef', unit='kg', price=10.0, waste_percent=10.0)


@pytest.fixture
def stew(beef):
    """5 servings, 30 minutes, 2 kg of beef."""
    return Recipe(id=1, name='Stew', servings=5, prep_time_minutes=30, ingredients=[
        RecipeIngredient(ingredient_id=beef.id, quantity=2, unit='kg'),
    ])


@pytest.fixture
def restaurant_settings():
    return Settings(
        mode='restaurant',
        labour_cost_per_hour=12,
        overhead_monthly=500,
        portions_per_month=1000,
        packaging_per_portion=0.2,
        target_food_cost_percent=30,
        vat_rate=24,
    )


@pytest.fixture
def catering_settings():
    return Settings(
        mode='catering',
        disposables_per_person=2,
        catering_markup_percent=50,
        vat_rate=24,
        staff_rate_type='hourly',
        staff_hourly_rate=12,
        staff_daily_rate=80,
        transport_cost_per_km=0.5,
    )


@pytest.fixture
def private_chef_settings():
    return Settings(
        mode='private_chef',
        food_markup_percent=30,
        chef_fee_per_hour=50,
        assistant_fee_per_hour=20,
        vat_rate=24,
    )
