import logging
from datetime import date

from flask import Flask, jsonify, request
from flask_migrate import Migrate
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from config import get_config
from constants import (
    UNITS, BASE_UNITS, UNIT_CATEGORIES, COMMON_UNITS,
    VALID_MODES, VALID_RATE_TYPES, VALID_FREQUENCIES, VALID_EVENT_STATUSES,
    VALID_PRICING_MODES, VALID_REPORT_PERIODS, VALID_CATEGORIES, VALID_RECIPE_CATEGORIES,
    VALID_FIXED_COST_CATEGORIES, LIMITS, MAX_LENGTHS,
)
from models import db, Ingredient, Recipe, RecipeIngredient, Event, EventRecipe, Settings
from services import (
    FixedCost, generate_id, normalize_unit, is_valid_unit, units_for_category,
    calculate_ingredient_cost, calculate_food_cost, calculate_monthly_fixed_costs,
    get_recipe_pricing, calculate_recipe_costs, calculate_event_totals,
    filter_events_by_period, count_by_status, summarize_revenue, top_recipes, monthly_trend,
)
from utils import (
    sanitize_name, sanitize_notes, safe_float, safe_int, safe_bool, optional_float, parse_date,
)

app = Flask(__name__)
app.config.from_object(get_config())
app.json.sort_keys = False

logging.basicConfig(level=app.config['LOG_LEVEL'],
                    format='%(asctime)s %(levelname)s %(name)s: %(message)s')
app.logger.setLevel(app.config['LOG_LEVEL'])

db.init_app(app)
migrate = Migrate(app, db)


class InvalidPayload(ValueError):
    """Request data rejected by validation (answered with HTTP 400)."""


@app.errorhandler(InvalidPayload)
def handle_invalid_payload(e):
    return jsonify({'error': str(e)}), 400


@app.errorhandler(404)
def handle_not_found(e):
    return jsonify({'error': 'Not found'}), 404


def _payload():
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise InvalidPayload('Expected a JSON object')
    return data


def _commit(conflict_message):
    """Commit, turning unique-constraint violations into a 400."""
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        app.logger.info("Rejected write: %s", conflict_message)
        raise InvalidPayload(conflict_message)


def _choice(value, allowed, field_name, default=None):
    if value in (None, ''):
        if default is None:
            raise InvalidPayload(f'{field_name} is required')
        return default
    if value not in allowed:
        raise InvalidPayload(f'Invalid {field_name}: {value!r}')
    return value


def _unit(value, field_name='unit'):
    unit = normalize_unit(value or '')
    if not is_valid_unit(unit):
        raise InvalidPayload(f'Invalid {field_name}: {value!r}')
    return unit


def _catalogs():
    """Current ingredient catalog, recipe catalog and settings."""
    ingredients = Ingredient.query.all()
    recipes = Recipe.query.options(joinedload(Recipe.ingredients)).all()
    return ingredients, recipes, Settings.current()


# ============================================
# ROUTES - UNITS
# ============================================

@app.route('/units')
def units_list():
    return jsonify({
        'common': COMMON_UNITS,
        'base_units': BASE_UNITS,
        'by_category': {category: units_for_category(category) for category in UNIT_CATEGORIES},
        'units': {symbol: {'category': d['category'], 'display_name': d['display_name']}
                  for symbol, d in UNITS.items()},
    })


@app.route('/categories')
def categories_list():
    return jsonify({
        'ingredients': sorted(VALID_CATEGORIES),
        'recipes': sorted(VALID_RECIPE_CATEGORIES),
        'fixed_costs': sorted(VALID_FIXED_COST_CATEGORIES),
    })


# ============================================
# ROUTES - INGREDIENTS
# ============================================

def _apply_ingredient(ingredient, data):
    name = sanitize_name(data.get('name', ingredient.name), MAX_LENGTHS['name'])
    if not name:
        raise InvalidPayload('Ingredient name is required')
    ingredient.name = name
    ingredient.category = sanitize_name(data.get('category', ingredient.category),
                                        MAX_LENGTHS['category'], default='Other')
    ingredient.unit = _unit(data.get('unit', ingredient.unit))
    ingredient.price = safe_float(data.get('price', ingredient.price), default=0.0,
                                  min_val=0, max_val=LIMITS['max_price'])
    ingredient.waste_percent = safe_float(data.get('waste_percent', ingredient.waste_percent), default=0.0,
                                          min_val=0, max_val=LIMITS['max_waste_percent'])
    if 'supplier' in data:
        ingredient.supplier = sanitize_name(data.get('supplier'), MAX_LENGTHS['supplier']) or None
    if 'notes' in data:
        ingredient.notes = sanitize_notes(data.get('notes'), MAX_LENGTHS['notes'])


@app.route('/ingredients')
def ingredients_list():
    category = request.args.get('category', 'all')
    query = Ingredient.query
    if category != 'all':
        query = query.filter_by(category=category)
    ingredients = query.order_by(Ingredient.category, Ingredient.name).all()
    return jsonify([i.to_dict() for i in ingredients])


@app.route('/ingredient/<int:id>')
def ingredient_view(id):
    return jsonify(Ingredient.query.get_or_404(id).to_dict())


@app.route('/ingredient/add', methods=['POST'])
def ingredient_add():
    ingredient = Ingredient()
    _apply_ingredient(ingredient, _payload())
    db.session.add(ingredient)
    _commit(f'Ingredient "{ingredient.name}" already exists')
    app.logger.info("Created ingredient %s (%s)", ingredient.id, ingredient.name)
    return jsonify(ingredient.to_dict()), 201


@app.route('/ingredient/<int:id>/edit', methods=['POST'])
def ingredient_edit(id):
    ingredient = Ingredient.query.get_or_404(id)
    _apply_ingredient(ingredient, _payload())
    _commit(f'Ingredient "{ingredient.name}" already exists')
    return jsonify(ingredient.to_dict())


@app.route('/ingredient/<int:id>/delete', methods=['POST'])
def ingredient_delete(id):
    ingredient = Ingredient.query.get_or_404(id)
    RecipeIngredient.query.filter_by(ingredient_id=id).delete()
    db.session.delete(ingredient)
    db.session.commit()
    app.logger.info("Deleted ingredient %s", id)
    return jsonify({'deleted': id})


# ============================================
# ROUTES - RECIPES
# ============================================

def _recipe_lines(items):
    if not isinstance(items, list):
        raise InvalidPayload('ingredients must be a list')
    if len(items) > LIMITS['max_ingredients_per_recipe']:
        raise InvalidPayload('Too many ingredients in recipe')

    known = {i.id: i for i in Ingredient.query.filter(
        Ingredient.id.in_([item.get('ingredient_id') for item in items if isinstance(item, dict)])
    ).all()}

    lines = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            raise InvalidPayload('Invalid ingredient line')
        ingredient = known.get(safe_int(item.get('ingredient_id'), default=0))
        if ingredient is None:
            raise InvalidPayload(f"Unknown ingredient: {item.get('ingredient_id')!r}")
        lines.append(RecipeIngredient(
            ingredient_id=ingredient.id,
            position=position,
            quantity=safe_float(item.get('quantity'), default=0.0, min_val=0, max_val=LIMITS['max_quantity']),
            unit=_unit(item.get('unit') or ingredient.unit),
        ))
    return lines


def _apply_recipe(recipe, data):
    name = sanitize_name(data.get('name', recipe.name), MAX_LENGTHS['name'])
    if not name:
        raise InvalidPayload('Recipe name is required')
    recipe.name = name
    recipe.category = sanitize_name(data.get('category', recipe.category),
                                    MAX_LENGTHS['category'], default='Other')
    recipe.servings = safe_int(data.get('servings', recipe.servings), default=4,
                               min_val=1, max_val=LIMITS['max_servings'])
    recipe.prep_time_minutes = safe_int(data.get('prep_time_minutes', recipe.prep_time_minutes),
                                        default=0, min_val=0)
    if 'notes' in data:
        recipe.notes = sanitize_notes(data.get('notes'), MAX_LENGTHS['notes'])
    if 'ingredients' in data:
        recipe.ingredients = _recipe_lines(data['ingredients'])


@app.route('/recipes')
def recipes_list():
    category = request.args.get('category', 'all')
    query = Recipe.query.options(joinedload(Recipe.ingredients).joinedload(RecipeIngredient.ingredient))
    if category != 'all':
        query = query.filter_by(category=category)
    recipes = query.order_by(Recipe.category, Recipe.name).all()
    return jsonify([r.to_dict() for r in recipes])


@app.route('/recipes/pricing')
def recipes_pricing():
    ingredients, recipes, settings = _catalogs()
    return jsonify({
        r.id: get_recipe_pricing(r, ingredients, settings).to_dict() for r in recipes
    })


@app.route('/recipe/<int:id>')
def recipe_view(id):
    recipe = Recipe.query.options(
        joinedload(Recipe.ingredients).joinedload(RecipeIngredient.ingredient)
    ).get_or_404(id)
    return jsonify(recipe.to_dict())


@app.route('/recipe/<int:id>/costs')
def recipe_costs(id):
    recipe = Recipe.query.options(
        joinedload(Recipe.ingredients).joinedload(RecipeIngredient.ingredient)
    ).get_or_404(id)
    ingredients = Ingredient.query.all()
    settings = Settings.current()

    # Per-line food cost (lines with a deleted ingredient are skipped)
    lines = []
    for ri in recipe.ingredients:
        if not ri.ingredient:
            continue
        lines.append(dict(ri.to_dict(), cost=calculate_ingredient_cost(ri, ri.ingredient)))

    costs = calculate_recipe_costs(recipe, ingredients, settings)
    return jsonify({
        'recipe_id': recipe.id,
        'food_cost': calculate_food_cost(recipe, ingredients),
        'lines': lines,
        'costs': costs.to_dict() if costs is not None else None,
    })


@app.route('/recipe/<int:id>/pricing')
def recipe_pricing(id):
    recipe = Recipe.query.options(joinedload(Recipe.ingredients)).get_or_404(id)
    pricing = get_recipe_pricing(recipe, Ingredient.query.all(), Settings.current())
    return jsonify(pricing.to_dict())


@app.route('/recipe/add', methods=['POST'])
def recipe_add():
    recipe = Recipe()
    _apply_recipe(recipe, _payload())
    db.session.add(recipe)
    _commit(f'Recipe "{recipe.name}" already exists')
    app.logger.info("Created recipe %s (%s)", recipe.id, recipe.name)
    return jsonify(recipe.to_dict()), 201


@app.route('/recipe/<int:id>/edit', methods=['POST'])
def recipe_edit(id):
    recipe = Recipe.query.get_or_404(id)
    _apply_recipe(recipe, _payload())
    _commit(f'Recipe "{recipe.name}" already exists')
    return jsonify(recipe.to_dict())


@app.route('/recipe/<int:id>/delete', methods=['POST'])
def recipe_delete(id):
    recipe = Recipe.query.get_or_404(id)
    EventRecipe.query.filter_by(recipe_id=id).delete()
    db.session.delete(recipe)
    db.session.commit()
    app.logger.info("Deleted recipe %s", id)
    return jsonify({'deleted': id})


@app.route('/recipe/<int:id>/ingredient/add', methods=['POST'])
def recipe_ingredient_add(id):
    recipe = Recipe.query.get_or_404(id)
    [line] = _recipe_lines([_payload()])
    line.position = len(recipe.ingredients)
    recipe.ingredients.append(line)
    db.session.commit()
    return jsonify(recipe.to_dict()), 201


@app.route('/recipe/<int:recipe_id>/ingredient/<int:ri_id>/update', methods=['POST'])
def recipe_ingredient_update(recipe_id, ri_id):
    ri = RecipeIngredient.query.filter_by(id=ri_id, recipe_id=recipe_id).first_or_404()
    data = _payload()
    if 'quantity' in data:
        ri.quantity = safe_float(data['quantity'], default=ri.quantity, min_val=0, max_val=LIMITS['max_quantity'])
    if 'unit' in data:
        ri.unit = _unit(data['unit'])
    db.session.commit()
    return jsonify(ri.recipe.to_dict())


@app.route('/recipe/<int:recipe_id>/ingredient/<int:ri_id>/delete', methods=['POST'])
def recipe_ingredient_delete(recipe_id, ri_id):
    ri = RecipeIngredient.query.filter_by(id=ri_id, recipe_id=recipe_id).first_or_404()
    db.session.delete(ri)
    db.session.commit()
    return jsonify({'deleted': ri_id})


# ============================================
# ROUTES - EVENTS
# ============================================

def _event_lines(items):
    if not isinstance(items, list):
        raise InvalidPayload('recipes must be a list')
    if len(items) > LIMITS['max_recipes_per_event']:
        raise InvalidPayload('Too many recipes in event')

    known = {r.id for r in Recipe.query.with_entities(Recipe.id).all()}
    lines = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            raise InvalidPayload('Invalid recipe line')
        recipe_id = safe_int(item.get('recipe_id'), default=0)
        if recipe_id not in known:
            raise InvalidPayload(f"Unknown recipe: {item.get('recipe_id')!r}")
        lines.append(EventRecipe(
            recipe_id=recipe_id,
            position=position,
            servings=safe_int(item.get('servings'), default=1, min_val=1, max_val=LIMITS['max_guests']),
            price_override=optional_float(item.get('price_override'), min_val=0),
        ))
    return lines


def _apply_event(event, data):
    name = sanitize_name(data.get('name', event.name), MAX_LENGTHS['name'])
    if not name:
        raise InvalidPayload('Event name is required')
    event.name = name
    for attr in ('client_name', 'client_email', 'client_phone', 'event_location'):
        if attr in data:
            setattr(event, attr, sanitize_name(data.get(attr), MAX_LENGTHS['name']) or None)
    if 'event_date' in data:
        event.event_date = parse_date(data.get('event_date'))

    event.guests = safe_int(data.get('guests', event.guests), default=1,
                            min_val=1, max_val=LIMITS['max_guests'])
    event.pricing_mode = _choice(data.get('pricing_mode', event.pricing_mode),
                                 VALID_PRICING_MODES, 'pricing_mode', default='per_person')
    event.status = _choice(data.get('status', event.status), VALID_EVENT_STATUSES, 'status', default='draft')
    event.staff_count = safe_int(data.get('staff_count', event.staff_count), default=0,
                                 min_val=0, max_val=LIMITS['max_staff_count'])
    event.staff_hours = safe_float(data.get('staff_hours', event.staff_hours), default=0.0,
                                   min_val=0, max_val=LIMITS['max_staff_hours'])
    event.include_staff_in_price = safe_bool(data.get('include_staff_in_price', event.include_staff_in_price))
    event.transport_km = safe_float(data.get('transport_km', event.transport_km), default=0.0,
                                    min_val=0, max_val=LIMITS['max_transport_km'])
    event.equipment_cost = safe_float(data.get('equipment_cost', event.equipment_cost), default=0.0,
                                      min_val=0, max_val=LIMITS['max_price'])
    for attr in ('equipment_notes', 'notes'):
        if attr in data:
            setattr(event, attr, sanitize_notes(data.get(attr), MAX_LENGTHS['notes']))
    if 'recipes' in data:
        event.recipes = _event_lines(data['recipes'])


@app.route('/events')
def events_list():
    status = request.args.get('status', 'all')
    query = Event.query.options(joinedload(Event.recipes))
    if status != 'all':
        query = query.filter_by(status=status)
    events = query.order_by(Event.event_date.desc(), Event.name).all()
    return jsonify([e.to_dict() for e in events])


@app.route('/event/<int:id>')
def event_view(id):
    return jsonify(Event.query.options(joinedload(Event.recipes)).get_or_404(id).to_dict())


@app.route('/event/<int:id>/totals')
def event_totals(id):
    event = Event.query.options(joinedload(Event.recipes)).get_or_404(id)
    ingredients, recipes, settings = _catalogs()
    return jsonify(calculate_event_totals(event, recipes, ingredients, settings).to_dict())


@app.route('/event/quote', methods=['POST'])
def event_quote():
    """Price an unsaved event payload (used while the event form is edited)."""
    data = _payload()
    if not isinstance(data.get('recipes', []), list):
        raise InvalidPayload('recipes must be a list')
    ingredients, recipes, settings = _catalogs()
    return jsonify(calculate_event_totals(data, recipes, ingredients, settings).to_dict())


@app.route('/event/add', methods=['POST'])
def event_add():
    event = Event()
    _apply_event(event, _payload())
    db.session.add(event)
    db.session.commit()
    app.logger.info("Created event %s (%s)", event.id, event.name)
    return jsonify(event.to_dict()), 201


@app.route('/event/<int:id>/edit', methods=['POST'])
def event_edit(id):
    event = Event.query.get_or_404(id)
    _apply_event(event, _payload())
    db.session.commit()
    return jsonify(event.to_dict())


@app.route('/event/<int:id>/delete', methods=['POST'])
def event_delete(id):
    event = Event.query.get_or_404(id)
    db.session.delete(event)
    db.session.commit()
    app.logger.info("Deleted event %s", id)
    return jsonify({'deleted': id})


# ============================================
# ROUTES - SETTINGS
# ============================================

RATE_TYPE_FIELDS = ('staff_rate_type', 'chef_rate_type', 'assistant_rate_type')

# Upper bound per numeric settings field
AMOUNT_FIELDS = {
    'vat_rate': LIMITS['max_percent'],
    'target_food_cost_percent': LIMITS['max_percent'],
    'catering_markup_percent': LIMITS['max_markup_percent'],
    'food_markup_percent': LIMITS['max_markup_percent'],
    'labour_cost_per_hour': LIMITS['max_price'],
    'overhead_monthly': LIMITS['max_price'],
    'packaging_per_portion': LIMITS['max_price'],
    'staff_hourly_rate': LIMITS['max_price'],
    'staff_daily_rate': LIMITS['max_price'],
    'transport_cost_per_km': LIMITS['max_price'],
    'equipment_rental_default': LIMITS['max_price'],
    'disposables_per_person': LIMITS['max_price'],
    'chef_fee_per_hour': LIMITS['max_price'],
    'chef_daily_rate': LIMITS['max_price'],
    'assistant_fee_per_hour': LIMITS['max_price'],
    'assistant_daily_rate': LIMITS['max_price'],
}

COMPANY_FIELDS = ('company_name', 'company_email', 'company_phone', 'company_address', 'company_vat_number')


@app.route('/settings')
def settings_view():
    settings = Settings.current()
    data = settings.to_dict()
    data['monthly_fixed_costs'] = calculate_monthly_fixed_costs(settings.fixed_costs)
    return jsonify(data)


@app.route('/settings/update', methods=['POST'])
def settings_update():
    settings = Settings.current()
    data = _payload()

    if 'mode' in data:
        settings.mode = _choice(data['mode'], VALID_MODES, 'mode')
    for attr in RATE_TYPE_FIELDS:
        if attr in data:
            setattr(settings, attr, _choice(data[attr], VALID_RATE_TYPES, attr))
    for attr, upper in AMOUNT_FIELDS.items():
        if attr in data:
            setattr(settings, attr, safe_float(data[attr], default=getattr(settings, attr),
                                               min_val=0, max_val=upper))
    if 'portions_per_month' in data:
        settings.portions_per_month = safe_int(data['portions_per_month'],
                                               default=settings.portions_per_month, min_val=1)
    for attr in COMPANY_FIELDS:
        if attr in data:
            setattr(settings, attr, sanitize_name(data[attr], 200) or None)

    db.session.commit()
    app.logger.info("Settings updated (mode=%s)", settings.mode)
    return jsonify(settings.to_dict())


@app.route('/settings/fixed-costs/add', methods=['POST'])
def fixed_cost_add():
    settings = Settings.current()
    data = _payload()
    name = sanitize_name(data.get('name'), MAX_LENGTHS['name'])
    if not name:
        raise InvalidPayload('Fixed cost name is required')

    cost = FixedCost(
        id=generate_id(),
        name=name,
        amount=safe_float(data.get('amount'), default=0.0, min_val=0, max_val=LIMITS['max_price']),
        frequency=_choice(data.get('frequency'), VALID_FREQUENCIES, 'frequency', default='monthly'),
        category=_choice(data.get('category'), VALID_FIXED_COST_CATEGORIES, 'category', default='Other'),
    )
    settings.fixed_costs = settings.fixed_costs + [cost]
    db.session.commit()
    return jsonify(cost.to_dict()), 201


@app.route('/settings/fixed-costs/<cost_id>/delete', methods=['POST'])
def fixed_cost_delete(cost_id):
    settings = Settings.current()
    remaining = [c for c in settings.fixed_costs if c.id != cost_id]
    if len(remaining) == len(settings.fixed_costs):
        return jsonify({'error': 'Not found'}), 404
    settings.fixed_costs = remaining
    db.session.commit()
    return jsonify({'deleted': cost_id})


# ============================================
# ROUTES - REPORTS
# ============================================

@app.route('/reports')
def reports():
    today = date.today()
    period = _choice(request.args.get('period'), VALID_REPORT_PERIODS, 'period', default='month')
    year = safe_int(request.args.get('year'), default=today.year)
    month = safe_int(request.args.get('month'), default=today.month, min_val=1, max_val=12)

    ingredients, recipes, settings = _catalogs()
    events = Event.query.options(joinedload(Event.recipes)).all()
    selected = filter_events_by_period(events, period, year, month)

    return jsonify({
        'period': period,
        'year': year,
        'month': month,
        'events': len(selected),
        'by_status': count_by_status(selected),
        'summary': summarize_revenue(selected, recipes, ingredients, settings),
        'top_recipes': top_recipes(selected, recipes, ingredients, settings),
        'monthly_trend': monthly_trend(events, recipes, ingredients, settings, year),
    })


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db():
    with app.app_context():
        # Enable SQLite foreign key enforcement
        from sqlalchemy import event
        from sqlalchemy.engine import Engine
        import sqlite3

        @event.listens_for(Engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            if isinstance(dbapi_connection, sqlite3.Connection):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        db.create_all()
        Settings.current()


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
