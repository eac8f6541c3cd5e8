"""Initial costing schema

Revision ID: 3b7d2e91c4a0
Revises:
Create Date: 2026-10-19 09:12:41.118203

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7d2e91c4a0'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
    ]


def upgrade():
    op.create_table(
        'ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('waste_percent', sa.Float(), nullable=False),
        sa.Column('supplier', sa.String(length=100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_ingredient_name', 'ingredient', ['name'], unique=True)
    op.create_index('ix_ingredient_category', 'ingredient', ['category'], unique=False)

    op.create_table(
        'recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('servings', sa.Integer(), nullable=False),
        sa.Column('prep_time_minutes', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_recipe_name', 'recipe', ['name'], unique=True)
    op.create_index('ix_recipe_category', 'recipe', ['category'], unique=False)

    op.create_table(
        'recipe_ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id']),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredient.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_recipe_ingredient_recipe_id', 'recipe_ingredient', ['recipe_id'], unique=False)
    op.create_index('ix_recipe_ingredient_ingredient_id', 'recipe_ingredient', ['ingredient_id'], unique=False)

    op.create_table(
        'event',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('client_name', sa.String(length=100), nullable=True),
        sa.Column('client_email', sa.String(length=100), nullable=True),
        sa.Column('client_phone', sa.String(length=30), nullable=True),
        sa.Column('event_date', sa.Date(), nullable=True),
        sa.Column('event_location', sa.String(length=200), nullable=True),
        sa.Column('guests', sa.Integer(), nullable=False),
        sa.Column('pricing_mode', sa.String(length=20), nullable=False),
        sa.Column('staff_count', sa.Integer(), nullable=False),
        sa.Column('staff_hours', sa.Float(), nullable=False),
        sa.Column('include_staff_in_price', sa.Boolean(), nullable=False),
        sa.Column('transport_km', sa.Float(), nullable=False),
        sa.Column('equipment_cost', sa.Float(), nullable=False),
        sa.Column('equipment_notes', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_event_event_date', 'event', ['event_date'], unique=False)
    op.create_index('ix_event_status', 'event', ['status'], unique=False)

    op.create_table(
        'event_recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('servings', sa.Integer(), nullable=False),
        sa.Column('price_override', sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(['event_id'], ['event.id']),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_event_recipe_event_id', 'event_recipe', ['event_id'], unique=False)
    op.create_index('ix_event_recipe_recipe_id', 'event_recipe', ['recipe_id'], unique=False)

    op.create_table(
        'settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('mode', sa.String(length=20), nullable=False),
        sa.Column('vat_rate', sa.Float(), nullable=False),
        sa.Column('fixed_costs_json', sa.Text(), nullable=True),
        sa.Column('labour_cost_per_hour', sa.Float(), nullable=False),
        sa.Column('overhead_monthly', sa.Float(), nullable=False),
        sa.Column('portions_per_month', sa.Integer(), nullable=False),
        sa.Column('packaging_per_portion', sa.Float(), nullable=False),
        sa.Column('target_food_cost_percent', sa.Float(), nullable=False),
        sa.Column('staff_rate_type', sa.String(length=10), nullable=False),
        sa.Column('staff_hourly_rate', sa.Float(), nullable=False),
        sa.Column('staff_daily_rate', sa.Float(), nullable=False),
        sa.Column('transport_cost_per_km', sa.Float(), nullable=False),
        sa.Column('equipment_rental_default', sa.Float(), nullable=False),
        sa.Column('disposables_per_person', sa.Float(), nullable=False),
        sa.Column('catering_markup_percent', sa.Float(), nullable=False),
        sa.Column('chef_rate_type', sa.String(length=10), nullable=False),
        sa.Column('chef_fee_per_hour', sa.Float(), nullable=False),
        sa.Column('chef_daily_rate', sa.Float(), nullable=False),
        sa.Column('assistant_rate_type', sa.String(length=10), nullable=False),
        sa.Column('assistant_fee_per_hour', sa.Float(), nullable=False),
        sa.Column('assistant_daily_rate', sa.Float(), nullable=False),
        sa.Column('food_markup_percent', sa.Float(), nullable=False),
        sa.Column('company_name', sa.String(length=100), nullable=True),
        sa.Column('company_email', sa.String(length=100), nullable=True),
        sa.Column('company_phone', sa.String(length=30), nullable=True),
        sa.Column('company_address', sa.String(length=200), nullable=True),
        sa.Column('company_vat_number', sa.String(length=20), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade():
    op.drop_table('settings')
    op.drop_index('ix_event_recipe_recipe_id', table_name='event_recipe')
    op.drop_index('ix_event_recipe_event_id', table_name='event_recipe')
    op.drop_table('event_recipe')
    op.drop_index('ix_event_status', table_name='event')
    op.drop_index('ix_event_event_date', table_name='event')
    op.drop_table('event')
    op.drop_index('ix_recipe_ingredient_ingredient_id', table_name='recipe_ingredient')
    op.drop_index('ix_recipe_ingredient_recipe_id', table_name='recipe_ingredient')
    op.drop_table('recipe_ingredient')
    op.drop_index('ix_recipe_category', table_name='recipe')
    op.drop_index('ix_recipe_name', table_name='recipe')
    op.drop_table('recipe')
    op.drop_index('ix_ingredient_category', table_name='ingredient')
    op.drop_index('ix_ingredient_name', table_name='ingredient')
    op.drop_table('ingredient')
