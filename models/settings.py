"""
Settings Model

One settings row per business. Read by every pricing computation.
"""

from constants import DEFAULT_SETTINGS
from services.fixed_costs import parse_fixed_costs, stringify_fixed_costs
from .base import db, DefaultsMixin

SETTINGS_FIELDS = tuple(DEFAULT_SETTINGS)


class Settings(DefaultsMixin, db.Model):
    """Business mode, VAT, fixed costs and the per-mode pricing parameters."""
    __defaults__ = DEFAULT_SETTINGS

    id = db.Column(db.Integer, primary_key=True)

    # Mode: restaurant | catering | private_chef
    mode = db.Column(db.String(20), nullable=False, default='restaurant')

    # Common
    vat_rate = db.Column(db.Float, nullable=False, default=24.0)
    fixed_costs_json = db.Column(db.Text, nullable=True)

    # Restaurant mode
    labour_cost_per_hour = db.Column(db.Float, nullable=False, default=15.0)
    overhead_monthly = db.Column(db.Float, nullable=False, default=3000.0)
    portions_per_month = db.Column(db.Integer, nullable=False, default=1000)
    packaging_per_portion = db.Column(db.Float, nullable=False, default=0.5)
    target_food_cost_percent = db.Column(db.Float, nullable=False, default=30.0)

    # Catering mode
    staff_rate_type = db.Column(db.String(10), nullable=False, default='hourly')
    staff_hourly_rate = db.Column(db.Float, nullable=False, default=12.0)
    staff_daily_rate = db.Column(db.Float, nullable=False, default=80.0)
    transport_cost_per_km = db.Column(db.Float, nullable=False, default=0.5)
    equipment_rental_default = db.Column(db.Float, nullable=False, default=0.0)
    disposables_per_person = db.Column(db.Float, nullable=False, default=2.0)
    catering_markup_percent = db.Column(db.Float, nullable=False, default=50.0)

    # Private chef mode
    chef_rate_type = db.Column(db.String(10), nullable=False, default='hourly')
    chef_fee_per_hour = db.Column(db.Float, nullable=False, default=50.0)
    chef_daily_rate = db.Column(db.Float, nullable=False, default=300.0)
    assistant_rate_type = db.Column(db.String(10), nullable=False, default='hourly')
    assistant_fee_per_hour = db.Column(db.Float, nullable=False, default=20.0)
    assistant_daily_rate = db.Column(db.Float, nullable=False, default=120.0)
    food_markup_percent = db.Column(db.Float, nullable=False, default=30.0)

    # Company info (quotes)
    company_name = db.Column(db.String(100), nullable=True)
    company_email = db.Column(db.String(100), nullable=True)
    company_phone = db.Column(db.String(30), nullable=True)
    company_address = db.Column(db.String(200), nullable=True)
    company_vat_number = db.Column(db.String(20), nullable=True)

    @property
    def fixed_costs(self):
        return parse_fixed_costs(self.fixed_costs_json)

    @fixed_costs.setter
    def fixed_costs(self, costs):
        self.fixed_costs_json = stringify_fixed_costs(costs)

    @classmethod
    def current(cls):
        """Return the settings row, creating it with defaults if missing."""
        settings = cls.query.order_by(cls.id).first()
        if settings is None:
            settings = cls()
            db.session.add(settings)
            db.session.commit()
        return settings

    def to_dict(self):
        data = {name: getattr(self, name) for name in SETTINGS_FIELDS}
        data.update({
            'company_name': self.company_name,
            'company_email': self.company_email,
            'company_phone': self.company_phone,
            'company_address': self.company_address,
            'company_vat_number': self.company_vat_number,
            'fixed_costs': [c.to_dict() for c in self.fixed_costs],
        })
        return data
