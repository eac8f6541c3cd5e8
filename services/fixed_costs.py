"""
Fixed Cost Service

Recurring business expenses are stored as a JSON array inside the
settings record. These helpers parse and serialize that array and
reduce it to one monthly figure used by restaurant overhead pricing.
"""

import json
import logging
import uuid
from dataclasses import dataclass, asdict

from .records import field, number

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass
class FixedCost:
    """A recurring expense (rent, utilities, insurance...)."""
    id: str
    name: str
    amount: float
    frequency: str = 'monthly'
    category: str = 'Other'

    @property
    def monthly_amount(self):
        if self.frequency == 'yearly':
            return self.amount / MONTHS_PER_YEAR
        return self.amount

    @classmethod
    def from_dict(cls, data):
        """Build from a decoded JSON object. Raises ValueError on bad amounts."""
        try:
            amount = float(data.get('amount') or 0)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid fixed cost amount: {data.get('amount')!r}") from e
        return cls(
            id=str(data.get('id') or generate_id()),
            name=str(data.get('name') or ''),
            amount=amount,
            frequency=data.get('frequency') or 'monthly',
            category=data.get('category') or 'Other',
        )

    def to_dict(self):
        return asdict(self)


def generate_id():
    """Short unique id for a new fixed cost entry."""
    return uuid.uuid4().hex[:12]


def parse_fixed_costs(text):
    """
    Parse the serialized fixed cost list.

    Accepts the JSON text or an already decoded list. Empty input, invalid
    JSON or a payload that is not a list all give an empty list. Individual
    entries that are not objects or carry a non-numeric amount are dropped.
    """
    if not text:
        return []

    if isinstance(text, (list, tuple)):
        data = list(text)
    else:
        try:
            data = json.loads(text)
        except (TypeError, ValueError):
            logger.warning("Ignoring unparseable fixed costs JSON")
            return []

    if not isinstance(data, list):
        logger.warning("Ignoring fixed costs JSON that is not a list")
        return []

    costs = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        try:
            costs.append(FixedCost.from_dict(entry))
        except ValueError as e:
            logger.warning("Skipping fixed cost entry: %s", e)
    return costs


def stringify_fixed_costs(costs):
    """Serialize fixed costs (records or plain dicts) to a JSON array."""
    return json.dumps([c.to_dict() if isinstance(c, FixedCost) else dict(c) for c in costs],
                      ensure_ascii=False)


def calculate_monthly_fixed_costs(costs):
    """
    Sum fixed costs as a monthly total.

    Monthly entries count in full, yearly entries as amount / 12.
    Accepts FixedCost records or plain mappings.
    """
    total = 0.0
    for cost in costs:
        if isinstance(cost, FixedCost):
            total += cost.monthly_amount
            continue
        amount = number(cost, 'amount')
        if field(cost, 'frequency') == 'yearly':
            total += amount / MONTHS_PER_YEAR
        else:
            total += amount
    return total


def get_monthly_fixed_costs(settings):
    """Monthly fixed cost total from a settings record (0 when missing)."""
    fixed_costs_json = field(settings, 'fixed_costs_json')
    if not fixed_costs_json:
        return 0.0
    return calculate_monthly_fixed_costs(parse_fixed_costs(fixed_costs_json))
