from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

import dacite

from .billing import BillingFrequency
from .fee import Fee
from .hard_limits import HardLimits
from .indicator import Indicator, IndicatorCategory
from .indicator_pricing import IndicatorPricing
from .seat_pricing import SeatPricing


def _reject_bool(value: Any) -> Any:  # noqa: ANN401
    if isinstance(value, bool):
        raise ValueError(f'Expected a number, got {value}')
    return value


DACITE_CONFIG = dacite.Config(type_hooks={float: _reject_bool, int: _reject_bool}, cast=[Enum, float])


@dataclass
class Plan:
    agent_id: str
    id: str = ''
    name: str = ''
    slug: str = ''
    description: str = ''
    billing_frequency: BillingFrequency = BillingFrequency.MONTHLY
    currency: str = 'INR'
    base_price: float = 0.0
    setup_fee: Fee = field(default_factory=Fee)
    platform_fee: Fee = field(default_factory=lambda: Fee(billing_frequency=BillingFrequency.MONTHLY))
    seat_based: SeatPricing = field(default_factory=SeatPricing)
    activity_based: dict[str, IndicatorPricing] = field(default_factory=dict)
    outcome_based: dict[str, IndicatorPricing] = field(default_factory=dict)
    hard_limits: HardLimits = field(default_factory=HardLimits)
    created_at: str = ''
    updated_at: str = ''

    def pricing_map(self, category: IndicatorCategory) -> dict[str, IndicatorPricing]:
        if category == IndicatorCategory.ACTIVITY:
            return self.activity_based
        return self.outcome_based

    def pricing_for(self, indicator: Indicator) -> IndicatorPricing | None:
        return self.pricing_map(indicator.category).get(indicator.id)


def now_iso() -> str:
    return datetime.now(UTC).isoformat()


def _rename_tier_keys(pricings: Any, old: str, new: str) -> Any:  # noqa: ANN401
    if not isinstance(pricings, dict):
        return pricings

    renamed = {}
    for indicator_id, pricing in pricings.items():
        if isinstance(pricing, dict) and isinstance(pricing.get('tiers'), list):
            tiers = [
                {(new if key == old else key): value for key, value in tier.items()} if isinstance(tier, dict) else tier
                for tier in pricing['tiers']
            ]
            pricing = {**pricing, 'tiers': tiers}
        renamed[indicator_id] = pricing
    return renamed


def plan_to_dict(plan: Plan) -> dict[str, Any]:
    """Serialize a plan, exposing the tier lower bound under its wire name ``from``."""
    data = asdict(plan)
    data['activity_based'] = _rename_tier_keys(data['activity_based'], 'from_', 'from')
    data['outcome_based'] = _rename_tier_keys(data['outcome_based'], 'from_', 'from')
    return data


def plan_from_dict(data: dict[str, Any]) -> Plan:
    data = {
        **data,
        'activity_based': _rename_tier_keys(data.get('activity_based', {}), 'from', 'from_'),
        'outcome_based': _rename_tier_keys(data.get('outcome_based', {}), 'from', 'from_'),
    }
    return dacite.from_dict(data_class=Plan, data=data, config=DACITE_CONFIG)
