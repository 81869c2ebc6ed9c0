from dataclasses import dataclass, field
from typing import Any

from .billing import BillingFrequency, BillingType, Rounding
from .indicator import IndicatorCategory
from .tier import Tier


@dataclass(frozen=True)
class Preset:
    name: str
    base_price: float = 0.0
    seat_based: dict[str, Any] = field(default_factory=dict)
    activity_based: dict[str, dict[str, Any]] = field(default_factory=dict)
    outcome_based: dict[str, dict[str, Any]] = field(default_factory=dict)
    hard_limits: dict[str, int] = field(default_factory=dict)

    def pricing_map(self, category: IndicatorCategory) -> dict[str, dict[str, Any]]:
        if category == IndicatorCategory.ACTIVITY:
            return self.activity_based
        return self.outcome_based


PRESETS: dict[str, Preset] = {
    preset.name: preset
    for preset in (
        Preset(
            name='Starter',
            seat_based={'enabled': False},
            hard_limits={'tokens_per_month': 100_000, 'api_calls_per_month': 1_000},
        ),
        Preset(
            name='Growth',
            base_price=49_900,
            seat_based={'enabled': True, 'price': 1_000, 'included_usage': 3, 'minimum_commitment': 12},
            activity_based={'1770918079308': {'enabled': True, 'price': 2, 'included_usage': 3}},
            outcome_based={'1770960227498': {'enabled': True, 'price': 2, 'included_usage': 2}},
            hard_limits={'tokens_per_month': 500_000, 'api_calls_per_month': 5_000},
        ),
        Preset(
            name='Enterprise',
            base_price=199_900,
            seat_based={'enabled': True, 'price': 800, 'included_usage': 10, 'minimum_commitment': 50},
            activity_based={'1770918079308': {'enabled': True, 'price': 1, 'included_usage': 1_000}},
            outcome_based={'1770960227498': {'enabled': True, 'price': 1, 'included_usage': 500}},
            hard_limits={'tokens_per_month': 5_000_000, 'api_calls_per_month': 50_000},
        ),
        Preset(
            name='Voice PayGo',
            seat_based={'enabled': False},
            outcome_based={
                '1770967230303': {
                    'enabled': True,
                    'billing_type': BillingType.VOLUME,
                    'price': 5,
                    'billing_frequency': BillingFrequency.QUARTERLY,
                    'included_usage': 0,
                    'rounding': Rounding.CEIL,
                    'tiers': [
                        Tier(id='t1', from_=1, to=5, price=10),
                        Tier(id='t2', from_=6, to=10, price=8),
                        Tier(id='t3', from_=11, to=0, price=5),
                    ],
                },
            },
            hard_limits={'tokens_per_month': 1_000_000, 'api_calls_per_month': 10_000},
        ),
    )
}


def get_preset(name: str) -> Preset:
    try:
        return PRESETS[name]
    except KeyError as err:
        raise ValueError(f'Invalid preset name: {name}') from err
