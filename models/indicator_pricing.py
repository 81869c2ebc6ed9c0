from dataclasses import dataclass, field

from .billing import BillingFrequency, BillingType, Rounding
from .tier import Tier


@dataclass
class IndicatorPricing:
    enabled: bool = False
    billing_type: BillingType = BillingType.FLAT
    price: float = 0.0
    billing_frequency: BillingFrequency = BillingFrequency.MONTHLY
    minimum_commitment: int = 0
    included_usage: float = 0.0
    tiers: list[Tier] = field(default_factory=list)
    rounding: Rounding = Rounding.CEIL
