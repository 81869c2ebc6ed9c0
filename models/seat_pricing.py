from dataclasses import dataclass

from .billing import BillingFrequency, BillingType


@dataclass
class SeatPricing:
    enabled: bool = False
    billing_type: BillingType = BillingType.FLAT
    price: float = 0.0
    billing_frequency: BillingFrequency = BillingFrequency.MONTHLY
    minimum_commitment: int = 0
    included_usage: int = 0
