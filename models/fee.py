from dataclasses import dataclass

from .billing import BillingFrequency


@dataclass
class Fee:
    enabled: bool = False
    price: float = 0.0
    billing_frequency: BillingFrequency | None = None
