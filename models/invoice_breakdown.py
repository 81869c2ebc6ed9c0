from dataclasses import dataclass, field


@dataclass(frozen=True)
class InvoiceBreakdown:
    base_price: float
    setup_fee: float
    platform_fee: float
    seat_charge: float
    indicator_charges: dict[str, float] = field(default_factory=dict)
    total: float = 0.0
