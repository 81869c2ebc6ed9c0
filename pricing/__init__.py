from .calculator import (
    MINOR_UNITS,
    billing_units,
    calculate_invoice_breakdown,
    default_sample_seats,
    effective_sample_seats,
    indicator_cost,
    sample_usage,
    seat_charge,
)
from .format import format_amount, format_price, format_total
from .tiers import allocate_tiers, tiered_cost

__all__ = [
    'MINOR_UNITS',
    'billing_units',
    'calculate_invoice_breakdown',
    'default_sample_seats',
    'effective_sample_seats',
    'indicator_cost',
    'sample_usage',
    'seat_charge',
    'format_amount',
    'format_price',
    'format_total',
    'allocate_tiers',
    'tiered_cost',
]
