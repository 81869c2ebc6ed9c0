import math
from collections.abc import Mapping

from models import Agent, BillingType, Indicator, IndicatorPricing, InvoiceBreakdown, Plan, Rounding, SeatPricing

from .tiers import tiered_cost

# base price, fees and seat prices are stored in minor currency units
MINOR_UNITS = 100


def billing_units(indicator: Indicator, pricing: IndicatorPricing, units: float) -> float:
    if indicator.per_minute_enabled:
        if pricing.rounding == Rounding.CEIL:
            return math.ceil(units)
        if pricing.rounding == Rounding.FLOOR:
            return math.floor(units)
        return units

    return units * indicator.human_value_equivalent


def indicator_cost(indicator: Indicator, pricing: IndicatorPricing, units: float) -> float:
    overage = max(0, billing_units(indicator, pricing, units) - pricing.included_usage)

    if pricing.billing_type == BillingType.FLAT:
        return overage * pricing.price

    # VOLUME and GRADUATED share the same band-by-band allocation of the overage
    return tiered_cost(overage, pricing.tiers)


def seat_charge(seat_pricing: SeatPricing, seats: int) -> float:
    if not seat_pricing.enabled:
        return 0.0

    chargeable_seats = max(seats, seat_pricing.minimum_commitment)
    extra = max(0, chargeable_seats - seat_pricing.included_usage)
    return extra * seat_pricing.price / MINOR_UNITS


def calculate_invoice_breakdown(plan: Plan, agent: Agent, seats: int, usage: Mapping[str, float]) -> InvoiceBreakdown:
    """Price one billing period of ``plan`` for the given seats and usage.

    All amounts in the breakdown are major currency units. Indicators missing
    from ``usage`` count as zero usage, and indicators whose cost is zero are
    left out of ``indicator_charges``.
    """
    base_price = plan.base_price / MINOR_UNITS
    setup_fee = plan.setup_fee.price / MINOR_UNITS if plan.setup_fee.enabled else 0.0
    platform_fee = plan.platform_fee.price / MINOR_UNITS if plan.platform_fee.enabled else 0.0
    seats_cost = seat_charge(plan.seat_based, seats)

    indicator_charges: dict[str, float] = {}
    for indicator in agent.indicators:
        pricing = plan.pricing_for(indicator)
        if pricing is None or not pricing.enabled:
            continue

        cost = indicator_cost(indicator, pricing, usage.get(indicator.id, 0))
        if cost > 0:
            indicator_charges[indicator.name] = cost

    total = base_price + setup_fee + platform_fee + seats_cost + sum(indicator_charges.values())

    return InvoiceBreakdown(
        base_price=base_price,
        setup_fee=setup_fee,
        platform_fee=platform_fee,
        seat_charge=seats_cost,
        indicator_charges=indicator_charges,
        total=total,
    )


def default_sample_seats(seat_pricing: SeatPricing) -> int:
    if seat_pricing.minimum_commitment > 0:
        return seat_pricing.minimum_commitment
    if seat_pricing.included_usage > 0:
        return seat_pricing.included_usage
    return 1


def effective_sample_seats(seat_pricing: SeatPricing, seats: int | None = None) -> int:
    if not seat_pricing.enabled:
        return 0
    return default_sample_seats(seat_pricing) if seats is None else seats


def sample_usage(agent: Agent) -> dict[str, float]:
    return {indicator.id: indicator.sample_usage for indicator in agent.indicators}
