from collections.abc import Iterable

from models import Tier


def allocate_tiers(overage: float, tiers: Iterable[Tier]) -> list[tuple[Tier, float]]:
    """Split ``overage`` across tiers ordered by their lower bound.

    Each bounded tier absorbs at most ``to - from + 1`` units; a tier with
    ``to == 0`` absorbs whatever remains. Allocation stops as soon as nothing
    is left, so trailing tiers may not appear in the result. Overlapping or
    inverted tiers are not validated.
    """
    allocations: list[tuple[Tier, float]] = []
    remaining = overage

    for tier in sorted(tiers, key=lambda t: t.from_):
        if tier.to == 0:
            tier_units = remaining
        else:
            tier_units = min(remaining, tier.to - tier.from_ + 1)

        allocations.append((tier, tier_units))
        remaining -= tier_units

        if remaining <= 0:
            break

    return allocations


def tiered_cost(overage: float, tiers: Iterable[Tier]) -> float:
    return sum((tier_units * tier.price for tier, tier_units in allocate_tiers(overage, tiers)), 0.0)
