from unittest_parametrize import ParametrizedTestCase, parametrize

from models import Tier
from pricing import allocate_tiers, tiered_cost

TIERS = [
    Tier(id='t1', from_=1, to=5, price=10),
    Tier(id='t2', from_=6, to=10, price=8),
    Tier(id='t3', from_=11, to=0, price=5),
]


class TestTiers(ParametrizedTestCase):
    @parametrize(
        'overage',
        [(0,), (1,), (5,), (6,), (10,), (13,), (250,), (12.4,)],
    )
    def test_allocation_covers_overage(self, overage: float) -> None:
        allocations = allocate_tiers(overage, TIERS)

        self.assertAlmostEqual(sum(units for _, units in allocations), overage)

    def test_allocation_order(self) -> None:
        allocations = allocate_tiers(13, [TIERS[2], TIERS[0], TIERS[1]])

        self.assertEqual([(tier.id, units) for tier, units in allocations], [('t1', 5), ('t2', 5), ('t3', 3)])

    def test_allocation_stops_when_consumed(self) -> None:
        allocations = allocate_tiers(4, TIERS)

        self.assertEqual([(tier.id, units) for tier, units in allocations], [('t1', 4)])

    def test_allocation_stable_for_equal_bounds(self) -> None:
        first = Tier(id='a', from_=1, to=2, price=1)
        second = Tier(id='b', from_=1, to=0, price=2)

        allocations = allocate_tiers(5, [first, second])

        self.assertEqual([(tier.id, units) for tier, units in allocations], [('a', 2), ('b', 3)])

    def test_bounded_tiers_leave_remainder_unpriced(self) -> None:
        tiers = [Tier(id='t1', from_=1, to=5, price=10)]

        self.assertEqual(tiered_cost(8, tiers), 50)

    def test_no_tiers(self) -> None:
        self.assertEqual(allocate_tiers(10, []), [])
        self.assertEqual(tiered_cost(10, []), 0)

    @parametrize(
        ('overage', 'expected'),
        [
            (0, 0),
            (3, 30),
            (13, 105),
            (20, 140),
        ],
    )
    def test_tiered_cost(self, overage: float, expected: float) -> None:
        self.assertEqual(tiered_cost(overage, TIERS), expected)
