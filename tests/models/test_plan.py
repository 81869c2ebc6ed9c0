from typing import Any

import dacite
from unittest_parametrize import ParametrizedTestCase, parametrize

from models import (
    BillingFrequency,
    BillingType,
    Indicator,
    IndicatorCategory,
    IndicatorPricing,
    Plan,
    Rounding,
    Tier,
    plan_from_dict,
    plan_to_dict,
)


class TestPlan(ParametrizedTestCase):
    def setUp(self) -> None:
        self.plan = Plan(
            agent_id='manu',
            id='plan_1',
            name='Voice',
            slug='voice',
            outcome_based={
                'voice': IndicatorPricing(
                    enabled=True,
                    billing_type=BillingType.VOLUME,
                    tiers=[Tier(id='t1', from_=1, to=5, price=10), Tier(id='t2', from_=6, to=0, price=5)],
                )
            },
        )

    def test_to_dict_uses_wire_name_for_tier_bound(self) -> None:
        data = plan_to_dict(self.plan)

        tier = data['outcome_based']['voice']['tiers'][0]
        self.assertEqual(tier['from'], 1)
        self.assertNotIn('from_', tier)

    def test_from_dict_restores_plan(self) -> None:
        self.assertEqual(plan_from_dict(plan_to_dict(self.plan)), self.plan)

    def test_from_dict_casts_enums_and_numbers(self) -> None:
        data: dict[str, Any] = {
            'agent_id': 'manu',
            'billing_frequency': 'Quarterly',
            'base_price': 49900,
            'platform_fee': {'enabled': True, 'price': 100, 'billing_frequency': 'Annual'},
            'outcome_based': {
                'voice': {
                    'enabled': True,
                    'billing_type': 'GRADUATED',
                    'price': 5,
                    'included_usage': 2,
                    'rounding': 'floor',
                    'tiers': [{'id': 't1', 'from': 1, 'to': 0, 'price': 3}],
                }
            },
        }

        plan = plan_from_dict(data)

        self.assertEqual(plan.billing_frequency, BillingFrequency.QUARTERLY)
        self.assertEqual(plan.base_price, 49900.0)
        self.assertEqual(plan.platform_fee.billing_frequency, BillingFrequency.ANNUAL)
        pricing = plan.outcome_based['voice']
        self.assertEqual(pricing.billing_type, BillingType.GRADUATED)
        self.assertEqual(pricing.rounding, Rounding.FLOOR)
        self.assertEqual(pricing.tiers, [Tier(id='t1', from_=1, to=0, price=3.0)])

    def test_from_dict_defaults(self) -> None:
        plan = plan_from_dict({'agent_id': 'kanu'})

        self.assertEqual(plan.id, '')
        self.assertEqual(plan.currency, 'INR')
        self.assertFalse(plan.seat_based.enabled)
        self.assertIsNone(plan.setup_fee.billing_frequency)
        self.assertEqual(plan.platform_fee.billing_frequency, BillingFrequency.MONTHLY)

    @parametrize(
        'data',
        [
            ({},),
            ({'agent_id': 'kanu', 'billing_frequency': 'Weekly'},),
            ({'agent_id': 'kanu', 'activity_based': []},),
            ({'agent_id': 'kanu', 'activity_based': {'x': {'tiers': [{'id': 't', 'from': 'one'}]}}},),
            ({'agent_id': 'kanu', 'base_price': True},),
            ({'agent_id': 'kanu', 'seat_based': {'minimum_commitment': False}},),
            ({'agent_id': 'kanu', 'activity_based': {'x': {'tiers': [{'id': 't', 'price': True}]}}},),
        ],
    )
    def test_from_dict_invalid(self, data: dict[str, Any]) -> None:
        with self.assertRaises((dacite.DaciteError, ValueError)):
            plan_from_dict(data)

    def test_pricing_for(self) -> None:
        activity = Indicator(id='voice', name='voice', category=IndicatorCategory.ACTIVITY)
        outcome = Indicator(id='voice', name='voice', category=IndicatorCategory.OUTCOME)

        self.assertIsNone(self.plan.pricing_for(activity))
        self.assertIs(self.plan.pricing_for(outcome), self.plan.outcome_based['voice'])
