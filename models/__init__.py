from .agent import Agent
from .billing import BillingFrequency, BillingType, Rounding
from .fee import Fee
from .hard_limits import HardLimits
from .indicator import Indicator, IndicatorCategory
from .indicator_pricing import IndicatorPricing
from .invoice_breakdown import InvoiceBreakdown
from .plan import DACITE_CONFIG, Plan, now_iso, plan_from_dict, plan_to_dict
from .preset import PRESETS, Preset, get_preset
from .seat_pricing import SeatPricing
from .tier import Tier

__all__ = [
    'Agent',
    'BillingFrequency',
    'BillingType',
    'Rounding',
    'Fee',
    'HardLimits',
    'Indicator',
    'IndicatorCategory',
    'IndicatorPricing',
    'InvoiceBreakdown',
    'DACITE_CONFIG',
    'Plan',
    'now_iso',
    'plan_from_dict',
    'plan_to_dict',
    'PRESETS',
    'Preset',
    'get_preset',
    'SeatPricing',
    'Tier',
]
