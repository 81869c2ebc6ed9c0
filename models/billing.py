from enum import StrEnum


class BillingType(StrEnum):
    FLAT = 'FLAT'
    VOLUME = 'VOLUME'
    GRADUATED = 'GRADUATED'


class BillingFrequency(StrEnum):
    MONTHLY = 'Monthly'
    QUARTERLY = 'Quarterly'
    ANNUAL = 'Annual'
    ONE_TIME = 'OneTime'


class Rounding(StrEnum):
    CEIL = 'ceil'
    FLOOR = 'floor'
    EXACT = 'exact'
