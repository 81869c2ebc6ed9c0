from dataclasses import dataclass
from enum import StrEnum


class IndicatorCategory(StrEnum):
    ACTIVITY = 'ACTIVITY'
    OUTCOME = 'OUTCOME'


@dataclass(frozen=True)
class Indicator:
    id: str
    name: str
    category: IndicatorCategory
    human_value_equivalent: float = 1.0
    per_minute_enabled: bool = False
    sample_usage: float = 0.0
