from dataclasses import dataclass


@dataclass
class HardLimits:
    tokens_per_month: int = 0
    api_calls_per_month: int = 0
