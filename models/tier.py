from dataclasses import dataclass


@dataclass
class Tier:
    id: str
    from_: int = 1
    # 0 means the tier has no upper bound
    to: int = 0
    price: float = 0.0
    units: int = 0
