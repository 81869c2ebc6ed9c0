from dataclasses import dataclass, field

from .indicator import Indicator


@dataclass(frozen=True)
class Agent:
    id: str
    name: str
    description: str
    external_id: str
    status: str
    agent_type: str
    indicators: list[Indicator] = field(default_factory=list)
