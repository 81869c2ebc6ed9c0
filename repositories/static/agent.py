from collections.abc import Mapping
from types import MappingProxyType

from models import Agent
from repositories import AgentRepository


class StaticAgentRepository(AgentRepository):
    def __init__(self, agents: Mapping[str, Agent]) -> None:
        self.agents = MappingProxyType(dict(agents))

    def get(self, agent_id: str) -> Agent | None:
        return self.agents.get(agent_id)

    def get_all(self) -> dict[str, Agent]:
        return dict(self.agents)
