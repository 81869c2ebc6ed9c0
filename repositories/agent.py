from models import Agent


class AgentRepository:
    def get(self, agent_id: str) -> Agent | None:
        raise NotImplementedError  # pragma: no cover

    def get_all(self) -> dict[str, Agent]:
        raise NotImplementedError  # pragma: no cover
