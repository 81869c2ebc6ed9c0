from models import Plan


class PlanRepository:
    def get(self, plan_id: str) -> Plan | None:
        raise NotImplementedError  # pragma: no cover

    def save(self, plan: Plan) -> Plan:
        raise NotImplementedError  # pragma: no cover

    def delete(self, plan_id: str) -> None:
        raise NotImplementedError  # pragma: no cover

    def get_all(self) -> list[Plan]:
        raise NotImplementedError  # pragma: no cover

    def delete_all(self) -> None:
        raise NotImplementedError  # pragma: no cover

    # Defined last: later annotations in this body would otherwise resolve list to the method
    def list(self, agent_id: str) -> list[Plan]:
        raise NotImplementedError  # pragma: no cover
