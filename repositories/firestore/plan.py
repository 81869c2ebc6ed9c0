import logging
from typing import Any, cast
from uuid import uuid4

from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]
from google.cloud.firestore_v1 import DocumentReference

from models import Plan, plan_from_dict, plan_to_dict
from repositories import PlanRepository


class FirestorePlanRepository(PlanRepository):
    """Keeps every plan in a single document that is rewritten on each change."""

    def __init__(self, database: str, storage_key: str) -> None:
        self.db = FirestoreClient(database=database)
        self.storage_key = storage_key
        self.logger = logging.getLogger(self.__class__.__name__)

    def document(self) -> DocumentReference:
        return self.db.collection('storage').document(self.storage_key)

    def load(self) -> list[Plan]:
        doc = self.document().get()

        if not doc.exists:
            return []

        data = cast(dict[str, Any], doc.to_dict())
        return [plan_from_dict(plan_data) for plan_data in data.get('plans', [])]

    def store(self, plans: list[Plan]) -> None:
        self.document().set({'plans': [plan_to_dict(plan) for plan in plans]})

    def get(self, plan_id: str) -> Plan | None:
        return next((plan for plan in self.load() if plan.id == plan_id), None)

    def save(self, plan: Plan) -> Plan:
        if not plan.id:
            plan.id = f'plan_{uuid4().hex}'

        plans = self.load()
        index = next((i for i, existing in enumerate(plans) if existing.id == plan.id), None)

        if index is None:
            plans.append(plan)
        else:
            plans[index] = plan

        self.store(plans)
        return plan

    def delete(self, plan_id: str) -> None:
        plans = self.load()
        remaining = [plan for plan in plans if plan.id != plan_id]

        if len(remaining) == len(plans):
            self.logger.warning('Plan %s not found, nothing to delete', plan_id)

        self.store(remaining)

    def get_all(self) -> list[Plan]:
        return self.load()

    def delete_all(self) -> None:
        self.document().delete()

    # Defined last: later annotations in this body would otherwise resolve list to the method
    def list(self, agent_id: str) -> list[Plan]:
        return [plan for plan in self.load() if plan.agent_id == agent_id]
