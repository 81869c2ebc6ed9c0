from unittest_parametrize import ParametrizedTestCase, parametrize

from models import Plan
from repositories import PlanRepository
from repositories.firestore import FirestorePlanRepository


class TestPlanRepositoryAnnotations(ParametrizedTestCase):
    @parametrize(
        'repo_class',
        [(PlanRepository,), (FirestorePlanRepository,)],
    )
    def test_list_annotations_use_builtin_list(self, repo_class: type[PlanRepository]) -> None:
        self.assertEqual(repo_class.get_all.__annotations__['return'], list[Plan])
        self.assertEqual(repo_class.list.__annotations__['return'], list[Plan])
