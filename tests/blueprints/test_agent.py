from unittest_parametrize import ParametrizedTestCase, parametrize

from app import create_app


class TestAgent(ParametrizedTestCase):
    def setUp(self) -> None:
        self.app = create_app()
        self.client = self.app.test_client()

    def tearDown(self) -> None:
        self.app.container.unwire()

    @parametrize(
        ('agent_id', 'name', 'indicators'),
        [
            ('kanu', 'Kanu', 2),
            ('manu', 'Manu', 1),
        ],
    )
    def test_get_agent(self, agent_id: str, name: str, indicators: int) -> None:
        resp = self.client.get(f'/api/v1/agents/{agent_id}')

        self.assertEqual(resp.status_code, 200)
        data = resp.get_json()
        self.assertEqual(data['name'], name)
        self.assertEqual(len(data['indicators']), indicators)

    def test_get_agent_category(self) -> None:
        resp = self.client.get('/api/v1/agents/manu')

        indicator = resp.get_json()['indicators'][0]
        self.assertEqual(indicator['category'], 'OUTCOME')
        self.assertTrue(indicator['per_minute_enabled'])

    def test_get_unknown_agent(self) -> None:
        resp = self.client.get('/api/v1/agents/unknown')

        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.get_json()['message'], 'Agent not found')
