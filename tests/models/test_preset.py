from unittest_parametrize import ParametrizedTestCase, parametrize

from models import PRESETS, get_preset


class TestPreset(ParametrizedTestCase):
    @parametrize(
        'name',
        [('Starter',), ('Growth',), ('Enterprise',), ('Voice PayGo',)],
    )
    def test_get_preset(self, name: str) -> None:
        self.assertEqual(get_preset(name).name, name)

    def test_get_unknown_preset(self) -> None:
        with self.assertRaises(ValueError):
            get_preset('Platinum')

    def test_catalog_order(self) -> None:
        self.assertEqual(list(PRESETS), ['Starter', 'Growth', 'Enterprise', 'Voice PayGo'])
