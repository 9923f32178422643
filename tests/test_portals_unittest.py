from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from portal_menu.menu import ConfigurationError, MenuState, compose_menu, flatten_menu_items  # noqa: E402
from portal_menu.portals import get_portal_menu, list_portals, register_portal_menu  # noqa: E402
from portal_menu.portals.defaults import DefaultPortalMenu  # noqa: E402
from portal_menu.startup_hooks import bootstrap_menu  # noqa: E402


def _routes_for(portal_key: str) -> list[dict]:
    skeleton = get_portal_menu(portal_key).get_skeleton()
    names = [item.name for item in flatten_menu_items(skeleton.menus) if item.is_leaf]
    return [{"name": name, "path": f"/{name.lower()}"} for name in names]


class PortalRegistryTestCase(unittest.TestCase):
    def test_builtin_portals_are_discovered(self):
        portals = list_portals()
        for key in ("admin", "client", "service", "talent"):
            self.assertIn(key, portals)

    def test_lookup_is_case_insensitive(self):
        self.assertEqual(get_portal_menu(" Admin ").portal_key, "admin")

    def test_unknown_portal_raises(self):
        with self.assertRaises(ConfigurationError):
            get_portal_menu("warehouse")

    def test_register_custom_portal(self):
        register_portal_menu("kiosk", lambda: DefaultPortalMenu(portal_key="kiosk", title="Kiosk"))
        portal = get_portal_menu("kiosk")
        self.assertEqual(portal.title, "Kiosk")
        self.assertEqual(portal.get_skeleton().menus, [])

    def test_register_requires_key(self):
        with self.assertRaises(ValueError):
            register_portal_menu("  ", DefaultPortalMenu)

    def test_admin_skeleton_sections(self):
        skeleton = get_portal_menu("admin").get_skeleton()
        self.assertEqual([group.title for group in skeleton.menus], ["Basic", "Service", "Business", "System", "Logs"])
        self.assertEqual(skeleton.menus[0].children[0].icon, "House")
        for item in flatten_menu_items(skeleton.menus):
            self.assertIsNone(item.path)


class PortalCompositionTestCase(unittest.TestCase):
    def test_every_portal_resolves_strictly_against_its_routes(self):
        for key in ("admin", "client", "service", "talent"):
            with self.subTest(portal=key):
                portal = get_portal_menu(key)
                menu = compose_menu(portal.get_skeleton(), _routes_for(key), mode="strict")
                leaves = [item for item in flatten_menu_items(menu.menus) if item.is_leaf]
                self.assertTrue(leaves)
                for leaf in leaves:
                    self.assertEqual(leaf.path, f"/{leaf.name.lower()}")

    def test_talent_portal_with_partial_routes(self):
        routes = [{"name": "Home", "path": "/"}, {"name": "Invoice", "path": "/invoice"}]
        menu = compose_menu(get_portal_menu("talent").get_skeleton(), routes, mode="lenient", empty_groups="keep")
        self.assertEqual([group.title for group in menu.menus], ["Basic", "HR", "Service"])
        self.assertEqual(menu.menus[1].children, [])
        self.assertEqual([item.name for item in menu.menus[2].children], ["Invoice"])

    def test_bootstrap_menu_installs_into_given_state(self):
        state = MenuState()
        config = bootstrap_menu("service", routes=_routes_for("service"), state=state)
        self.assertIs(state.get(), config)
        self.assertEqual(config.menus[2].children[-1].title, "Calendar Schedule")

    def test_bootstrap_menu_without_route_table_fails(self):
        state = MenuState()
        with self.assertRaises(ConfigurationError):
            bootstrap_menu("service", routes=[], state=state)
        self.assertIsNone(state.get())


if __name__ == "__main__":
    unittest.main()
