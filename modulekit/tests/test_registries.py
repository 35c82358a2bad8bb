"""
Catalog, navigation and icon registry tests.

What these tests verify
-----------------------
- The catalog keeps insertion order, ignores re-adding the same class and
  rejects a different class registered under a taken name.
- Navigation accepts tuples or `NavItem`s, chains, and rejects duplicate hrefs.
- Icon slots fall back to their default until overridden; the last override wins.
"""

from __future__ import annotations

from django.test import SimpleTestCase

from modulekit import DuplicateModuleError, ModuleBase, ModuleDefinitionError, NavItem, ServiceRegistrationError
from modulekit.catalog import ModuleCatalog
from modulekit.icons import DiagnosticIcon, MdiIcons, UnknownSvgIcon
from modulekit.registries import Icon, IconsCollection, NavItemCollection


class First(ModuleBase):
    pass


class Second(ModuleBase):
    pass


class ModuleCatalogTests(SimpleTestCase):
    def test_keeps_order_and_is_idempotent(self):
        catalog = ModuleCatalog().add_module(Second).add_module(First).add_module(Second)
        self.assertEqual(catalog.names, ["Second", "First"])
        self.assertEqual(len(catalog), 2)
        self.assertIn(First, catalog)

    def test_rejects_same_name_different_class(self):
        catalog = ModuleCatalog().add_module(First)
        impostor = type("First", (ModuleBase,), {})
        with self.assertRaises(DuplicateModuleError):
            catalog.add_module(impostor)
        self.assertNotIn(impostor, catalog)

    def test_rejects_non_modules(self):
        with self.assertRaises(ModuleDefinitionError):
            ModuleCatalog().add_module(int)


class NavItemCollectionTests(SimpleTestCase):
    def test_accepts_tuples_and_items(self):
        nav = NavItemCollection().add(("Todo", "/", MdiIcons.LIST_STATUS)).add(NavItem("Docs", "/docs/"))
        self.assertEqual(
            nav.as_list(),
            [
                {"label": "Todo", "href": "/", "icon": "mdi-list-status"},
                {"label": "Docs", "href": "/docs/", "icon": ""},
            ],
        )

    def test_rejects_duplicate_href(self):
        nav = NavItemCollection().add(("Todo", "/", ""))
        with self.assertRaises(ServiceRegistrationError):
            nav.add(("Home", "/", ""))
        self.assertEqual(len(nav), 1)


class IconsCollectionTests(SimpleTestCase):
    def test_default_until_overridden(self):
        icons = IconsCollection()
        self.assertEqual(icons.resolve(DiagnosticIcon), DiagnosticIcon.default)
        icons.register_icon(DiagnosticIcon, UnknownSvgIcon)
        self.assertIs(icons.resolve(DiagnosticIcon), UnknownSvgIcon)
        self.assertIn(DiagnosticIcon, icons)

    def test_last_registration_wins(self):
        replacement = Icon(name="mdi-alert")
        icons = IconsCollection().register_icon(DiagnosticIcon, UnknownSvgIcon).register_icon(DiagnosticIcon, replacement)
        self.assertIs(icons.resolve(DiagnosticIcon), replacement)
        self.assertEqual(len(icons), 1)
