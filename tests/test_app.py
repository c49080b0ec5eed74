# tests/test_app.py

"""Smoke tests for the storefront TUI using Textual's Pilot."""

import unittest
from typing import cast
from unittest.mock import MagicMock, patch

from textual.containers import Vertical
from textual.widgets import Button, ContentSwitcher, DataTable, RadioButton

from src.models.product import Product
from src.models.shop_state import ActiveSection, PriceFilter
from src.services.delivery import DeliveryMethod
from src.storage.catalog_loader import CatalogLoader
from src.ui.app import FloraApp, ProductCard

_SIZE = (160, 50)


class TestFloraApp(unittest.IsolatedAsyncioTestCase):
    """Smoke tests for the Textual storefront."""

    def _cart_table(self, app: FloraApp) -> DataTable[str]:
        return cast(DataTable[str], app.query_one("#cart_table", DataTable))

    async def test_app_composes_without_crash(self) -> None:
        """Verify the app starts and renders the core widgets."""
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            for section in ActiveSection:
                app.query_one(f"#nav_{section.value}", Button)
            app.query_one("#cart_btn", Button)
            app.query_one("#sections", ContentSwitcher)
            self._cart_table(app)
            await pilot.pause()

    async def test_starts_on_home_with_featured(self) -> None:
        """Home is active and shows the first three bouquets."""
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            switcher = app.query_one("#sections", ContentSwitcher)
            self.assertEqual(switcher.current, "home")
            featured = app.query_one("#featured").query(ProductCard)
            self.assertEqual([c.product.id for c in featured], [1, 2, 3])
            self.assertEqual(
                app.query_one("#nav_home", Button).variant, "primary"
            )
            await pilot.pause()

    async def test_nav_click_switches_section(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            await pilot.click("#nav_delivery")
            await pilot.pause()
            switcher = app.query_one("#sections", ContentSwitcher)
            self.assertEqual(switcher.current, "delivery")
            self.assertIs(
                app.session.state.active_section, ActiveSection.DELIVERY
            )
            self.assertEqual(
                app.query_one("#nav_delivery", Button).variant, "primary"
            )
            self.assertEqual(
                app.query_one("#nav_home", Button).variant, "default"
            )

    async def test_number_keys_switch_section(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            await pilot.press("6")
            await pilot.pause()
            self.assertIs(
                app.session.state.active_section, ActiveSection.CONTACTS
            )

    async def test_hero_button_opens_catalog(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            app.query_one("#hero_catalog_btn", Button).press()
            await pilot.pause()
            self.assertEqual(
                app.query_one("#sections", ContentSwitcher).current,
                "catalog",
            )

    async def test_price_filter_hides_cards(self) -> None:
        """Only the 2800 card stays visible under the under3000 filter."""
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            app.show_section(ActiveSection.CATALOG)
            app.query_one("#filter_under3000", Button).press()
            await pilot.pause()
            visible = [
                card.product.id
                for card in app.query_one("#product_grid").query(ProductCard)
                if card.display
            ]
            self.assertEqual(visible, [3])
            self.assertIs(
                app.session.state.price_filter, PriceFilter.UNDER_3000
            )
            self.assertEqual(
                app.query_one("#filter_under3000", Button).variant,
                "primary",
            )

    async def test_add_buttons_fill_cart(self) -> None:
        """Catalog and featured add buttons feed the same cart entry."""
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            app.query_one("#featured_add_1", Button).press()
            app.query_one("#add_1", Button).press()
            await pilot.pause()
            self.assertEqual(app.session.item_count(), 2)
            self.assertEqual(app.session.total_price(), 7000)
            self.assertEqual(self._cart_table(app).row_count, 1)

    async def test_cart_panel_toggles(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            panel = app.query_one("#cart_panel", Vertical)
            self.assertFalse(panel.display)
            await pilot.press("c")
            await pilot.pause()
            self.assertTrue(panel.display)
            await pilot.click("#cart_btn")
            await pilot.pause()
            self.assertFalse(panel.display)

    async def test_empty_cart_shows_placeholder(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            self.assertTrue(app.query_one("#cart_empty").display)
            self.assertFalse(app.query_one("#cart_contents").display)
            app.add_product(2)
            await pilot.pause()
            self.assertFalse(app.query_one("#cart_empty").display)
            self.assertTrue(app.query_one("#cart_contents").display)

    async def test_increment_decrement_remove(self) -> None:
        """The +/- controls act on the selected cart row."""
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            app.add_product(4)
            await pilot.pause()
            app.action_increment()
            self.assertEqual(app.session.state.cart[0].quantity, 2)
            app.action_decrement()
            app.action_decrement()
            await pilot.pause()
            self.assertEqual(app.session.state.cart, ())
            self.assertEqual(self._cart_table(app).row_count, 0)

            app.add_product(5)
            app.action_remove_item()
            await pilot.pause()
            self.assertEqual(app.session.state.cart, ())

    async def test_controls_on_empty_cart_are_harmless(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE, notifications=True) as pilot:
            app.action_increment()
            app.action_decrement()
            app.action_remove_item()
            app.action_checkout()
            await pilot.pause()
            self.assertEqual(app.session.state.cart, ())

    async def test_unknown_product_notifies(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE, notifications=True) as pilot:
            app.add_product(404)
            await pilot.pause()
            self.assertEqual(app.session.state.cart, ())

    async def test_delivery_method_selection(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            app.add_product(3)
            app.action_toggle_cart()
            await pilot.pause()
            app.query_one("#delivery_express", RadioButton).value = True
            await pilot.pause()
            self.assertIs(app.delivery_method, DeliveryMethod.EXPRESS)

    async def test_checkout_clears_cart(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE, notifications=True) as pilot:
            app.add_product(1)
            app.add_product(6)
            await pilot.pause()
            app.action_checkout()
            await pilot.pause()
            self.assertEqual(app.session.state.cart, ())
            self.assertEqual(self._cart_table(app).row_count, 0)

    async def test_copy_cart_uses_clipboard(self) -> None:
        """action_copy_cart puts a tab-separated summary on the clipboard."""
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE) as pilot:
            app.add_product(1)
            mock_clip = MagicMock()
            with patch.dict("sys.modules", {"pyperclip": mock_clip}):
                app.action_copy_cart()
                await pilot.pause()
            mock_clip.copy.assert_called_once()
            text: str = mock_clip.copy.call_args[0][0]
            self.assertIn("Name\tPrice", text)
            self.assertIn("Нежность\t3500\t1\t3500", text)

    async def test_copy_empty_cart_warns(self) -> None:
        app = FloraApp(CatalogLoader.load())
        async with app.run_test(size=_SIZE, notifications=True) as pilot:
            mock_clip = MagicMock()
            with patch.dict("sys.modules", {"pyperclip": mock_clip}):
                app.action_copy_cart()
                await pilot.pause()
            mock_clip.copy.assert_not_called()

    async def test_custom_catalog_injected(self) -> None:
        """The app renders whatever catalog it is given."""
        catalog = [
            Product(id=11, name="Пион", price=1000, category="Пионы"),
            Product(id=12, name="Лилия", price=7000, category="Лилии"),
        ]
        app = FloraApp(catalog)
        async with app.run_test(size=_SIZE) as pilot:
            cards = app.query_one("#product_grid").query(ProductCard)
            self.assertEqual([c.product.id for c in cards], [11, 12])
            await pilot.pause()


if __name__ == "__main__":
    unittest.main()
