# tests/test_delivery.py

"""Tests for delivery fees, quotes and the plain-text receipt."""

import unittest

from src.models.product import Product
from src.services.cart import add_to_cart
from src.services.delivery import DeliveryMethod, delivery_fee, quote
from src.services.receipt import format_receipt


class TestDeliveryFee(unittest.TestCase):
    """delivery_fee rules for each method."""

    def test_standard_below_threshold_charged(self) -> None:
        self.assertEqual(delivery_fee(2800, DeliveryMethod.STANDARD), 300)

    def test_standard_at_threshold_free(self) -> None:
        """Free delivery starts exactly at 3000."""
        self.assertEqual(delivery_fee(3000, DeliveryMethod.STANDARD), 0)

    def test_express_flat_fee(self) -> None:
        for subtotal in (100, 3000, 50_000):
            with self.subTest(subtotal=subtotal):
                self.assertEqual(
                    delivery_fee(subtotal, DeliveryMethod.EXPRESS), 500
                )

    def test_pickup_free(self) -> None:
        self.assertEqual(delivery_fee(100, DeliveryMethod.PICKUP), 0)

    def test_empty_cart_free_for_all_methods(self) -> None:
        for method in DeliveryMethod:
            with self.subTest(method=method):
                self.assertEqual(delivery_fee(0, method), 0)


class TestQuote(unittest.TestCase):
    """quote() over a cart."""

    def setUp(self) -> None:
        tulips = Product(id=3, name="Весенний", price=2800)
        self.cart = add_to_cart((), tulips)

    def test_standard_quote(self) -> None:
        result = quote(self.cart)
        self.assertEqual(result.subtotal, 2800)
        self.assertEqual(result.fee, 300)
        self.assertEqual(result.total, 3100)
        self.assertIs(result.method, DeliveryMethod.STANDARD)

    def test_express_quote(self) -> None:
        result = quote(self.cart, DeliveryMethod.EXPRESS)
        self.assertEqual(result.total, 3300)

    def test_empty_cart_quote(self) -> None:
        result = quote((), DeliveryMethod.EXPRESS)
        self.assertEqual(result.total, 0)


class TestReceipt(unittest.TestCase):
    """format_receipt output."""

    def test_lists_items_and_totals(self) -> None:
        product = Product(id=1, name="Нежность", price=3500)
        cart = add_to_cart(add_to_cart((), product), product)
        text = format_receipt(cart, quote(cart))
        lines = text.splitlines()
        self.assertEqual(lines[0], "Name\tPrice\tQuantity\tSubtotal")
        self.assertEqual(lines[1], "Нежность\t3500\t2\t7000")
        self.assertIn("Total\t7000", text)
        self.assertIn("Delivery (standard)\t0", text)
        self.assertIn("Due\t7000", text)


if __name__ == "__main__":
    unittest.main()
