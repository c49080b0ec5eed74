# tests/test_content.py

"""Tests for the info section texts."""

import unittest

from src.config.settings import Settings
from src.ui.content import CONTACT_CARDS, DELIVERY_CARDS


class TestDeliveryCards(unittest.TestCase):
    """Delivery texts follow the configured fees and address."""

    def test_pickup_card_uses_configured_address(self) -> None:
        pickup = DELIVERY_CARDS[2]
        self.assertEqual(pickup.title, Settings.DELIVERY_LABELS["pickup"])
        self.assertIn(Settings.PICKUP_ADDRESS, pickup.body)

    def test_standard_card_mentions_threshold_and_fee(self) -> None:
        body = DELIVERY_CARDS[0].body
        self.assertIn(str(Settings.FREE_DELIVERY_THRESHOLD), body)
        self.assertIn(str(Settings.STANDARD_DELIVERY_FEE), body)

    def test_express_card_mentions_fee(self) -> None:
        self.assertIn(
            str(Settings.EXPRESS_DELIVERY_FEE), DELIVERY_CARDS[1].body
        )

    def test_contact_address_matches_pickup(self) -> None:
        addresses = [c.body for c in CONTACT_CARDS if c.title == "Адрес"]
        self.assertEqual(addresses, [Settings.PICKUP_ADDRESS])


if __name__ == "__main__":
    unittest.main()
