# src/filters/price_filter.py

"""Catalog filtering by price band and category."""

import logging
from collections.abc import Iterable

from src.config.settings import Settings
from src.models.product import Product
from src.models.shop_state import PriceFilter

logger = logging.getLogger("flora.filters")


class ProductFilter:
    """Derive catalog views without reordering the source catalog."""

    @staticmethod
    def price_band(price: int) -> PriceFilter:
        """Return the one band that contains *price*.

        Bounds belong to the band above them: 3000 is in
        ``BETWEEN_3000_AND_5000`` and 5000 in ``AT_OR_OVER_5000``.
        """
        if price < Settings.PRICE_LOW_BOUND:
            return PriceFilter.UNDER_3000
        if price < Settings.PRICE_HIGH_BOUND:
            return PriceFilter.BETWEEN_3000_AND_5000
        return PriceFilter.AT_OR_OVER_5000

    @staticmethod
    def matches(product: Product, mode: PriceFilter) -> bool:
        if mode is PriceFilter.ALL:
            return True
        return ProductFilter.price_band(product.price) is mode

    @staticmethod
    def filter_by_price(
        products: Iterable[Product],
        mode: PriceFilter,
    ) -> list[Product]:
        """Keep the products inside the *mode* band, in catalog order."""
        kept = [p for p in products if ProductFilter.matches(p, mode)]
        logger.debug(
            "Price filter '%s' kept %d products", mode.value, len(kept)
        )
        return kept

    @staticmethod
    def filter_by_category(
        products: Iterable[Product],
        category: str | None,
    ) -> list[Product]:
        """Keep products in *category* (case-insensitive).

        ``None`` or a blank category keeps everything.
        """
        if category is None or not category.strip():
            return list(products)

        wanted = category.strip().casefold()
        return [p for p in products if p.category.casefold() == wanted]

    @staticmethod
    def categories(products: Iterable[Product]) -> list[str]:
        """Distinct categories in order of first appearance."""
        seen: list[str] = []
        for product in products:
            if product.category and product.category not in seen:
                seen.append(product.category)
        return seen
