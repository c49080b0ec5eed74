# src/services/shop_session.py

"""The storefront session: an injected catalog plus the current state."""

import logging
from collections.abc import Iterable
from dataclasses import replace

from src.config.settings import Settings
from src.filters.price_filter import ProductFilter
from src.models.product import Product
from src.models.shop_state import ActiveSection, PriceFilter, ShopState
from src.services import cart as cart_ops
from src.services.delivery import DeliveryMethod, DeliveryQuote, quote
from src.storage.catalog_loader import CatalogError

logger = logging.getLogger("flora.session")


class UnknownProductError(LookupError):
    """Raised when an action names a product id outside the catalog."""


class EmptyCartError(RuntimeError):
    """Raised when checking out with nothing in the cart."""


class ShopSession:
    """Owns one browsing session.

    The catalog is fixed at construction. Every action replaces
    ``self.state`` with a new :class:`ShopState` built from pure
    transitions; nothing mutates a state in place.
    """

    def __init__(
        self,
        catalog: Iterable[Product],
        state: ShopState | None = None,
    ) -> None:
        self.catalog: tuple[Product, ...] = tuple(catalog)
        ids = [p.id for p in self.catalog]
        if len(ids) != len(set(ids)):
            raise CatalogError("Catalog contains duplicate product ids")
        self._by_id: dict[int, Product] = {p.id: p for p in self.catalog}
        self.state: ShopState = state or ShopState()
        cart_ids = [item.id for item in self.state.cart]
        if len(cart_ids) != len(set(cart_ids)):
            raise ValueError("Cart contains duplicate product ids")
        logger.debug(
            "Session started with %d products", len(self.catalog)
        )

    # ── Lookups ──────────────────────────────────────────

    def product(self, product_id: int) -> Product:
        try:
            return self._by_id[product_id]
        except KeyError:
            raise UnknownProductError(
                f"No product with id {product_id}"
            ) from None

    def visible_products(self) -> list[Product]:
        """The catalog as narrowed by the current price filter."""
        return ProductFilter.filter_by_price(
            self.catalog, self.state.price_filter
        )

    def featured_products(self) -> list[Product]:
        return list(self.catalog[: Settings.FEATURED_COUNT])

    def total_price(self) -> int:
        return cart_ops.total_price(self.state.cart)

    def item_count(self) -> int:
        return cart_ops.item_count(self.state.cart)

    def delivery_quote(
        self, method: DeliveryMethod = DeliveryMethod.STANDARD
    ) -> DeliveryQuote:
        return quote(self.state.cart, method)

    # ── Cart actions ─────────────────────────────────────

    def _set_cart(self, cart: cart_ops.Cart) -> None:
        self.state = replace(self.state, cart=cart)

    def add_to_cart(self, product_id: int) -> None:
        self._set_cart(
            cart_ops.add_to_cart(self.state.cart, self.product(product_id))
        )
        logger.debug(
            "Cart now holds %d items, total %d",
            self.item_count(),
            self.total_price(),
        )

    def remove_from_cart(self, product_id: int) -> None:
        self._set_cart(cart_ops.remove_from_cart(self.state.cart, product_id))

    def update_quantity(self, product_id: int, quantity: int) -> None:
        self._set_cart(
            cart_ops.update_quantity(self.state.cart, product_id, quantity)
        )

    def increment(self, product_id: int) -> None:
        self._set_cart(cart_ops.increment(self.state.cart, product_id))

    def decrement(self, product_id: int) -> None:
        self._set_cart(cart_ops.decrement(self.state.cart, product_id))

    def clear_cart(self) -> None:
        self._set_cart(cart_ops.clear_cart(self.state.cart))

    def checkout(
        self, method: DeliveryMethod = DeliveryMethod.STANDARD
    ) -> DeliveryQuote:
        """Quote the current cart, then empty it."""
        if not self.state.cart:
            raise EmptyCartError("Cannot check out an empty cart")
        result = self.delivery_quote(method)
        logger.info(
            "Checkout: %d items, subtotal=%d, delivery=%s fee=%d",
            self.item_count(),
            result.subtotal,
            method.value,
            result.fee,
        )
        self.clear_cart()
        return result

    # ── Navigation / filter ──────────────────────────────

    def set_active_section(self, section: ActiveSection) -> None:
        self.state = replace(self.state, active_section=section)
        logger.debug("Active section -> %s", section.value)

    def set_price_filter(self, mode: PriceFilter) -> None:
        self.state = replace(self.state, price_filter=mode)
        logger.debug("Price filter -> %s", mode.value)
