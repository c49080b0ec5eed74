# src/services/cart.py

"""Pure cart transitions.

A cart is an ordered tuple of :class:`CartItem`, unique by product id.
Every function here returns a new tuple and leaves its input untouched,
so the caller decides when the new cart becomes the current one.
"""

import logging
from dataclasses import replace

from src.models.product import CartItem, Product

logger = logging.getLogger("flora.cart")

Cart = tuple[CartItem, ...]


class InvalidQuantityError(ValueError):
    """Raised when a quantity is not an integer."""


def find_item(cart: Cart, product_id: int) -> CartItem | None:
    """Return the entry for *product_id*, or ``None`` if absent."""
    for item in cart:
        if item.id == product_id:
            return item
    return None


def add_to_cart(cart: Cart, product: Product) -> Cart:
    """Increment the product's quantity, or append it with quantity 1."""
    if find_item(cart, product.id) is None:
        logger.debug("Added product %d (%s)", product.id, product.name)
        return (*cart, CartItem.from_product(product))

    return tuple(
        replace(item, quantity=item.quantity + 1)
        if item.id == product.id
        else item
        for item in cart
    )


def remove_from_cart(cart: Cart, product_id: int) -> Cart:
    """Drop the entry for *product_id*. Absent ids are a no-op."""
    if find_item(cart, product_id) is None:
        return cart
    logger.debug("Removed product %d", product_id)
    return tuple(item for item in cart if item.id != product_id)


def update_quantity(cart: Cart, product_id: int, quantity: int) -> Cart:
    """Set the entry's quantity to exactly *quantity*.

    Zero removes the entry; negative values are clamped to zero.
    Unknown ids are a no-op. Raises :class:`InvalidQuantityError` for
    anything that isn't a plain ``int``.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantityError(
            f"Quantity must be an integer, got {quantity!r}"
        )

    if quantity <= 0:
        if quantity < 0:
            logger.debug(
                "Clamped quantity %d to 0 for product %d",
                quantity,
                product_id,
            )
        return remove_from_cart(cart, product_id)

    if find_item(cart, product_id) is None:
        return cart

    return tuple(
        replace(item, quantity=quantity)
        if item.id == product_id
        else item
        for item in cart
    )


def increment(cart: Cart, product_id: int) -> Cart:
    item = find_item(cart, product_id)
    if item is None:
        return cart
    return update_quantity(cart, product_id, item.quantity + 1)


def decrement(cart: Cart, product_id: int) -> Cart:
    item = find_item(cart, product_id)
    if item is None:
        return cart
    return update_quantity(cart, product_id, item.quantity - 1)


def clear_cart(cart: Cart) -> Cart:
    if cart:
        logger.debug("Cleared cart with %d entries", len(cart))
    return ()


def total_price(cart: Cart) -> int:
    """Sum of ``price * quantity`` over all entries (0 when empty)."""
    return sum(item.subtotal for item in cart)


def item_count(cart: Cart) -> int:
    """Sum of quantities, shown on the cart badge."""
    return sum(item.quantity for item in cart)
