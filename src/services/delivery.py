# src/services/delivery.py

"""Delivery options and fee quoting for a cart."""

import logging
from dataclasses import dataclass
from enum import Enum

from src.config.settings import Settings
from src.services.cart import Cart, total_price

logger = logging.getLogger("flora.delivery")


class DeliveryMethod(Enum):
    """How an order reaches the customer."""

    STANDARD = "standard"
    EXPRESS = "express"
    PICKUP = "pickup"

    @property
    def label(self) -> str:
        return Settings.DELIVERY_LABELS[self.value]


@dataclass(frozen=True)
class DeliveryQuote:
    """Price breakdown for a cart with a chosen delivery method."""

    subtotal: int
    fee: int
    method: DeliveryMethod

    @property
    def total(self) -> int:
        return self.subtotal + self.fee


def delivery_fee(subtotal: int, method: DeliveryMethod) -> int:
    """Fee for delivering goods worth *subtotal*.

    Nothing to deliver means no fee. Standard delivery is free from
    ``Settings.FREE_DELIVERY_THRESHOLD`` upwards.
    """
    if subtotal <= 0 or method is DeliveryMethod.PICKUP:
        return 0
    if method is DeliveryMethod.EXPRESS:
        return Settings.EXPRESS_DELIVERY_FEE
    if subtotal >= Settings.FREE_DELIVERY_THRESHOLD:
        return 0
    return Settings.STANDARD_DELIVERY_FEE


def quote(
    cart: Cart, method: DeliveryMethod = DeliveryMethod.STANDARD
) -> DeliveryQuote:
    subtotal = total_price(cart)
    result = DeliveryQuote(
        subtotal=subtotal,
        fee=delivery_fee(subtotal, method),
        method=method,
    )
    logger.debug(
        "Quoted %s delivery: subtotal=%d fee=%d",
        method.value,
        result.subtotal,
        result.fee,
    )
    return result
