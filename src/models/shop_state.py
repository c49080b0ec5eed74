# src/models/shop_state.py

"""Session state for the storefront: cart, active section, price filter."""

from dataclasses import dataclass
from enum import Enum

from src.config.settings import Settings
from src.models.product import CartItem


class PriceFilter(Enum):
    """Price bands offered by the catalog filter bar."""

    ALL = "all"
    UNDER_3000 = "under3000"
    BETWEEN_3000_AND_5000 = "3000to5000"
    AT_OR_OVER_5000 = "over5000"

    @property
    def label(self) -> str:
        return Settings.FILTER_LABELS[self.value]

    @classmethod
    def from_value(cls, value: str) -> "PriceFilter":
        """Parse a wire name such as ``under3000``.

        Raises ``ValueError`` for names outside the closed set.
        """
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(f.value for f in cls)
            raise ValueError(
                f"Unknown price filter '{value}' (valid: {valid})"
            ) from None


class ActiveSection(Enum):
    """Content panels reachable from the navigation bar."""

    HOME = "home"
    CATALOG = "catalog"
    DELIVERY = "delivery"
    PAYMENT = "payment"
    ABOUT = "about"
    CONTACTS = "contacts"

    @property
    def label(self) -> str:
        return Settings.SECTION_LABELS[self.value]

    @classmethod
    def from_value(cls, value: str) -> "ActiveSection":
        """Parse a wire name such as ``catalog``.

        Raises ``ValueError`` for names outside the closed set.
        """
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(
                f"Unknown section '{value}' (valid: {valid})"
            ) from None


@dataclass(frozen=True)
class ShopState:
    """Immutable snapshot of everything the storefront renders from.

    Transitions build a new instance with ``dataclasses.replace``.
    """

    cart: tuple[CartItem, ...] = ()
    active_section: ActiveSection = ActiveSection.HOME
    price_filter: PriceFilter = PriceFilter.ALL
