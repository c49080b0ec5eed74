# src/models/product.py

"""Catalog and cart data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A single bouquet in the catalog. Never mutated after load."""

    id: int
    name: str
    price: int
    image: str = ""
    category: str = ""

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(
                f"Product {self.id} has negative price {self.price}"
            )


@dataclass(frozen=True)
class CartItem:
    """A product snapshot taken at add time, plus a quantity >= 1."""

    id: int
    name: str
    price: int
    image: str
    category: str
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(
                f"Cart item {self.id} has quantity {self.quantity}; "
                "items with no quantity leave the cart"
            )

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "CartItem":
        """Capture the product's fields so later catalog edits don't leak in."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            image=product.image,
            category=product.category,
            quantity=quantity,
        )

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity
