# src/storage/catalog_loader.py

"""Loads the bouquet catalog fixture from disk."""

import json
import logging
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("flora.storage")

_REQUIRED_FIELDS: dict[str, type] = {
    "id": int,
    "name": str,
    "price": int,
    "image": str,
    "category": str,
}


class CatalogError(ValueError):
    """Raised when a catalog fixture can't be read or is malformed."""


class CatalogLoader:
    """Reads a JSON array of products into an immutable catalog."""

    @staticmethod
    def default_path() -> Path:
        return Settings.CATALOG_PATH

    @staticmethod
    def _parse_entry(index: int, entry: Any) -> Product:
        if not isinstance(entry, dict):
            raise CatalogError(f"Entry #{index} is not an object")

        for name, expected in _REQUIRED_FIELDS.items():
            if name not in entry:
                raise CatalogError(
                    f"Entry #{index} is missing field '{name}'"
                )
            value = entry[name]
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, expected):
                raise CatalogError(
                    f"Entry #{index} field '{name}' must be "
                    f"{expected.__name__}, got {type(value).__name__}"
                )

        if entry["price"] < 0:
            raise CatalogError(
                f"Entry #{index} has negative price {entry['price']}"
            )

        return Product(
            id=entry["id"],
            name=entry["name"],
            price=entry["price"],
            image=entry["image"],
            category=entry["category"],
        )

    @classmethod
    def load(cls, path: Path | None = None) -> tuple[Product, ...]:
        """Load and validate the catalog at *path* (default fixture if None)."""
        filepath = path or cls.default_path()
        try:
            with open(filepath, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise CatalogError(
                f"Cannot read catalog {filepath}: {e}"
            ) from e
        except json.JSONDecodeError as e:
            raise CatalogError(
                f"Catalog {filepath} is not valid JSON: {e}"
            ) from e

        if not isinstance(data, list):
            raise CatalogError(
                f"Catalog {filepath} must contain a JSON array"
            )

        products: list[Product] = []
        seen: set[int] = set()
        for index, entry in enumerate(data):
            product = cls._parse_entry(index, entry)
            if product.id in seen:
                raise CatalogError(
                    f"Duplicate product id {product.id} in {filepath}"
                )
            seen.add(product.id)
            products.append(product)

        logger.info(
            "Loaded %d products from %s", len(products), filepath
        )
        return tuple(products)
