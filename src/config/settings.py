# src/config/settings.py

"""Central configuration for the flora storefront."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the flora storefront."""

    # --- Shop ---
    SHOP_NAME: str = "Флора"
    CURRENCY: str = os.getenv("FLORA_CURRENCY", "₽")
    FEATURED_COUNT: int = 3             # Products shown on the home page

    # --- Price bands (lower bound inclusive) ---
    PRICE_LOW_BOUND: int = 3000
    PRICE_HIGH_BOUND: int = 5000

    # --- Delivery ---
    FREE_DELIVERY_THRESHOLD: int = 3000  # Standard delivery is free from here
    STANDARD_DELIVERY_FEE: int = 300
    EXPRESS_DELIVERY_FEE: int = 500
    PICKUP_ADDRESS: str = "ул. Цветочная, 15"

    # --- Labels ---
    SECTION_LABELS: dict[str, str] = {
        "home": "Главная",
        "catalog": "Каталог",
        "delivery": "Доставка",
        "payment": "Оплата",
        "about": "О нас",
        "contacts": "Контакты",
    }
    FILTER_LABELS: dict[str, str] = {
        "all": "Все букеты",
        "under3000": "До 3000 ₽",
        "3000to5000": "От 3000 ₽",
        "over5000": "От 5000 ₽",
    }
    DELIVERY_LABELS: dict[str, str] = {
        "standard": "Доставка по городу",
        "express": "Срочная доставка",
        "pickup": "Самовывоз",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    CATALOG_PATH: Path = Path(
        os.getenv(
            "FLORA_CATALOG_PATH",
            str(BASE_DIR / "src" / "config" / "catalog.json"),
        )
    )
    LOGS_DIR: Path = Path(
        os.getenv("FLORA_LOGS_DIR", str(BASE_DIR / "logs"))
    )

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FLORA_LOG_LEVEL", "DEBUG").upper()
    LOG_KEEP_RUNS: int = 20             # Run log files kept in LOGS_DIR
