# src/cli/runner.py

"""Headless catalog listing and cart quoting, sharing the TUI's session."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.filters.price_filter import ProductFilter
from src.models.product import Product
from src.models.shop_state import PriceFilter
from src.services.delivery import DeliveryMethod
from src.services.shop_session import ShopSession, UnknownProductError
from src.storage.catalog_loader import CatalogError, CatalogLoader

logger = logging.getLogger("flora.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def parse_ids(id_csv: str) -> list[int]:
    """Turn ``"1, 3,1"`` into ``[1, 3, 1]``.

    Raises ``SystemExit`` on anything that isn't an integer.
    """
    ids: list[int] = []
    for raw in id_csv.split(","):
        token = raw.strip()
        if not token:
            continue
        try:
            ids.append(int(token))
        except ValueError:
            _err.print(f"[red]Not a product id: {token}[/red]")
            raise SystemExit(1) from None
    return ids


def _load_catalog(catalog_path: str | None) -> tuple[Product, ...] | None:
    """Load the catalog, reporting failures on stderr (None on error)."""
    try:
        return CatalogLoader.load(
            Path(catalog_path) if catalog_path else None
        )
    except CatalogError as exc:
        logger.error("Catalog load failed: %s", exc)
        _err.print(f"[red]{exc}[/red]")
        return None


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "name": p.name,
            "price": p.price,
            "image": p.image,
            "category": p.category,
        }
        for p in products
    ]


def _print_catalog_table(products: list[Product], title: str) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(title=title, show_lines=True, title_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")

    for p in products:
        table.add_row(
            str(p.id),
            p.name,
            p.category or "—",
            f"{p.price:,} {Settings.CURRENCY}",
        )

    Console().print(table)


def list_catalog(
    price: str,
    category: str | None,
    output_format: str,
    catalog_path: str | None,
) -> int:
    """Print the filtered catalog and return an exit code (0=ok, 1=fail)."""
    try:
        mode = PriceFilter.from_value(price)
    except ValueError as exc:
        _err.print(f"[red]{exc}[/red]")
        return 1

    catalog = _load_catalog(catalog_path)
    if catalog is None:
        return 1

    products = ProductFilter.filter_by_category(
        ProductFilter.filter_by_price(catalog, mode), category
    )
    if not products:
        _err.print("[yellow]No bouquets match.[/yellow]")
        if category:
            known = ", ".join(ProductFilter.categories(catalog))
            _err.print(f"[dim]Categories: {known}[/dim]")
        return 1

    _err.print(
        f"[green]✓ {len(products)} of {len(catalog)} bouquets[/green]"
    )

    if output_format == "table":
        _print_catalog_table(products, f"{Settings.SHOP_NAME}: {mode.label}")
    else:
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


def quote_cart(
    id_csv: str,
    delivery: str,
    output_format: str,
    catalog_path: str | None,
) -> int:
    """Add each id to a fresh cart in order, then print the quote."""
    product_ids = parse_ids(id_csv)
    if not product_ids:
        _err.print("[red]No product ids given.[/red]")
        return 1

    catalog = _load_catalog(catalog_path)
    if catalog is None:
        return 1

    session = ShopSession(catalog)
    try:
        for product_id in product_ids:
            session.add_to_cart(product_id)
    except UnknownProductError as exc:
        logger.error("Quote failed: %s", exc)
        _err.print(f"[red]{exc}[/red]")
        return 1

    result = session.delivery_quote(DeliveryMethod(delivery))
    cart = session.state.cart

    if output_format == "table":
        currency = Settings.CURRENCY
        table = Table(
            title="Cart",
            show_lines=True,
            title_style="bold cyan",
        )
        table.add_column("Name")
        table.add_column("Price", justify="right")
        table.add_column("Qty", justify="right")
        table.add_column("Subtotal", justify="right", style="green")
        for item in cart:
            table.add_row(
                item.name,
                f"{item.price:,} {currency}",
                str(item.quantity),
                f"{item.subtotal:,} {currency}",
            )
        console = Console()
        console.print(table)
        console.print(f"Total: {result.subtotal:,} {currency}")
        console.print(
            f"{result.method.label}: {result.fee:,} {currency}"
        )
        console.print(f"[bold]Due: {result.total:,} {currency}[/bold]")
    else:
        json.dump(
            {
                "items": [
                    {
                        "id": item.id,
                        "name": item.name,
                        "price": item.price,
                        "quantity": item.quantity,
                        "subtotal": item.subtotal,
                    }
                    for item in cart
                ],
                "item_count": session.item_count(),
                "subtotal": result.subtotal,
                "delivery": result.method.value,
                "delivery_fee": result.fee,
                "total": result.total,
            },
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0
