# main.py

"""Entry point for the flora storefront (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.models.shop_state import PriceFilter
from src.services.delivery import DeliveryMethod

logger = logging.getLogger("flora.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="flora",
        description="Flower bouquet storefront.",
        epilog="Run without arguments to open the interactive storefront.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_catalog",
        help="Print the catalog and exit.",
    )
    mode.add_argument(
        "--quote",
        default=None,
        metavar="ID[,ID...]",
        help="Add the given product ids to a cart and print the total.",
    )
    parser.add_argument(
        "-p",
        "--price",
        choices=[f.value for f in PriceFilter],
        default=PriceFilter.ALL.value,
        help="Price band for --list (default: all).",
    )
    parser.add_argument(
        "--category",
        default=None,
        help="Only list bouquets of this category.",
    )
    parser.add_argument(
        "-d",
        "--delivery",
        choices=[m.value for m in DeliveryMethod],
        default=DeliveryMethod.STANDARD.value,
        help="Delivery method for --quote (default: standard).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        dest="catalog_path",
        help="Path to a catalog JSON file (default: bundled catalog).",
    )
    return parser


def _run_tui(catalog_path: str | None) -> None:
    """Launch the interactive Textual storefront."""
    from pathlib import Path

    from src.storage.catalog_loader import CatalogError, CatalogLoader
    from src.ui.app import FloraApp

    try:
        catalog = CatalogLoader.load(
            Path(catalog_path) if catalog_path else None
        )
    except CatalogError as exc:
        logger.error("Catalog load failed: %s", exc)
        sys.stderr.write(f"{exc}\n")
        sys.exit(1)

    try:
        app = FloraApp(catalog)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("flora TUI shutting down")


def main() -> None:
    """Route to TUI (no mode flag) or a headless CLI command."""
    parser = _build_parser()
    args = parser.parse_args()

    tui = not args.list_catalog and args.quote is None
    log_file = setup_logging(tui=tui)
    logger.info("flora starting, log file: %s", log_file)

    if args.list_catalog:
        from src.cli.runner import list_catalog

        sys.exit(
            list_catalog(
                price=args.price,
                category=args.category,
                output_format=args.output_format,
                catalog_path=args.catalog_path,
            )
        )
    elif args.quote is not None:
        from src.cli.runner import quote_cart

        sys.exit(
            quote_cart(
                id_csv=args.quote,
                delivery=args.delivery,
                output_format=args.output_format,
                catalog_path=args.catalog_path,
            )
        )
    else:
        _run_tui(args.catalog_path)


if __name__ == "__main__":
    main()
