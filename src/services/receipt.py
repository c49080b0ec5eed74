# src/services/receipt.py

"""Plain-text cart summaries for the clipboard and the terminal."""

from src.config.settings import Settings
from src.services.cart import Cart
from src.services.delivery import DeliveryQuote


def format_receipt(cart: Cart, quote: DeliveryQuote) -> str:
    """Format the cart as tab-separated lines followed by the totals."""
    currency = Settings.CURRENCY
    lines: list[str] = ["Name\tPrice\tQuantity\tSubtotal"]
    for item in cart:
        lines.append(
            f"{item.name}\t{item.price}\t{item.quantity}\t{item.subtotal}"
        )

    lines.append(f"Total\t{quote.subtotal} {currency}")
    lines.append(f"Delivery ({quote.method.value})\t{quote.fee} {currency}")
    lines.append(f"Due\t{quote.total} {currency}")
    return "\n".join(lines)
