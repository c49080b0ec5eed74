# src/ui/app.py

"""Terminal storefront for the flora bouquet shop."""

import logging
from collections.abc import Iterable
from typing import cast

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, Vertical, VerticalScroll
from textual.widgets import (
    Button,
    ContentSwitcher,
    DataTable,
    Footer,
    Header,
    RadioButton,
    RadioSet,
    Static,
)

from src.config.settings import Settings
from src.models.product import Product
from src.models.shop_state import ActiveSection, PriceFilter
from src.services.delivery import DeliveryMethod
from src.services.receipt import format_receipt
from src.services.shop_session import (
    EmptyCartError,
    ShopSession,
    UnknownProductError,
)
from src.storage.catalog_loader import CatalogLoader
from src.ui import content
from src.ui.content import InfoCard

logger = logging.getLogger("flora.ui")


def _info_card(card: InfoCard) -> Static:
    text = f"{card.icon}  [b]{card.title}[/b]\n{card.body}"
    if card.note:
        text += f"\n[dim]{card.note}[/dim]"
    return Static(text, classes="info-card")


class ProductCard(Vertical):
    """A bouquet tile with its category, name, price and an add button."""

    def __init__(self, product: Product, id_prefix: str = "") -> None:
        super().__init__(
            id=f"{id_prefix}card_{product.id}", classes="product-card"
        )
        self.product = product
        self._id_prefix = id_prefix

    def compose(self) -> ComposeResult:
        yield Static(self.product.category, classes="badge")
        yield Static(self.product.name, classes="card-title")
        yield Static(
            f"{self.product.price} {Settings.CURRENCY}",
            classes="card-price",
        )
        yield Button(
            content.ADD_TO_CART,
            variant="primary",
            id=f"{self._id_prefix}add_{self.product.id}",
        )


class FloraApp(App[object]):
    """Terminal storefront: sections, catalog filter and a cart panel."""

    CSS_PATH = "styles.css"
    TITLE = Settings.SHOP_NAME

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("c", "toggle_cart", "Cart"),
        Binding("1", "show_section('home')", "Home", show=False),
        Binding("2", "show_section('catalog')", "Catalog", show=False),
        Binding("3", "show_section('delivery')", "Delivery", show=False),
        Binding("4", "show_section('payment')", "Payment", show=False),
        Binding("5", "show_section('about')", "About", show=False),
        Binding("6", "show_section('contacts')", "Contacts", show=False),
        Binding("plus", "increment", "+1"),
        Binding("minus", "decrement", "-1"),
        Binding("delete", "remove_item", "Remove"),
        Binding("y", "copy_cart", "Copy Cart"),
    ]

    def __init__(self, catalog: Iterable[Product] | None = None) -> None:
        super().__init__()
        products = catalog if catalog is not None else CatalogLoader.load()
        self.session = ShopSession(products)
        self.delivery_method = DeliveryMethod.STANDARD
        self._cart_ids: list[int] = []

    # ── Layout ───────────────────────────────────────────

    def compose(self) -> ComposeResult:
        """Build the widget tree for the storefront."""
        yield Header()
        yield Horizontal(
            Static(f"🌸 {Settings.SHOP_NAME}", id="logo"),
            *[
                Button(section.label, id=f"nav_{section.value}", classes="nav-btn")
                for section in ActiveSection
            ],
            Button("🛒", id="cart_btn"),
            id="navbar",
        )
        yield Horizontal(
            ContentSwitcher(
                self._compose_home(),
                self._compose_catalog(),
                self._compose_info(
                    ActiveSection.DELIVERY, content.DELIVERY_CARDS
                ),
                self._compose_info(
                    ActiveSection.PAYMENT, content.PAYMENT_CARDS
                ),
                self._compose_about(),
                self._compose_info(
                    ActiveSection.CONTACTS, content.CONTACT_CARDS
                ),
                id="sections",
                initial=ActiveSection.HOME.value,
            ),
            self._compose_cart_panel(),
            id="body",
        )
        yield Static(content.COPYRIGHT, id="copyright")
        yield Footer()

    def _compose_home(self) -> VerticalScroll:
        return VerticalScroll(
            Static(content.HERO_TITLE, id="hero_title"),
            Static(content.HERO_SUBTITLE, id="hero_subtitle"),
            Button(
                content.HERO_BUTTON, variant="primary", id="hero_catalog_btn"
            ),
            Horizontal(
                *[
                    ProductCard(p, id_prefix="featured_")
                    for p in self.session.featured_products()
                ],
                id="featured",
            ),
            id=ActiveSection.HOME.value,
        )

    def _compose_catalog(self) -> VerticalScroll:
        return VerticalScroll(
            Static(content.CATALOG_TITLE, classes="section-title"),
            Horizontal(
                *[
                    Button(mode.label, id=f"filter_{mode.value}", classes="filter-btn")
                    for mode in PriceFilter
                ],
                id="filter_bar",
            ),
            Static("", id="catalog_status"),
            Grid(
                *[ProductCard(p) for p in self.session.catalog],
                id="product_grid",
            ),
            id=ActiveSection.CATALOG.value,
        )

    def _compose_info(
        self, section: ActiveSection, cards: Iterable[InfoCard]
    ) -> VerticalScroll:
        return VerticalScroll(
            Static(section.label, classes="section-title"),
            *[_info_card(card) for card in cards],
            id=section.value,
        )

    def _compose_about(self) -> VerticalScroll:
        return VerticalScroll(
            Static(ActiveSection.ABOUT.label, classes="section-title"),
            *[
                Static(paragraph, classes="paragraph")
                for paragraph in content.ABOUT_PARAGRAPHS
            ],
            Horizontal(
                *[
                    Static(f"{value}\n[dim]{caption}[/dim]", classes="stat")
                    for value, caption in content.ABOUT_STATS
                ],
                id="about_stats",
            ),
            id=ActiveSection.ABOUT.value,
        )

    def _compose_cart_panel(self) -> Vertical:
        return Vertical(
            Static(content.CART_TITLE, classes="section-title"),
            Static(content.CART_EMPTY, id="cart_empty"),
            Vertical(
                cast(
                    DataTable[str],
                    DataTable(
                        id="cart_table",
                        cursor_type="row",
                        zebra_stripes=True,
                    ),
                ),
                Horizontal(
                    Button("−", id="cart_dec"),
                    Button("+", id="cart_inc"),
                    Button("✕", variant="error", id="cart_remove"),
                    id="cart_controls",
                ),
                RadioSet(
                    *[
                        RadioButton(
                            method.label,
                            value=method is self.delivery_method,
                            id=f"delivery_{method.value}",
                        )
                        for method in DeliveryMethod
                    ],
                    id="delivery_methods",
                ),
                Static("", id="cart_total"),
                Static("", id="cart_delivery"),
                Static("", id="cart_grand_total"),
                Button(content.CHECKOUT, variant="success", id="checkout_btn"),
                id="cart_contents",
            ),
            id="cart_panel",
        )

    def on_mount(self) -> None:
        """Configure the cart table and paint the initial state."""
        table = self._cart_table()
        table.add_columns("Букет", "Цена", "Кол-во", "Сумма")
        self._render_section()
        self._render_filter()
        self._refresh_cart()

    # ── Rendering ────────────────────────────────────────

    def _cart_table(self) -> DataTable[str]:
        return cast(
            DataTable[str], self.query_one("#cart_table", DataTable)
        )

    def _render_section(self) -> None:
        active = self.session.state.active_section
        self.query_one("#sections", ContentSwitcher).current = active.value
        for section in ActiveSection:
            button = self.query_one(f"#nav_{section.value}", Button)
            button.variant = "primary" if section is active else "default"

    def _render_filter(self) -> None:
        mode = self.session.state.price_filter
        for option in PriceFilter:
            button = self.query_one(f"#filter_{option.value}", Button)
            button.variant = "primary" if option is mode else "default"

        visible = {p.id for p in self.session.visible_products()}
        grid = self.query_one("#product_grid", Grid)
        for card in grid.query(ProductCard):
            card.display = card.product.id in visible

        status = self.query_one("#catalog_status", Static)
        if visible:
            status.update(
                f"Показано {len(visible)} из {len(self.session.catalog)}"
            )
        else:
            status.update("Нет букетов в этом диапазоне")

    def _refresh_cart(self) -> None:
        """Redraw the cart panel and the badge from the session state."""
        currency = Settings.CURRENCY
        table = self._cart_table()
        previous_row = table.cursor_row
        table.clear()
        self._cart_ids = []
        for item in self.session.state.cart:
            table.add_row(
                item.name,
                f"{item.price} {currency}",
                str(item.quantity),
                f"{item.subtotal} {currency}",
                key=str(item.id),
            )
            self._cart_ids.append(item.id)

        if self._cart_ids:
            table.move_cursor(
                row=min(max(previous_row, 0), len(self._cart_ids) - 1)
            )

        is_empty = not self._cart_ids
        self.query_one("#cart_empty", Static).display = is_empty
        self.query_one("#cart_contents", Vertical).display = not is_empty

        quote = self.session.delivery_quote(self.delivery_method)
        self.query_one("#cart_total", Static).update(
            f"Итого: {quote.subtotal} {currency}"
        )
        self.query_one("#cart_delivery", Static).update(
            f"{quote.method.label}: {quote.fee} {currency}"
        )
        self.query_one("#cart_grand_total", Static).update(
            f"[b]К оплате: {quote.total} {currency}[/b]"
        )

        count = self.session.item_count()
        self.query_one("#cart_btn", Button).label = (
            f"🛒 {count}" if count else "🛒"
        )

    # ── Events ───────────────────────────────────────────

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route button clicks to navigation, filter and cart actions."""
        button_id = event.button.id or ""
        if button_id.startswith("nav_"):
            self.show_section(
                ActiveSection.from_value(button_id.removeprefix("nav_"))
            )
        elif button_id.startswith("filter_"):
            self.apply_price_filter(
                PriceFilter.from_value(button_id.removeprefix("filter_"))
            )
        elif button_id.startswith(("add_", "featured_add_")):
            self.add_product(int(button_id.rsplit("_", 1)[1]))
        elif button_id == "hero_catalog_btn":
            self.show_section(ActiveSection.CATALOG)
        elif button_id == "cart_btn":
            self.action_toggle_cart()
        elif button_id == "cart_inc":
            self.action_increment()
        elif button_id == "cart_dec":
            self.action_decrement()
        elif button_id == "cart_remove":
            self.action_remove_item()
        elif button_id == "checkout_btn":
            self.action_checkout()

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        """Switch the delivery method used for the cart quote."""
        pressed_id = event.pressed.id or ""
        self.delivery_method = DeliveryMethod(
            pressed_id.removeprefix("delivery_")
        )
        logger.debug("Delivery method -> %s", self.delivery_method.value)
        self._refresh_cart()

    # ── Operations ───────────────────────────────────────

    def show_section(self, section: ActiveSection) -> None:
        self.session.set_active_section(section)
        self._render_section()

    def apply_price_filter(self, mode: PriceFilter) -> None:
        self.session.set_price_filter(mode)
        self._render_filter()

    def add_product(self, product_id: int) -> None:
        """Put one more of *product_id* into the cart."""
        try:
            self.session.add_to_cart(product_id)
        except UnknownProductError as e:
            logger.error("Add to cart failed: %s", e)
            self.notify(str(e), severity="error")
            return
        self._refresh_cart()
        self.notify(
            f"«{self.session.product(product_id).name}» добавлен в корзину"
        )

    def _selected_cart_id(self) -> int | None:
        row = self._cart_table().cursor_row
        if 0 <= row < len(self._cart_ids):
            return self._cart_ids[row]
        return None

    def action_show_section(self, section: str) -> None:
        self.show_section(ActiveSection.from_value(section))

    def action_toggle_cart(self) -> None:
        panel = self.query_one("#cart_panel", Vertical)
        panel.display = not panel.display

    def action_increment(self) -> None:
        product_id = self._selected_cart_id()
        if product_id is None:
            self.notify("Корзина пуста", severity="warning")
            return
        self.session.increment(product_id)
        self._refresh_cart()

    def action_decrement(self) -> None:
        """Lower the selected quantity; at 1 the item leaves the cart."""
        product_id = self._selected_cart_id()
        if product_id is None:
            self.notify("Корзина пуста", severity="warning")
            return
        self.session.decrement(product_id)
        self._refresh_cart()

    def action_remove_item(self) -> None:
        product_id = self._selected_cart_id()
        if product_id is None:
            self.notify("Корзина пуста", severity="warning")
            return
        self.session.remove_from_cart(product_id)
        self._refresh_cart()

    def action_checkout(self) -> None:
        """Place the order for the current cart and empty it."""
        try:
            quote = self.session.checkout(self.delivery_method)
        except EmptyCartError:
            self.notify("Корзина пуста", severity="warning")
            return
        self._refresh_cart()
        self.notify(
            f"Заказ оформлен! К оплате: {quote.total} {Settings.CURRENCY}"
        )

    def action_copy_cart(self) -> None:
        """Copy a plain-text cart summary to the clipboard."""
        if not self.session.state.cart:
            self.notify("Корзина пуста", severity="warning")
            return
        try:
            import pyperclip  # type: ignore[import-untyped]

            pyperclip.copy(
                format_receipt(
                    self.session.state.cart,
                    self.session.delivery_quote(self.delivery_method),
                )
            )
            self.notify("Корзина скопирована")
        except Exception:
            logger.error(
                "Failed to copy cart to clipboard",
                exc_info=True,
            )
            self.notify("Install pyperclip", severity="warning")
