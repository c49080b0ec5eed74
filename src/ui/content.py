# src/ui/content.py

"""Read-only texts for the storefront's information sections."""

from dataclasses import dataclass

from src.config.settings import Settings


@dataclass(frozen=True)
class InfoCard:
    """A titled block of text with an icon, as shown in info sections."""

    icon: str
    title: str
    body: str
    note: str = ""


HERO_TITLE = "Цветы для особых моментов"
HERO_SUBTITLE = (
    "Свежие букеты с доставкой по городу. "
    "Создаём настроение каждый день"
)
HERO_BUTTON = "Смотреть каталог →"

CATALOG_TITLE = "Каталог букетов"
ADD_TO_CART = "🛒 В корзину"
CART_TITLE = "Корзина"
CART_EMPTY = "Корзина пуста"
CHECKOUT = "Оформить заказ"

DELIVERY_CARDS: tuple[InfoCard, ...] = (
    InfoCard(
        "🚚",
        Settings.DELIVERY_LABELS["standard"],
        f"Бесплатная доставка при заказе от "
        f"{Settings.FREE_DELIVERY_THRESHOLD} {Settings.CURRENCY}. "
        f"Стандартная доставка — "
        f"{Settings.STANDARD_DELIVERY_FEE} {Settings.CURRENCY}",
    ),
    InfoCard(
        "⏱",
        Settings.DELIVERY_LABELS["express"],
        f"Доставим за 2 часа в пределах города — "
        f"{Settings.EXPRESS_DELIVERY_FEE} {Settings.CURRENCY}",
    ),
    InfoCard(
        "📍",
        Settings.DELIVERY_LABELS["pickup"],
        "Можете забрать заказ сами из нашего салона "
        f"по адресу: {Settings.PICKUP_ADDRESS}",
    ),
)

PAYMENT_CARDS: tuple[InfoCard, ...] = (
    InfoCard(
        "💳",
        "Картой онлайн",
        "Принимаем все банковские карты. "
        "Безопасная оплата через защищённое соединение",
    ),
    InfoCard("💵", "Наличными курьеру", "Оплата при получении заказа"),
    InfoCard("📱", "Переводом на карту", "СБП и банковские переводы"),
)

ABOUT_PARAGRAPHS: tuple[str, ...] = (
    "Мы — команда флористов с 10-летним опытом создания букетов "
    "для особых моментов. Каждый букет собирается вручную из свежих "
    "цветов, которые мы получаем напрямую от проверенных поставщиков.",
    "Наша миссия — дарить радость и создавать незабываемые впечатления "
    "через красоту цветов. Мы работаем с любовью к своему делу "
    "и вниманием к каждой детали.",
)

ABOUT_STATS: tuple[tuple[str, str], ...] = (
    ("10+", "лет опыта"),
    ("5000+", "счастливых клиентов"),
    ("100%", "свежие цветы"),
)

CONTACT_CARDS: tuple[InfoCard, ...] = (
    InfoCard(
        "📞", "Телефон", "+7 (999) 123-45-67", "Ежедневно с 9:00 до 21:00"
    ),
    InfoCard("✉", "Email", "info@flora.shop", "Ответим в течение часа"),
    InfoCard("📍", "Адрес", Settings.PICKUP_ADDRESS, "м. Парк Культуры"),
    InfoCard("💬", "Мессенджеры", "WhatsApp, Telegram", "Быстрая связь"),
)

COPYRIGHT = "© 2024 Флора. Все права защищены"
