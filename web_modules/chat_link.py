"""
Prefilled WhatsApp chat links for ordering a product.
"""

import re
from typing import Optional
from urllib.parse import quote

from web_modules.catalog_view import format_price
from web_modules.config import web_settings
from web_modules.models import Product

CHAT_BASE_URL = "https://wa.me"


def normalize_phone(phone: Optional[str]) -> str:
    """Keep digits only: ``+7 (900) 123-45-67`` -> ``79001234567``."""
    return re.sub(r"\D", "", phone or "")


def build_chat_link(phone: Optional[str], message: str = "") -> Optional[str]:
    """
    Build a wa.me deep link.

    Returns:
        The link, or None when the phone number has no digits
    """
    digits = normalize_phone(phone)
    if not digits:
        return None
    if not message:
        return f"{CHAT_BASE_URL}/{digits}"
    return f"{CHAT_BASE_URL}/{digits}?text={quote(message, safe='')}"


def product_message(
    product: Product,
    site_name: str = "",
    template: Optional[str] = None,
    currency: Optional[str] = None,
) -> str:
    template = template or web_settings.CHAT_MESSAGE_TEMPLATE
    currency = web_settings.CURRENCY if currency is None else currency
    return template.format(
        name=product.name,
        price=format_price(product.price, currency),
        site_name=site_name or web_settings.SITE_TITLE,
    )


def product_chat_link(product: Product, phone: Optional[str], site_name: str = "") -> Optional[str]:
    return build_chat_link(phone, product_message(product, site_name))
