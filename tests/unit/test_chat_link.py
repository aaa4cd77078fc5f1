import pytest

from web_modules.chat_link import build_chat_link, normalize_phone, product_chat_link, product_message
from web_modules.models import Product


@pytest.mark.unit
class TestChatLink:

    def test_normalize_phone(self):
        assert normalize_phone("+7 (900) 123-45-67") == "79001234567"
        assert normalize_phone(None) == ""

    def test_link_with_message_is_url_encoded(self):
        link = build_chat_link("79001234567", "Hi! Price: 100 & more")
        assert link == "https://wa.me/79001234567?text=Hi%21%20Price%3A%20100%20%26%20more"

    def test_link_without_message(self):
        assert build_chat_link("+7 900") == "https://wa.me/7900"

    def test_no_digits_means_no_link(self):
        assert build_chat_link("", "hello") is None
        assert build_chat_link("call us", "hello") is None

    def test_product_message_uses_template(self):
        product = Product(name="Silk Dress", price=4990, images=["a"])

        message = product_message(
            product, "Boutique", template="{name} for {price} at {site_name}", currency="RUB"
        )

        assert message == "Silk Dress for 4 990 RUB at Boutique"

    def test_product_chat_link_contains_product_name(self):
        product = Product(name="Tote", price=100, images=["a"])

        link = product_chat_link(product, "79001234567", "Boutique")

        assert link.startswith("https://wa.me/79001234567?text=")
        assert "Tote" in link
