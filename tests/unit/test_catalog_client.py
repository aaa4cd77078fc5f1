"""
Tests for the web front-end API client
"""
import json

import httpx
import pytest

from web_modules.catalog_client import CatalogClient, CatalogClientError
from web_modules.models import Category, Product, SiteSettings


def make_client(handler, token=None) -> CatalogClient:
    return CatalogClient("http://api.test/", token=token, transport=httpx.MockTransport(handler))


@pytest.mark.unit
@pytest.mark.asyncio
class TestCatalogClientReads:

    async def test_fetch_categories(self):
        def handler(request):
            assert request.url.path == "/api/categories"
            return httpx.Response(200, json=[
                {"id": 1, "name": "Dresses", "description": None, "image_url": None, "display_order": 0},
            ])

        categories = await make_client(handler).fetch_categories()

        assert categories == [Category(id=1, name="Dresses", display_order=0)]

    async def test_fetch_products_drops_empty_params(self):
        seen = {}

        def handler(request):
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=[{"id": 5, "name": "Tote", "price": 10, "images": ["a"]}])

        products = await make_client(handler).fetch_products(category_id=2)

        assert seen["params"] == {"category_id": "2"}
        assert products[0].name == "Tote"

    async def test_fetch_settings_missing_returns_none(self):
        def handler(request):
            return httpx.Response(404, json={"detail": "Settings not configured"})

        assert await make_client(handler).fetch_settings() is None

    async def test_fetch_settings(self):
        def handler(request):
            return httpx.Response(200, json={
                "id": 1, "site_name": "Boutique", "whatsapp_number": "7900", "privacy_policy": "",
            })

        settings = await make_client(handler).fetch_settings()

        assert settings.site_name == "Boutique"
        assert settings.imgbb_api_key is None


@pytest.mark.unit
@pytest.mark.asyncio
class TestCatalogClientWrites:

    async def test_save_new_category_posts(self):
        def handler(request):
            assert request.method == "POST"
            assert request.url.path == "/api/categories"
            assert request.headers["Authorization"] == "Bearer tok"
            body = json.loads(request.content)
            assert "id" not in body
            return httpx.Response(201, json={"id": 3, **body})

        saved = await make_client(handler, token="tok").save_category(Category(name="Shoes"))

        assert saved.id == 3

    async def test_save_existing_product_puts(self):
        def handler(request):
            assert request.method == "PUT"
            assert request.url.path == "/api/products/7"
            body = json.loads(request.content)
            assert "created_at" not in body
            return httpx.Response(200, json={"id": 7, **body})

        product = Product(id=7, name="Tote", price=10, images=["a"], specifications={"Size": "M"})
        saved = await make_client(handler, token="tok").save_product(product)

        assert saved.specifications == {"Size": "M"}

    async def test_save_settings_sends_blank_key_as_null(self):
        def handler(request):
            body = json.loads(request.content)
            assert body["imgbb_api_key"] is None
            return httpx.Response(200, json={"id": 1, **body})

        await make_client(handler, token="tok").save_settings(
            SiteSettings(site_name="Boutique", whatsapp_number="7900", imgbb_api_key="")
        )

    async def test_move_category(self):
        def handler(request):
            assert request.url.path == "/api/categories/2/move"
            assert request.url.params["direction"] == "up"
            return httpx.Response(200, json=[
                {"id": 2, "name": "B", "display_order": 0},
                {"id": 1, "name": "A", "display_order": 1},
            ])

        categories = await make_client(handler, token="tok").move_category(2, "up")

        assert [c.id for c in categories] == [2, 1]

    async def test_upload_image_returns_url(self):
        def handler(request):
            assert request.url.path == "/api/uploads/image"
            assert b"fake-bytes" in request.content
            return httpx.Response(200, json={"url": "https://i.ibb.co/x.png"})

        url = await make_client(handler, token="tok").upload_image("x.png", b"fake-bytes", "image/png")

        assert url == "https://i.ibb.co/x.png"

    async def test_delete_with_empty_body(self):
        def handler(request):
            return httpx.Response(204)

        assert await make_client(handler, token="tok").delete_product(1) is None


@pytest.mark.unit
@pytest.mark.asyncio
class TestCatalogClientErrors:

    async def test_http_error_carries_detail_and_status(self):
        def handler(request):
            return httpx.Response(400, json={"detail": "Category already exists"})

        with pytest.raises(CatalogClientError) as exc_info:
            await make_client(handler, token="tok").save_category(Category(name="Dup"))

        assert exc_info.value.status_code == 400
        assert "Category already exists" in str(exc_info.value)

    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(CatalogClientError) as exc_info:
            await make_client(handler).fetch_categories()

        assert exc_info.value.status_code is None
        assert "Cannot connect" in str(exc_info.value)

    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(CatalogClientError, match="timed out"):
            await make_client(handler).fetch_products()


@pytest.mark.unit
@pytest.mark.asyncio
class TestCatalogClientAuth:

    async def test_login_stores_token(self):
        def handler(request):
            assert request.url.path == "/api/auth/token"
            assert b"username=admin%40example.com" in request.content
            return httpx.Response(200, json={"access_token": "jwt", "token_type": "bearer"})

        client = make_client(handler)
        token = await client.login("admin@example.com", "secret")

        assert token == "jwt"
        assert client.token == "jwt"

    async def test_logout_clears_token_even_on_error(self):
        def handler(request):
            return httpx.Response(500, json={"detail": "boom"})

        client = make_client(handler, token="jwt")
        with pytest.raises(CatalogClientError):
            await client.logout()

        assert client.token is None
