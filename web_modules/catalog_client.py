"""
Repository client used by every page of the web front-end.

Views only talk to ``CatalogClient``; the backend URL layout and httpx stay
behind this interface, so the storage technology can change without
touching view code.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from web_modules.config import web_settings
from web_modules.models import Category, Product, SiteSettings

logger = logging.getLogger(__name__)


class CatalogClientError(Exception):
    """Any failure talking to the backend."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CatalogClient:
    def __init__(
        self,
        base_url: str = web_settings.API_URL,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.transport = transport
        self.timeout = httpx.Timeout(
            web_settings.REQUEST_TIMEOUT, connect=web_settings.CONNECT_TIMEOUT
        )

    def _headers(self) -> Dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Optional[Any] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform an API call and translate every failure to CatalogClientError."""
        url = f"{self.base_url}{endpoint}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    data=data,
                    files=files,
                    params=params,
                    headers=self._headers(),
                )
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise CatalogClientError(f"API request timed out ({self.base_url})") from e
        except httpx.ConnectError as e:
            raise CatalogClientError(
                f"Cannot connect to API ({self.base_url}). Is the server running?"
            ) from e
        except httpx.HTTPStatusError as e:
            detail = e.response.text or "Server error"
            try:
                detail = e.response.json().get("detail", detail)
            except ValueError:
                pass
            raise CatalogClientError(
                f"HTTP {e.response.status_code}: {detail}", status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            raise CatalogClientError(f"API request failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise CatalogClientError("API returned invalid JSON") from e

    # --- Reads ---

    async def fetch_categories(self) -> List[Category]:
        payload = await self._request("GET", "/api/categories")
        return [Category.model_validate(item) for item in payload or []]

    async def fetch_products(
        self, category_id: Optional[int] = None, search: Optional[str] = None
    ) -> List[Product]:
        payload = await self._request(
            "GET", "/api/products", params={"category_id": category_id, "search": search}
        )
        return [Product.model_validate(item) for item in payload or []]

    async def fetch_settings(self) -> Optional[SiteSettings]:
        """Public settings; None until an admin saves them once."""
        try:
            payload = await self._request("GET", "/api/settings")
        except CatalogClientError as e:
            if e.status_code == 404:
                return None
            raise
        return SiteSettings.model_validate(payload)

    async def fetch_admin_settings(self) -> Optional[SiteSettings]:
        try:
            payload = await self._request("GET", "/api/settings/admin")
        except CatalogClientError as e:
            if e.status_code == 404:
                return None
            raise
        return SiteSettings.model_validate(payload)

    # --- Writes (admin token required) ---

    async def save_category(self, category: Category) -> Category:
        """Insert when the category has no id yet, update otherwise."""
        body = category.model_dump(exclude={"id"})
        if category.id is None:
            payload = await self._request("POST", "/api/categories", json=body)
        else:
            payload = await self._request("PUT", f"/api/categories/{category.id}", json=body)
        return Category.model_validate(payload)

    async def delete_category(self, category_id: int) -> None:
        await self._request("DELETE", f"/api/categories/{category_id}")

    async def move_category(self, category_id: int, direction: str) -> List[Category]:
        payload = await self._request(
            "POST", f"/api/categories/{category_id}/move", params={"direction": direction}
        )
        return [Category.model_validate(item) for item in payload or []]

    async def save_product(self, product: Product) -> Product:
        body = product.model_dump(mode="json", exclude={"id", "created_at"})
        if product.id is None:
            payload = await self._request("POST", "/api/products", json=body)
        else:
            payload = await self._request("PUT", f"/api/products/{product.id}", json=body)
        return Product.model_validate(payload)

    async def delete_product(self, product_id: int) -> None:
        await self._request("DELETE", f"/api/products/{product_id}")

    async def save_settings(self, settings: SiteSettings) -> SiteSettings:
        body = settings.model_dump(exclude={"id"})
        if not body.get("imgbb_api_key"):
            body["imgbb_api_key"] = None
        payload = await self._request("PUT", "/api/settings", json=body)
        return SiteSettings.model_validate(payload)

    async def upload_image(self, file_name: str, content: bytes, content_type: str) -> str:
        """Upload an image through the backend and return its public URL."""
        payload = await self._request(
            "POST",
            "/api/uploads/image",
            files={"file": (file_name, content, content_type)},
        )
        url = (payload or {}).get("url")
        if not url:
            raise CatalogClientError("Upload response has no URL")
        logger.info(f"Uploaded {file_name} -> {url}")
        return url

    # --- Auth ---

    async def login(self, email: str, password: str) -> str:
        """Exchange credentials for a bearer token and keep it on the client."""
        payload = await self._request(
            "POST", "/api/auth/token", data={"username": email, "password": password}
        )
        token = (payload or {}).get("access_token")
        if not token:
            raise CatalogClientError("Login response has no token")
        self.token = token
        return token

    async def logout(self) -> None:
        try:
            if self.token:
                await self._request("POST", "/api/auth/logout")
        finally:
            self.token = None
