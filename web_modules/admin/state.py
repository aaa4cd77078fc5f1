import logging
from typing import List, Optional

from web_modules.catalog_client import CatalogClient
from web_modules.catalog_view import sort_categories
from web_modules.models import Category, Product, SiteSettings

logger = logging.getLogger(__name__)


class AdminState:
    """Records shown by one dashboard page, refreshed after every write."""

    def __init__(self, client: CatalogClient):
        self.client = client
        self.categories: List[Category] = []
        self.products: List[Product] = []
        self.settings: Optional[SiteSettings] = None

    async def reload(self) -> None:
        """
        Refetch everything.

        Raises:
            CatalogClientError: The caller decides how to surface it
        """
        categories = await self.client.fetch_categories()
        products = await self.client.fetch_products()
        settings = await self.client.fetch_admin_settings()
        self.categories = sort_categories(categories)
        self.products = products
        self.settings = settings
        logger.debug(
            f"Loaded {len(self.categories)} categories, {len(self.products)} products"
        )
