"""
Shopper-facing pages: catalog and privacy policy.
"""

import logging
from typing import List, Optional

from nicegui import ui

from web_modules.catalog_client import CatalogClient, CatalogClientError
from web_modules.catalog_view import category_names, filter_products, format_price, sort_categories
from web_modules.config import web_settings
from web_modules.dialogs.product_dialog import ProductDialog
from web_modules.models import Category, Product, SiteSettings

logger = logging.getLogger(__name__)


class StorefrontState:
    """Per-page state; every browser tab gets its own instance."""

    def __init__(self):
        self.categories: List[Category] = []
        self.products: List[Product] = []
        self.site_settings: Optional[SiteSettings] = None
        self.category_id: Optional[int] = None
        self.query: str = ""

    @property
    def site_name(self) -> str:
        if self.site_settings and self.site_settings.site_name:
            return self.site_settings.site_name
        return web_settings.SITE_TITLE

    @property
    def visible_products(self) -> List[Product]:
        return filter_products(self.products, self.category_id, self.query)


async def load_catalog(client: CatalogClient, state: StorefrontState) -> bool:
    """Fetch settings, categories and products. On failure the previous state stays."""
    try:
        site_settings = await client.fetch_settings()
        categories = await client.fetch_categories()
        products = await client.fetch_products()
    except CatalogClientError as e:
        logger.error(f"Error fetching catalog: {e}")
        return False
    state.site_settings = site_settings
    state.categories = sort_categories(categories)
    state.products = products
    return True


@ui.page("/")
async def storefront_page():
    client = CatalogClient()
    state = StorefrontState()

    if not await load_catalog(client, state):
        ui.notify("Could not load catalog", type="negative")

    dialog = ProductDialog()
    names = category_names(state.categories)

    ui.page_title(state.site_name)
    with ui.header().classes("items-center justify-between bg-green-800"):
        ui.label(state.site_name).classes("text-xl font-bold")
        ui.link("Privacy policy", "/privacy").classes("text-white text-sm")

    def select_category(category_id: Optional[int]) -> None:
        state.category_id = category_id
        category_bar.refresh()
        product_grid.refresh()

    def on_search(e) -> None:
        state.query = e.value or ""
        product_grid.refresh()

    @ui.refreshable
    def category_bar() -> None:
        with ui.row().classes("w-full gap-2 no-wrap overflow-x-auto"):
            ui.button("All", on_click=lambda: select_category(None)) \
                .props("rounded" + ("" if state.category_id is None else " outline"))
            for category in state.categories:
                selected = state.category_id == category.id
                ui.button(category.name, on_click=lambda _, c=category.id: select_category(c)) \
                    .props("rounded" + ("" if selected else " outline"))

    @ui.refreshable
    def product_grid() -> None:
        products = state.visible_products
        if not products:
            ui.label("Nothing found").classes("text-gray-500")
            return
        with ui.grid().classes("w-full grid-cols-2 md:grid-cols-3 lg:grid-cols-4 gap-4"):
            for product in products:
                with ui.card().classes("cursor-pointer p-0 gap-0").on(
                    "click",
                    lambda _, p=product: dialog.open(p, state.site_settings, names.get(p.category_id)),
                ):
                    if product.images:
                        ui.image(product.images[0]).classes("w-full h-40").props("fit=cover")
                    with ui.column().classes("p-3 gap-1"):
                        ui.label(product.name).classes("font-medium")
                        ui.label(format_price(product.price, web_settings.CURRENCY)) \
                            .classes("text-green-700 font-semibold")

    with ui.column().classes("w-full max-w-6xl mx-auto p-4 gap-4"):
        ui.input(placeholder="Search products...", on_change=on_search) \
            .props("clearable outlined dense").classes("w-full")
        category_bar()
        product_grid()


@ui.page("/privacy")
async def privacy_page():
    client = CatalogClient()
    try:
        site_settings = await client.fetch_settings()
    except CatalogClientError as e:
        logger.error(f"Error fetching settings: {e}")
        site_settings = None
        ui.notify("Could not load privacy policy", type="negative")

    with ui.column().classes("w-full max-w-3xl mx-auto p-4 gap-4"):
        ui.link("Back to catalog", "/")
        ui.label("Privacy policy").classes("text-2xl font-bold")
        text = site_settings.privacy_policy if site_settings else ""
        ui.label(text or "No privacy policy published yet.").classes("whitespace-pre-line")
