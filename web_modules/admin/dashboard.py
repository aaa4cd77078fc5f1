"""
Admin dashboard: categories, products and settings tabs plus sign-out.
"""

import logging

from nicegui import ui

from web_modules.admin.category_manager import CategoryManager
from web_modules.admin.product_manager import ProductManager
from web_modules.admin.session import admin_client, clear_token
from web_modules.admin.settings_manager import SettingsManager
from web_modules.admin.state import AdminState
from web_modules.catalog_client import CatalogClientError

logger = logging.getLogger(__name__)


@ui.page("/admin/dashboard")
async def admin_dashboard_page():
    client = admin_client()
    if client is None:
        ui.navigate.to("/admin")
        return

    state = AdminState(client)

    async def reload() -> bool:
        """Refetch all records; False when the page should stop rendering."""
        try:
            await state.reload()
        except CatalogClientError as e:
            if e.status_code == 401:
                clear_token()
                ui.navigate.to("/admin")
                return False
            logger.error(f"Error fetching data: {e}")
            ui.notify("Could not load data", type="negative")
            return True
        # Only a successful reload replaces the settings form
        settings.reset_form()
        return True

    async def fetch_data() -> None:
        if not await reload():
            return
        categories.render.refresh()
        products.render.refresh()
        settings.render.refresh()

    async def logout() -> None:
        try:
            await client.logout()
        except CatalogClientError as e:
            logger.warning(f"Sign-out request failed: {e}")
        clear_token()
        ui.navigate.to("/admin")

    categories = CategoryManager(state, fetch_data)
    products = ProductManager(state, fetch_data)
    settings = SettingsManager(state, fetch_data)

    if not await reload():
        return

    with ui.header().classes("items-center justify-between bg-green-800"):
        ui.label("Admin panel").classes("text-xl font-bold")
        with ui.tabs() as tabs:
            categories_tab = ui.tab("Categories", icon="grid_view")
            products_tab = ui.tab("Products", icon="inventory_2")
            settings_tab = ui.tab("Settings", icon="settings")
        ui.button("Sign out", icon="logout", on_click=logout).props("flat color=white")

    with ui.tab_panels(tabs, value=categories_tab).classes("w-full max-w-6xl mx-auto"):
        with ui.tab_panel(categories_tab):
            categories.render()
        with ui.tab_panel(products_tab):
            products.render()
        with ui.tab_panel(settings_tab):
            settings.render()
