"""
Admin tab for the site settings record.
"""

import logging
from typing import Awaitable, Callable

from nicegui import ui

from web_modules.admin.state import AdminState
from web_modules.catalog_client import CatalogClientError
from web_modules.models import SiteSettings

logger = logging.getLogger(__name__)


class SettingsManager:
    def __init__(self, state: AdminState, on_update: Callable[[], Awaitable[None]]):
        self.state = state
        self.on_update = on_update
        self.message = None  # (type, text) shown above the form
        self.reset_form()

    def reset_form(self) -> None:
        """Load the stored record into the form; the key field starts blank."""
        current = self.state.settings
        self.form = current.model_copy(update={"imgbb_api_key": None}) if current else SiteSettings()

    async def save(self) -> None:
        if not self.form.site_name.strip() or not self.form.whatsapp_number.strip():
            self.message = ("error", "Site name and WhatsApp number are required")
            self.render.refresh()
            return
        try:
            await self.state.client.save_settings(self.form)
        except CatalogClientError as e:
            logger.error(f"Error saving settings: {e}")
            self.message = ("error", "Save failed")
            self.render.refresh()
            return
        self.message = ("success", "Settings saved")
        await self.on_update()

    @ui.refreshable
    def render(self) -> None:
        current = self.state.settings

        ui.label("Site settings").classes("text-2xl font-bold")
        if self.message:
            kind, text = self.message
            color = "bg-green-50 text-green-800" if kind == "success" else "bg-red-50 text-red-800"
            ui.label(text).classes(f"w-full p-3 rounded {color}")

        with ui.card().classes("w-full max-w-3xl"):
            ui.input("Site name").bind_value(self.form, "site_name").classes("w-full")
            ui.input("WhatsApp number", placeholder="7XXXXXXXXXX") \
                .bind_value(self.form, "whatsapp_number").classes("w-full")
            ui.label("Digits only, country code first, without +").classes("text-xs text-gray-500")
            ui.textarea("Privacy policy").bind_value(self.form, "privacy_policy") \
                .props("rows=10").classes("w-full")
            hint = "A key is stored; leave blank to keep it" if current and current.imgbb_api_key \
                else "Required for image uploads"
            ui.input("ImgBB API key", password=True, password_toggle_button=True) \
                .bind_value(self.form, "imgbb_api_key").classes("w-full")
            ui.label(hint).classes("text-xs text-gray-500")
            with ui.row().classes("w-full justify-end"):
                ui.button("Save settings", icon="save", on_click=self.save)
