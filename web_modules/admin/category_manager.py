"""
Admin tab for categories: add, edit, delete, reorder.
"""

import logging
from typing import Awaitable, Callable, Optional

from nicegui import ui

from web_modules.admin.image_upload import image_uploader
from web_modules.admin.state import AdminState
from web_modules.catalog_client import CatalogClientError
from web_modules.dialogs.confirm_dialog import confirm
from web_modules.models import Category

logger = logging.getLogger(__name__)


class CategoryManager:
    def __init__(self, state: AdminState, on_update: Callable[[], Awaitable[None]]):
        self.state = state
        self.on_update = on_update
        self.editing: Optional[Category] = None

        with ui.dialog() as self.editor, ui.card().classes("w-96"):
            self.editor_form()

    # --- Actions ---

    def open_editor(self, category: Optional[Category] = None) -> None:
        if category is None:
            next_order = max((c.display_order for c in self.state.categories), default=-1) + 1
            category = Category(name="", display_order=next_order)
        self.editing = category.model_copy()
        self.editor_form.refresh()
        self.editor.open()

    async def save(self) -> None:
        category = self.editing
        if category is None:
            return
        if not category.name.strip():
            ui.notify("Name is required", type="warning")
            return
        try:
            await self.state.client.save_category(category)
        except CatalogClientError as e:
            logger.error(f"Error saving category: {e}")
            ui.notify("Save failed", type="negative")
            return
        self.editor.close()
        await self.on_update()

    async def delete(self, category: Category) -> None:
        if not await confirm(f"Delete category \"{category.name}\"?"):
            return
        try:
            await self.state.client.delete_category(category.id)
        except CatalogClientError as e:
            logger.error(f"Error deleting category: {e}")
            ui.notify("Delete failed", type="negative")
            return
        await self.on_update()

    async def move(self, category: Category, direction: str) -> None:
        try:
            await self.state.client.move_category(category.id, direction)
        except CatalogClientError as e:
            logger.error(f"Error moving category: {e}")
            ui.notify("Reorder failed", type="negative")
            return
        await self.on_update()

    # --- Rendering ---

    @ui.refreshable
    def editor_form(self) -> None:
        category = self.editing
        if category is None:
            return

        def set_image(url: str) -> None:
            category.image_url = url
            self.editor_form.refresh()

        ui.label("Edit category" if category.id else "New category").classes("text-lg font-bold")
        ui.input("Name").bind_value(category, "name").classes("w-full")
        ui.textarea("Description").bind_value(category, "description").classes("w-full")
        ui.input("Image URL").bind_value(category, "image_url").classes("w-full")
        image_uploader(self.state.client, set_image)
        if category.image_url:
            ui.image(category.image_url).classes("w-full h-32").props("fit=contain")
        ui.number("Display order", format="%d", step=1) \
            .bind_value(category, "display_order", forward=lambda v: int(v or 0)) \
            .classes("w-full")
        with ui.row().classes("w-full justify-end"):
            ui.button("Cancel", on_click=self.editor.close).props("flat")
            ui.button("Save", on_click=self.save)

    @ui.refreshable
    def render(self) -> None:
        with ui.row().classes("w-full items-center justify-between"):
            ui.label("Categories").classes("text-2xl font-bold")
            ui.button("Add category", icon="add", on_click=lambda: self.open_editor())

        categories = self.state.categories
        if not categories:
            ui.label("No categories yet").classes("text-gray-500")
            return

        with ui.column().classes("w-full gap-2"):
            for index, category in enumerate(categories):
                with ui.card().classes("w-full"), ui.row().classes("w-full items-center no-wrap"):
                    if category.image_url:
                        ui.image(category.image_url).classes("w-16 h-16 rounded").props("fit=cover")
                    with ui.column().classes("grow gap-0"):
                        ui.label(category.name).classes("font-medium")
                        if category.description:
                            ui.label(category.description).classes("text-sm text-gray-500")
                        ui.label(f"Order: {category.display_order}").classes("text-xs text-gray-400")
                    up = ui.button(icon="arrow_upward",
                                   on_click=lambda _, c=category: self.move(c, "up")).props("flat dense")
                    down = ui.button(icon="arrow_downward",
                                     on_click=lambda _, c=category: self.move(c, "down")).props("flat dense")
                    if index == 0:
                        up.disable()
                    if index == len(categories) - 1:
                        down.disable()
                    ui.button(icon="edit", on_click=lambda _, c=category: self.open_editor(c)).props("flat dense")
                    ui.button(icon="delete", on_click=lambda _, c=category: self.delete(c)) \
                        .props("flat dense color=negative")
