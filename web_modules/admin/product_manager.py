"""
Admin tab for products: add, edit, delete.

Specifications are edited as key/value rows; a blank row is always kept at
the end and incomplete rows are dropped on save.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from nicegui import ui

from web_modules.admin.image_upload import image_uploader
from web_modules.admin.state import AdminState
from web_modules.catalog_client import CatalogClientError
from web_modules.catalog_view import category_names, format_price, rows_to_specs, specs_to_rows
from web_modules.config import web_settings
from web_modules.dialogs.confirm_dialog import confirm
from web_modules.models import Product

logger = logging.getLogger(__name__)


def product_to_form(product: Optional[Product]) -> Dict[str, Any]:
    product = product or Product(name="")
    return {
        "id": product.id,
        "name": product.name,
        "category_id": product.category_id,
        "price": product.price,
        "images": "\n".join(product.images),
        "description": product.description,
    }


def form_to_product(form: Dict[str, Any], spec_rows: List[Dict[str, str]]) -> Product:
    images = [line.strip() for line in (form.get("images") or "").splitlines() if line.strip()]
    return Product(
        id=form.get("id"),
        name=(form.get("name") or "").strip(),
        category_id=form.get("category_id"),
        price=float(form.get("price") or 0),
        images=images,
        description=form.get("description") or "",
        specifications=rows_to_specs(spec_rows),
    )


class ProductManager:
    def __init__(self, state: AdminState, on_update: Callable[[], Awaitable[None]]):
        self.state = state
        self.on_update = on_update
        self.form: Dict[str, Any] = product_to_form(None)
        self.spec_rows: List[Dict[str, str]] = specs_to_rows({})

        with ui.dialog() as self.editor, ui.card().classes("w-[32rem]"):
            self.editor_form()

    # --- Actions ---

    def open_editor(self, product: Optional[Product] = None) -> None:
        self.form = product_to_form(product)
        self.spec_rows = specs_to_rows(product.specifications if product else {})
        self.editor_form.refresh()
        self.editor.open()

    def on_spec_change(self, index: int) -> None:
        row = self.spec_rows[index]
        if index == len(self.spec_rows) - 1 and (row["key"] or row["value"]):
            self.spec_rows.append({"key": "", "value": ""})
            self.spec_editor.refresh()

    def add_image(self, url: str) -> None:
        current = (self.form.get("images") or "").rstrip("\n")
        self.form["images"] = f"{current}\n{url}" if current else url
        self.editor_form.refresh()

    async def save(self) -> None:
        product = form_to_product(self.form, self.spec_rows)
        if not product.name:
            ui.notify("Name is required", type="warning")
            return
        if not product.images:
            ui.notify("Add at least one image", type="warning")
            return
        if product.price < 0:
            ui.notify("Price cannot be negative", type="warning")
            return
        try:
            await self.state.client.save_product(product)
        except CatalogClientError as e:
            logger.error(f"Error saving product: {e}")
            ui.notify("Save failed", type="negative")
            return
        self.editor.close()
        await self.on_update()

    async def delete(self, product: Product) -> None:
        if not await confirm(f"Delete product \"{product.name}\"?"):
            return
        try:
            await self.state.client.delete_product(product.id)
        except CatalogClientError as e:
            logger.error(f"Error deleting product: {e}")
            ui.notify("Delete failed", type="negative")
            return
        await self.on_update()

    # --- Rendering ---

    @ui.refreshable
    def spec_editor(self) -> None:
        for index, row in enumerate(self.spec_rows):
            with ui.row().classes("w-full no-wrap"):
                ui.input(placeholder="Label", on_change=lambda _, i=index: self.on_spec_change(i)) \
                    .bind_value(row, "key").classes("grow")
                ui.input(placeholder="Value", on_change=lambda _, i=index: self.on_spec_change(i)) \
                    .bind_value(row, "value").classes("grow")

    @ui.refreshable
    def editor_form(self) -> None:
        form = self.form
        options = category_names(self.state.categories)
        if form.get("category_id") not in options:
            # Category was deleted; the select rejects unknown values
            form["category_id"] = None

        ui.label("Edit product" if form.get("id") else "New product").classes("text-lg font-bold")
        ui.input("Name").bind_value(form, "name").classes("w-full")
        ui.select(options, label="Category", clearable=True).bind_value(form, "category_id").classes("w-full")
        ui.number("Price", min=0, step=0.01).bind_value(form, "price").classes("w-full")
        ui.textarea("Image URLs (one per line)").bind_value(form, "images").classes("w-full")
        image_uploader(self.state.client, self.add_image)
        ui.textarea("Description").bind_value(form, "description").classes("w-full")
        ui.label("Specifications").classes("text-sm text-gray-600")
        self.spec_editor()
        with ui.row().classes("w-full justify-end"):
            ui.button("Cancel", on_click=self.editor.close).props("flat")
            ui.button("Save", on_click=self.save)

    @ui.refreshable
    def render(self) -> None:
        with ui.row().classes("w-full items-center justify-between"):
            ui.label("Products").classes("text-2xl font-bold")
            ui.button("Add product", icon="add", on_click=lambda: self.open_editor())

        products = self.state.products
        if not products:
            ui.label("No products yet").classes("text-gray-500")
            return

        names = category_names(self.state.categories)
        with ui.grid().classes("w-full grid-cols-1 md:grid-cols-2 gap-4"):
            for product in products:
                with ui.card().classes("w-full"):
                    if product.images:
                        ui.image(product.images[0]).classes("w-full h-40").props("fit=cover")
                    ui.label(product.name).classes("font-medium")
                    ui.label(names.get(product.category_id, "No category")).classes("text-sm text-gray-500")
                    ui.label(format_price(product.price, web_settings.CURRENCY)).classes("text-green-700")
                    if product.description:
                        ui.label(product.description).classes("text-sm line-clamp-3")
                    for key, value in product.specifications.items():
                        ui.label(f"{key}: {value}").classes("text-xs text-gray-500")
                    with ui.row().classes("w-full justify-end"):
                        ui.button("Edit", icon="edit", on_click=lambda _, p=product: self.open_editor(p)) \
                            .props("flat dense")
                        ui.button("Delete", icon="delete", on_click=lambda _, p=product: self.delete(p)) \
                            .props("flat dense color=negative")
