"""
Product detail dialog with an image gallery and the order-by-chat button.
"""

from typing import Optional

from nicegui import ui
from nicegui.events import KeyEventArguments

from web_modules.catalog_view import format_price
from web_modules.chat_link import product_chat_link
from web_modules.config import web_settings
from web_modules.gallery import GalleryNavigator
from web_modules.models import Product, SiteSettings


class ProductDialog:
    """
    One instance per storefront page.

    Clicking the main image opens fullscreen. Fullscreen is persistent: it
    closes through its own button, the Escape key, or a second click on the
    image, never on an outside click.
    """

    def __init__(self):
        self.gallery = GalleryNavigator()
        self.product: Optional[Product] = None
        self.site_settings: Optional[SiteSettings] = None
        self.category_name: Optional[str] = None

        with ui.dialog() as self.dialog, ui.card().classes("w-full max-w-xl p-0 gap-0"):
            self.content()
        self.dialog.on("hide", self._on_hide)

        with ui.dialog().props("maximized persistent") as self.fullscreen_dialog:
            self.fullscreen_content()

        ui.keyboard(on_key=self.handle_key)

    def open(
        self,
        product: Product,
        site_settings: Optional[SiteSettings] = None,
        category_name: Optional[str] = None,
    ) -> None:
        self.product = product
        self.site_settings = site_settings
        self.category_name = category_name
        self.gallery.reset(product.images)
        self.refresh()
        self.dialog.open()

    def refresh(self) -> None:
        self.content.refresh()
        self.fullscreen_content.refresh()
        if self.gallery.is_fullscreen and not self.fullscreen_dialog.value:
            self.fullscreen_dialog.open()
        elif not self.gallery.is_fullscreen and self.fullscreen_dialog.value:
            self.fullscreen_dialog.close()

    def _on_hide(self) -> None:
        self.gallery.reset()
        self.fullscreen_dialog.close()

    # --- Gallery actions ---

    def show_next(self) -> None:
        self.gallery.next()
        self.refresh()

    def show_previous(self) -> None:
        self.gallery.previous()
        self.refresh()

    def show_image(self, index: int) -> None:
        if self.gallery.jump_to(index):
            self.refresh()

    def toggle_fullscreen(self) -> None:
        self.gallery.toggle_fullscreen()
        self.refresh()

    def handle_key(self, e: KeyEventArguments) -> None:
        if not e.action.keydown or not self.dialog.value:
            return
        if self.gallery.handle_key(e.key.name):
            self.refresh()

    # --- Rendering ---

    def _navigation_arrows(self) -> None:
        if not self.gallery.can_navigate:
            return
        ui.button(icon="chevron_left", on_click=self.show_previous) \
            .props("round flat color=white").classes("absolute left-2 top-1/2 bg-black/30")
        ui.button(icon="chevron_right", on_click=self.show_next) \
            .props("round flat color=white").classes("absolute right-2 top-1/2 bg-black/30")

    @ui.refreshable
    def content(self) -> None:
        product = self.product
        if product is None:
            return

        with ui.element("div").classes("relative w-full"):
            if self.gallery.has_images:
                ui.image(self.gallery.current_image) \
                    .classes("w-full h-72 cursor-zoom-in bg-gray-50") \
                    .props("fit=contain") \
                    .on("click", self.toggle_fullscreen)
                self._navigation_arrows()
            else:
                with ui.column().classes("w-full h-48 items-center justify-center bg-gray-100"):
                    ui.icon("image_not_supported", size="3em").classes("text-gray-400")

        if self.gallery.can_navigate:
            with ui.row().classes("w-full gap-2 px-4 pt-2 no-wrap overflow-x-auto"):
                for index, url in enumerate(self.gallery.images):
                    selected = index == self.gallery.current_index
                    ui.image(url) \
                        .classes("w-14 h-14 rounded cursor-pointer") \
                        .classes("ring-2 ring-green-600" if selected else "opacity-60") \
                        .on("click", lambda _, i=index: self.show_image(i))

        with ui.column().classes("w-full p-4 gap-2"):
            ui.label(product.name).classes("text-xl font-bold")
            if self.category_name:
                ui.label(self.category_name).classes("text-sm text-gray-500")
            ui.label(format_price(product.price, web_settings.CURRENCY)) \
                .classes("text-lg font-semibold text-green-700")
            if product.description:
                ui.label(product.description).classes("whitespace-pre-line text-gray-700")

            if product.specifications:
                with ui.grid(columns=2).classes("w-full gap-x-4 gap-y-1 text-sm"):
                    for key, value in product.specifications.items():
                        ui.label(key).classes("text-gray-500")
                        ui.label(value)

            settings = self.site_settings
            link = product_chat_link(
                product,
                settings.whatsapp_number if settings else None,
                settings.site_name if settings else "",
            )
            with ui.row().classes("w-full justify-end pt-2"):
                ui.button("Close", on_click=self.dialog.close).props("flat")
                if link:
                    ui.button("Order via WhatsApp", icon="chat",
                              on_click=lambda: ui.navigate.to(link, new_tab=True)) \
                        .props("color=green")

    @ui.refreshable
    def fullscreen_content(self) -> None:
        if not self.gallery.has_images:
            return
        with ui.element("div").classes("relative w-full h-full bg-black"):
            ui.image(self.gallery.current_image) \
                .classes("w-full h-full cursor-zoom-out") \
                .props("fit=contain") \
                .on("click", self.toggle_fullscreen)
            self._navigation_arrows()
            ui.button(icon="close", on_click=self.toggle_fullscreen) \
                .props("round flat color=white").classes("absolute right-2 top-2")
            if self.gallery.can_navigate:
                ui.label(f"{self.gallery.current_index + 1} / {self.gallery.image_count}") \
                    .classes("absolute bottom-4 left-1/2 text-white")
