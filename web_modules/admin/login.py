import logging

from nicegui import ui

from web_modules.admin.session import get_token, set_token
from web_modules.catalog_client import CatalogClient, CatalogClientError

logger = logging.getLogger(__name__)


@ui.page("/admin")
async def admin_login_page():
    """Admin sign-in."""
    if get_token():
        ui.navigate.to("/admin/dashboard")
        return

    client = CatalogClient()

    async def sign_in() -> None:
        if not email.value or not password.value:
            error_label.text = "Enter email and password"
            return
        submit.disable()
        try:
            token = await client.login(email.value.strip(), password.value)
        except CatalogClientError as e:
            logger.warning(f"Admin login failed: {e}")
            error_label.text = "Sign-in failed. Check email and password."
            return
        finally:
            submit.enable()
        set_token(token)
        ui.navigate.to("/admin/dashboard")

    with ui.card().classes("absolute-center w-80"):
        ui.label("Admin panel").classes("text-xl font-bold")
        email = ui.input("Email").props("type=email").classes("w-full")
        password = ui.input("Password", password=True).classes("w-full") \
            .on("keydown.enter", sign_in)
        error_label = ui.label("").classes("text-red-600 text-sm")
        submit = ui.button("Sign in", on_click=sign_in).classes("w-full")
