"""
NiceGUI frontend for BoutiqueChat.

Storefront at ``/``, privacy policy at ``/privacy`` and the admin panel at
``/admin``. All data comes from the backend API (``backend/app``).
"""

from nicegui import ui

from web_modules.config import web_settings
from web_modules.logging_setup import configure_logging

# Importing the page modules registers their routes
from web_modules import storefront  # noqa: F401
from web_modules.admin import dashboard, login  # noqa: F401


def main():
    configure_logging()
    ui.run(
        port=web_settings.WEB_PORT,
        title=web_settings.SITE_TITLE,
        storage_secret=web_settings.STORAGE_SECRET,
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
