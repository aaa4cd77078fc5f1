"""
Admin session kept in NiceGUI's per-browser user storage.
"""

from typing import Optional

from nicegui import app

from web_modules.catalog_client import CatalogClient

TOKEN_KEY = "admin_token"


def get_token() -> Optional[str]:
    return app.storage.user.get(TOKEN_KEY)


def set_token(token: str) -> None:
    app.storage.user[TOKEN_KEY] = token


def clear_token() -> None:
    app.storage.user.pop(TOKEN_KEY, None)


def admin_client() -> Optional[CatalogClient]:
    """Client carrying the stored token, or None when nobody is signed in."""
    token = get_token()
    if not token:
        return None
    return CatalogClient(token=token)
