import logging
from typing import Callable

from nicegui import ui
from nicegui.events import UploadEventArguments

from web_modules.catalog_client import CatalogClient, CatalogClientError

logger = logging.getLogger(__name__)


def image_uploader(client: CatalogClient, on_uploaded: Callable[[str], None], label: str = "Upload image"):
    """Upload widget that sends the file to the image host and passes the URL on."""

    async def handle_upload(e: UploadEventArguments) -> None:
        content = e.content.read()
        try:
            url = await client.upload_image(e.name, content, e.type)
        except CatalogClientError as ex:
            logger.error(f"Error uploading image {e.name}: {ex}")
            ui.notify("Image upload failed", type="negative")
            return
        finally:
            upload.reset()
        on_uploaded(url)
        ui.notify("Image uploaded", type="positive")

    upload = ui.upload(label=label, auto_upload=True, on_upload=handle_upload) \
        .props('accept="image/*" flat bordered').classes("w-full")
    return upload
