"""
Image hosting client (ImgBB).

Uploads raw image bytes and returns the public display URL. Uploads are
never retried.
"""

import base64
import logging
from typing import Optional

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class ImageUploadError(Exception):
    """Raised when the image host rejects or fails an upload."""


class ImageHostClient:
    """Thin async wrapper over the ImgBB upload endpoint."""

    def __init__(
        self,
        upload_url: str = settings.IMGBB_UPLOAD_URL,
        timeout: float = settings.IMAGE_UPLOAD_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.upload_url = upload_url
        self.timeout = httpx.Timeout(timeout, connect=10.0)
        self.transport = transport

    async def upload(self, content: bytes, api_key: str, name: Optional[str] = None) -> str:
        """
        Upload an image.

        Args:
            content: Raw image bytes
            api_key: ImgBB API key from the settings record
            name: Optional file name passed to the host

        Returns:
            Publicly servable image URL (``data.display_url``)

        Raises:
            ImageUploadError: On transport errors or an unsuccessful response
        """
        if not content:
            raise ImageUploadError("Empty image payload")

        form = {
            "key": api_key,
            "image": base64.b64encode(content).decode("ascii"),
        }
        if name:
            form["name"] = name

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.upload_url, data=form)
        except httpx.TimeoutException as e:
            raise ImageUploadError("Image host timed out") from e
        except httpx.RequestError as e:
            raise ImageUploadError(f"Image host request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ImageUploadError(
                f"Image host returned invalid JSON (HTTP {response.status_code})"
            ) from e

        if not payload.get("success"):
            message = (payload.get("error") or {}).get("message") or "Failed to upload image"
            logger.warning(f"Image host rejected upload: {message}")
            raise ImageUploadError(message)

        url = (payload.get("data") or {}).get("display_url")
        if not url:
            raise ImageUploadError("Image host response has no display_url")

        logger.info(f"Uploaded image to {url}")
        return url


image_host = ImageHostClient()
