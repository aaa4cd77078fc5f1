"""
Image upload endpoint, a pass-through to the image host.
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.dependencies import get_current_admin
from app.models.user import User
from app.schemas import ImageUploadResponse
from app.services.image_host import ImageUploadError, image_host
from app.services.settings_service import settings_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/image", response_model=ImageUploadResponse)
async def upload_image(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """
    Upload a product or category image and return its public URL.

    The ImgBB key is read from the settings record.
    """
    if file.content_type not in settings.ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Unsupported image type: {file.content_type}",
        )

    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="Image is too large",
        )

    api_key = settings_service.get_imgbb_api_key(db)
    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="ImgBB API key not found in settings",
        )

    try:
        url = await image_host.upload(content, api_key, name=file.filename)
    except ImageUploadError as e:
        logger.error(f"Image upload failed for {file.filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Image upload failed",
        )

    return ImageUploadResponse(url=url)
