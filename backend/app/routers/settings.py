"""
API endpoints for the site settings record.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_admin
from app.models.user import User
from app.schemas import AdminSettingsResponse, SettingsResponse, SettingsUpdate
from app.services.settings_service import settings_service

router = APIRouter()


@router.get("", response_model=SettingsResponse)
async def get_settings(db: Session = Depends(get_db)):
    """Public settings (no API credentials)."""
    record = settings_service.get_settings(db)
    if not record:
        raise HTTPException(status_code=404, detail="Settings not configured")
    return record


@router.get("/admin", response_model=AdminSettingsResponse)
async def get_admin_settings(
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Full settings record for the admin panel."""
    record = settings_service.get_settings(db)
    if not record:
        raise HTTPException(status_code=404, detail="Settings not configured")
    return record


@router.put("", response_model=AdminSettingsResponse)
async def save_settings(
    data: SettingsUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Create or update the single settings record."""
    return settings_service.upsert_settings(db, data)
