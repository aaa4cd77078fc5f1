"""
Settings Service.

The settings table is a singleton: reads return the first row and writes
update it in place, inserting only when the table is empty.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.models.site_settings import SiteSettings
from app.schemas import SettingsUpdate

logger = logging.getLogger(__name__)


class SettingsService:
    def get_settings(self, db: Session) -> Optional[SiteSettings]:
        """Return the settings record, or None before the first save."""
        return db.query(SiteSettings).order_by(SiteSettings.id.asc()).first()

    def get_imgbb_api_key(self, db: Session) -> Optional[str]:
        record = self.get_settings(db)
        if record and record.imgbb_api_key:
            return record.imgbb_api_key
        return None

    def upsert_settings(self, db: Session, data: SettingsUpdate) -> SiteSettings:
        record = self.get_settings(db)
        values = data.model_dump(exclude_none=True)

        if record:
            for field, value in values.items():
                setattr(record, field, value)
            logger.info(f"Updated settings record {record.id}")
        else:
            record = SiteSettings(**values)
            db.add(record)
            logger.info("Created settings record")

        db.commit()
        db.refresh(record)
        return record


settings_service = SettingsService()
