"""
Site settings database model (singleton row).
"""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from app.database import Base


class SiteSettings(Base):
    """Site-wide configuration. The table holds at most one row."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, index=True)
    site_name = Column(String, nullable=False, default="")
    whatsapp_number = Column(String, nullable=False, default="")
    privacy_policy = Column(Text, nullable=False, default="")
    imgbb_api_key = Column(String, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
