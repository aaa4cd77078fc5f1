"""
Records as seen by the web front-end.

These mirror the API responses; the front-end never imports backend code.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Category(BaseModel):
    id: Optional[int] = None
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    display_order: int = 0


class Product(BaseModel):
    id: Optional[int] = None
    category_id: Optional[int] = None
    name: str
    price: float = 0.0
    images: List[str] = Field(default_factory=list)
    description: str = ""
    specifications: Dict[str, str] = Field(default_factory=dict)
    created_at: Optional[datetime] = None


class SiteSettings(BaseModel):
    id: Optional[int] = None
    site_name: str = ""
    whatsapp_number: str = ""
    privacy_policy: str = ""
    imgbb_api_key: Optional[str] = None
