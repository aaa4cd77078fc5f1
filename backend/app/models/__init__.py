"""
Database models for the BoutiqueChat backend.

All SQLAlchemy models are imported here so metadata sees every table.
"""

from app.models.category import Category
from app.models.product import Product
from app.models.site_settings import SiteSettings
from app.models.user import User

__all__ = [
    "Category",
    "Product",
    "SiteSettings",
    "User",
]
