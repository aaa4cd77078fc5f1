"""
Product database model.
"""

from sqlalchemy import Column, Integer, String, Float, Text, DateTime, JSON, Index
from sqlalchemy.sql import func

from app.database import Base


class Product(Base):
    """Product model with an ordered image gallery and free-form specifications."""

    __tablename__ = "products"
    __table_args__ = (
        Index("idx_product_name", "name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    # Weak reference: no foreign key, deleting a category leaves it dangling
    category_id = Column(Integer, nullable=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False, default=0.0)
    images = Column(JSON, nullable=False, default=list)  # list[str], gallery order
    description = Column(Text, nullable=False, default="")
    specifications = Column(JSON, nullable=False, default=dict)  # dict[str, str]
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Product id={self.id} name={self.name!r}>"
