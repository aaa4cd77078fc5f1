"""
Category database model.
"""

from sqlalchemy import Column, Integer, String, Text, Index

from app.database import Base


class Category(Base):
    """Category model grouping products, sorted by display_order."""

    __tablename__ = "categories"
    __table_args__ = (
        Index("idx_category_order", "display_order"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Category id={self.id} name={self.name!r}>"
