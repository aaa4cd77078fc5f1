"""
Catalog Service.

Query and write logic for categories and products. Writes are
last-write-wins; there is no version check between concurrent admins.
"""

import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.product import Product
from app.schemas import (
    CategoryCreate,
    CategoryUpdate,
    MoveDirection,
    ProductCreate,
    ProductUpdate,
)

logger = logging.getLogger(__name__)


class CatalogService:
    # --- Categories ---

    def list_categories(self, db: Session) -> List[Category]:
        """All categories ordered by rank, ties broken by id."""
        return (
            db.query(Category)
            .order_by(Category.display_order.asc(), Category.id.asc())
            .all()
        )

    def get_category(self, db: Session, category_id: int) -> Category:
        category = db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise HTTPException(status_code=404, detail="Category not found")
        return category

    def _ensure_unique_name(self, db: Session, name: str, exclude_id: Optional[int] = None):
        query = db.query(Category).filter(Category.name == name)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Category with this name already exists",
            )

    def create_category(self, db: Session, data: CategoryCreate) -> Category:
        self._ensure_unique_name(db, data.name)
        category = Category(**data.model_dump())
        db.add(category)
        db.commit()
        db.refresh(category)
        logger.info(f"Created category {category.id} ({category.name})")
        return category

    def update_category(self, db: Session, category_id: int, data: CategoryUpdate) -> Category:
        category = self.get_category(db, category_id)
        self._ensure_unique_name(db, data.name, exclude_id=category_id)
        for field, value in data.model_dump().items():
            setattr(category, field, value)
        db.commit()
        db.refresh(category)
        logger.info(f"Updated category {category.id}")
        return category

    def delete_category(self, db: Session, category_id: int) -> None:
        category = self.get_category(db, category_id)
        db.delete(category)
        db.commit()
        logger.info(f"Deleted category {category_id}")

    def move_category(
        self, db: Session, category_id: int, direction: MoveDirection
    ) -> List[Category]:
        """
        Swap display_order with the neighbouring category in rank order.

        Moving the first category up or the last one down changes nothing.

        Returns:
            The categories in their new order
        """
        categories = self.list_categories(db)
        index = next((i for i, c in enumerate(categories) if c.id == category_id), None)
        if index is None:
            raise HTTPException(status_code=404, detail="Category not found")

        other_index = index - 1 if direction == MoveDirection.UP else index + 1
        if other_index < 0 or other_index >= len(categories):
            return categories

        current, other = categories[index], categories[other_index]
        if current.display_order == other.display_order:
            # Equal ranks are ordered by id; re-rank so the swap is visible
            for rank, category in enumerate(categories):
                category.display_order = rank
        current.display_order, other.display_order = other.display_order, current.display_order
        db.commit()
        logger.info(f"Moved category {category_id} {direction.value}")
        return self.list_categories(db)

    # --- Products ---

    def list_products(
        self,
        db: Session,
        category_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[Product]:
        """
        Products matching both the category filter and the name substring.

        The name test is a casefolded substring match in Python, so % and _
        are literal and non-ASCII names fold too.
        """
        query = db.query(Product)

        if category_id is not None:
            query = query.filter(Product.category_id == category_id)

        products = query.order_by(Product.id.asc()).all()

        needle = (search or "").strip().casefold()
        if not needle:
            return products
        return [p for p in products if needle in (p.name or "").casefold()]

    def get_product(self, db: Session, product_id: int) -> Product:
        product = db.query(Product).filter(Product.id == product_id).first()
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        return product

    def create_product(self, db: Session, data: ProductCreate) -> Product:
        product = Product(**data.model_dump())
        db.add(product)
        db.commit()
        db.refresh(product)
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def update_product(self, db: Session, product_id: int, data: ProductUpdate) -> Product:
        product = self.get_product(db, product_id)
        for field, value in data.model_dump().items():
            setattr(product, field, value)
        db.commit()
        db.refresh(product)
        logger.info(f"Updated product {product.id}")
        return product

    def delete_product(self, db: Session, product_id: int) -> None:
        product = self.get_product(db, product_id)
        db.delete(product)
        db.commit()
        logger.info(f"Deleted product {product_id}")


catalog_service = CatalogService()
