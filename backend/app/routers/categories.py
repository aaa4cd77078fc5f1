"""
API endpoints for category management.

Reads are public; writes require an admin token.
"""

from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_admin
from app.models.user import User
from app.schemas import CategoryCreate, CategoryResponse, CategoryUpdate, MoveDirection
from app.services.catalog_service import catalog_service

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def list_categories(db: Session = Depends(get_db)):
    """List all categories ordered by display order."""
    return catalog_service.list_categories(db)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: CategoryCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Create a new category."""
    return catalog_service.create_category(db, category)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    category: CategoryUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Update an existing category."""
    return catalog_service.update_category(db, category_id, category)


@router.delete("/{category_id}")
async def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Delete a category. Its products keep their category_id."""
    catalog_service.delete_category(db, category_id)
    return {"success": True}


@router.post("/{category_id}/move", response_model=List[CategoryResponse])
async def move_category(
    category_id: int,
    direction: MoveDirection = Query(...),
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Swap a category with its neighbour in display order."""
    return catalog_service.move_category(db, category_id, direction)
