"""
Category and subcategory routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from reflection_app.db.session import get_db
from reflection_app.schemas.category import (
    CategoryCreate, CategoryResponse, CategoryUpdate,
    SubCategoryCreate, SubCategoryResponse, SubCategoryUpdate
)
from reflection_app.api.dependencies import get_acting_user_id
from reflection_app.core.utils import format_message
from reflection_app.services import category_service

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories(
    user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db)
):
    """List a user's categories."""
    return category_service.get_categories_by_user(user_id, db)


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    """Create a category."""
    return category_service.create_category(category_data, db)


@router.put("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: int, category_data: CategoryUpdate, db: Session = Depends(get_db)):
    """Rename or re-describe a category."""
    return category_service.update_category(category_id, category_data, db)


@router.delete("/categories/{category_id}")
async def delete_category(category_id: int, db: Session = Depends(get_db)):
    """Delete a category and its subcategories."""
    category_service.delete_category(category_id, db)
    return format_message("Category deleted successfully")


@router.get("/categories/{category_id}/subcategories", response_model=List[SubCategoryResponse])
async def list_sub_categories(category_id: int, db: Session = Depends(get_db)):
    """List subcategories of a category."""
    return category_service.get_sub_categories_by_category(category_id, db)


@router.post(
    "/categories/{category_id}/subcategories",
    response_model=SubCategoryResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_sub_category(
    category_id: int,
    sub_category_data: SubCategoryCreate,
    db: Session = Depends(get_db)
):
    """Create a subcategory under a category."""
    return category_service.create_sub_category(category_id, sub_category_data, db)


@router.put("/subcategories/{sub_category_id}", response_model=SubCategoryResponse)
async def update_sub_category(
    sub_category_id: int,
    sub_category_data: SubCategoryUpdate,
    db: Session = Depends(get_db)
):
    """Update a subcategory."""
    return category_service.update_sub_category(sub_category_id, sub_category_data, db)


@router.delete("/subcategories/{sub_category_id}")
async def delete_sub_category(sub_category_id: int, db: Session = Depends(get_db)):
    """Delete a subcategory; its reflections keep their category."""
    category_service.delete_sub_category(sub_category_id, db)
    return format_message("Subcategory deleted successfully")
