"""
Category service for the per-user reflection taxonomy.
"""
import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from reflection_app.core.exceptions import ConflictError, NotFoundError, ValidationError
from reflection_app.core.utils import require_positive_id
from reflection_app.models.category import Category, SubCategory
from reflection_app.repositories.category_repository import CategoryRepository
from reflection_app.repositories.user_repository import UserRepository
from reflection_app.schemas.category import CategoryCreate, CategoryUpdate, SubCategoryCreate, SubCategoryUpdate

logger = logging.getLogger(__name__)


def _commit_or_conflict(db: Session, message: str) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(message)


def get_categories_by_user(user_id: int, db: Session) -> List[Category]:
    require_positive_id(user_id, "user ID")
    return CategoryRepository(db).get_categories_by_user(user_id)


def get_sub_categories_by_category(category_id: int, db: Session) -> List[SubCategory]:
    require_positive_id(category_id, "category ID")
    return CategoryRepository(db).get_sub_categories_by_category(category_id)


def create_category(category_data: CategoryCreate, db: Session) -> Category:
    if not category_data.name:
        raise ValidationError("category name is required")
    require_positive_id(category_data.user_id, "user ID")
    if not UserRepository(db).get_by_id(category_data.user_id):
        raise NotFoundError("User not found")

    repo = CategoryRepository(db)
    if category_data.parent_id is not None:
        parent = repo.get_category(category_data.parent_id)
        if not parent or parent.user_id != category_data.user_id:
            raise ValidationError("parent category not found")

    category = Category(
        user_id=category_data.user_id,
        name=category_data.name,
        description=category_data.description,
        parent_id=category_data.parent_id,
    )
    try:
        repo.create_category(category)
    except IntegrityError:
        db.rollback()
        raise ConflictError("category already exists")
    _commit_or_conflict(db, "category already exists")
    db.refresh(category)
    return category


def update_category(category_id: int, category_data: CategoryUpdate, db: Session) -> Category:
    if not category_data.name:
        raise ValidationError("category name is required")
    
    repo = CategoryRepository(db)
    category = repo.get_category(category_id)
    if not category:
        raise NotFoundError("Category not found")
    
    category.name = category_data.name
    category.description = category_data.description
    try:
        repo.flush()
    except IntegrityError:
        db.rollback()
        raise ConflictError("category already exists")
    _commit_or_conflict(db, "category already exists")
    db.refresh(category)
    return category


def delete_category(category_id: int, db: Session) -> None:
    """Delete a category and its subcategories; refused while reflections use it."""
    repo = CategoryRepository(db)
    category = repo.get_category(category_id)
    if not category:
        raise NotFoundError("Category not found")
    try:
        repo.delete_category(category)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("category is still used by reflections")


def create_sub_category(category_id: int, sub_category_data: SubCategoryCreate, db: Session) -> SubCategory:
    if not sub_category_data.name:
        raise ValidationError("subcategory name is required")
    require_positive_id(category_id, "category ID")
    
    repo = CategoryRepository(db)
    if not repo.get_category(category_id):
        raise NotFoundError("Category not found")
    
    sub_category = SubCategory(
        category_id=category_id,
        name=sub_category_data.name,
        description=sub_category_data.description,
    )
    try:
        repo.create_sub_category(sub_category)
    except IntegrityError:
        db.rollback()
        raise ConflictError("subcategory already exists")
    _commit_or_conflict(db, "subcategory already exists")
    db.refresh(sub_category)
    return sub_category


def update_sub_category(sub_category_id: int, sub_category_data: SubCategoryUpdate, db: Session) -> SubCategory:
    if not sub_category_data.name:
        raise ValidationError("subcategory name is required")
    
    repo = CategoryRepository(db)
    sub_category = repo.get_sub_category(sub_category_id)
    if not sub_category:
        raise NotFoundError("Subcategory not found")
    
    sub_category.name = sub_category_data.name
    sub_category.description = sub_category_data.description
    try:
        repo.flush()
    except IntegrityError:
        db.rollback()
        raise ConflictError("subcategory already exists")
    _commit_or_conflict(db, "subcategory already exists")
    db.refresh(sub_category)
    return sub_category


def delete_sub_category(sub_category_id: int, db: Session) -> None:
    repo = CategoryRepository(db)
    sub_category = repo.get_sub_category(sub_category_id)
    if not sub_category:
        raise NotFoundError("Subcategory not found")
    repo.delete_sub_category(sub_category)
    db.commit()
