"""
Data access for categories and subcategories.
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from reflection_app.models.category import Category, SubCategory


class CategoryRepository:
    """Queries against categories and sub_categories."""

    def __init__(self, db: Session):
        self.db = db

    def get_categories_by_user(self, user_id: int) -> List[Category]:
        return self.db.query(Category).filter(
            Category.user_id == user_id
        ).order_by(Category.name).all()

    def get_category(self, category_id: int) -> Optional[Category]:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def create_category(self, category: Category) -> Category:
        self.db.add(category)
        self.db.flush()
        return category

    def delete_category(self, category: Category) -> None:
        self.db.delete(category)
        self.db.flush()

    def get_sub_categories_by_category(self, category_id: int) -> List[SubCategory]:
        return self.db.query(SubCategory).filter(
            SubCategory.category_id == category_id
        ).order_by(SubCategory.name).all()

    def get_sub_category(self, sub_category_id: int) -> Optional[SubCategory]:
        return self.db.query(SubCategory).filter(SubCategory.id == sub_category_id).first()

    def create_sub_category(self, sub_category: SubCategory) -> SubCategory:
        self.db.add(sub_category)
        self.db.flush()
        return sub_category

    def delete_sub_category(self, sub_category: SubCategory) -> None:
        self.db.delete(sub_category)
        self.db.flush()

    def flush(self) -> None:
        self.db.flush()
