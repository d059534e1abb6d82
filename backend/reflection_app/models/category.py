"""
Category and subcategory models: a per-user two-level taxonomy.
"""
from sqlalchemy import Column, String, Text, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from reflection_app.db.base import BaseModel


class Category(BaseModel):
    """Top-level category owned by a user."""
    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_categories_user_name"),)
    
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    parent_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    
    # Relationships
    user = relationship("User", back_populates="categories")
    sub_categories = relationship("SubCategory", back_populates="category", cascade="all, delete-orphan")


class SubCategory(BaseModel):
    """Subcategory belonging to exactly one category."""
    __tablename__ = "sub_categories"
    __table_args__ = (UniqueConstraint("category_id", "name", name="uq_sub_categories_category_name"),)
    
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    
    # Relationships
    category = relationship("Category", back_populates="sub_categories")
