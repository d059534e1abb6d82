"""
Pydantic schemas for Category and SubCategory.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class CategoryCreate(BaseModel):
    """Schema for category creation."""
    user_id: int
    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = None


class CategoryUpdate(BaseModel):
    """Schema for category update."""
    name: str
    description: Optional[str] = None


class CategoryResponse(BaseModel):
    """Schema for category response."""
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = None
    created_at: datetime
    
    class Config:
        from_attributes = True


class SubCategoryCreate(BaseModel):
    """Schema for subcategory creation (category comes from the path)."""
    name: str
    description: Optional[str] = None


class SubCategoryUpdate(BaseModel):
    """Schema for subcategory update."""
    name: str
    description: Optional[str] = None


class SubCategoryResponse(BaseModel):
    """Schema for subcategory response."""
    id: int
    category_id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    
    class Config:
        from_attributes = True


class CategoryLabel(BaseModel):
    """Category name/description embedded in reflection responses."""
    id: int
    name: str
    description: Optional[str] = None
    
    class Config:
        from_attributes = True


class SubCategoryLabel(CategoryLabel):
    """Subcategory label embedded in reflection responses."""
    category_id: int
