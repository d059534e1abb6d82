"""
Pydantic schemas for User entity and authentication.
"""
from pydantic import BaseModel, EmailStr
from datetime import datetime


class UserBase(BaseModel):
    """Base user schema."""
    username: str
    email: EmailStr
    first_name: str = ""
    last_name: str = ""


class UserCreate(UserBase):
    """Schema for user creation."""
    password: str


class UserUpdate(BaseModel):
    """Schema for user profile update."""
    username: str
    email: EmailStr
    first_name: str = ""
    last_name: str = ""


class UserResponse(UserBase):
    """Schema for user response (never includes the password hash)."""
    id: int
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Schema for user login."""
    username: str
    password: str


class RegisterRequest(UserCreate):
    """Schema for self-registration."""
    pass


class AuthResponse(BaseModel):
    """Token plus the authenticated user."""
    token: str
    token_type: str = "bearer"
    user: UserResponse
