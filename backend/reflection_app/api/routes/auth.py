"""
Authentication routes for registration, login, and logout.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from reflection_app.db.session import get_db
from reflection_app.schemas.user import AuthResponse, RegisterRequest, UserLogin, UserResponse
from reflection_app.models.user import User
from reflection_app.api.dependencies import get_bearer_token, get_current_user
from reflection_app.core.utils import format_message
from reflection_app.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """Register a new user and return a token."""
    return auth_service.register(request, db)


@router.post("/login", response_model=AuthResponse)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get JWT token."""
    return auth_service.login(credentials, db)


@router.post("/logout")
async def logout(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db)
):
    """Logout (client-side token removal); the token must still be valid."""
    auth_service.get_user_from_token(token or "", db)
    return format_message("Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return current_user
