"""
Shared FastAPI dependencies: bearer-token user and acting-user resolution.
"""
from typing import Optional
from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from reflection_app.core.exceptions import AuthError, ValidationError
from reflection_app.db.session import get_db
from reflection_app.models.user import User
from reflection_app.services import auth_service

bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Raw token from the Authorization header, if any."""
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db)
) -> User:
    """Authenticated user from a Bearer token."""
    if not token:
        raise AuthError("Not authenticated")
    return auth_service.get_user_from_token(token, db)


async def get_acting_user_id(
    user_id: Optional[int] = Query(None),
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db)
) -> int:
    """
    The user a request acts on behalf of.

    An explicit ?user_id= wins; otherwise a valid Bearer token supplies it.
    """
    if user_id is not None:
        return user_id
    if token:
        return auth_service.get_user_from_token(token, db).id
    raise ValidationError("user_id parameter is required")


async def get_optional_acting_user_id(
    user_id: Optional[int] = Query(None),
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db)
) -> Optional[int]:
    """Like get_acting_user_id, but None when the caller names nobody."""
    if user_id is not None:
        return user_id
    if token:
        return auth_service.get_user_from_token(token, db).id
    return None
