"""
Authentication service: registration, login and token validation.
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from reflection_app.core.exceptions import AuthError, ConflictError, ValidationError
from reflection_app.core.security import create_access_token, decode_access_token, get_password_hash, verify_password
from reflection_app.models.user import User
from reflection_app.repositories.user_repository import UserRepository
from reflection_app.schemas.user import AuthResponse, RegisterRequest, UserLogin, UserResponse

logger = logging.getLogger(__name__)


def _issue_token(user: User) -> AuthResponse:
    token = create_access_token(data={"sub": user.username, "user_id": user.id})
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


def register(request: RegisterRequest, db: Session) -> AuthResponse:
    """Create an account and return a token for it."""
    if not request.username or not request.email or not request.password:
        raise ValidationError("Username, email, and password are required")
    
    repo = UserRepository(db)
    if repo.get_by_username(request.username):
        raise ConflictError("username already exists")
    if repo.get_by_email(request.email):
        raise ConflictError("email already exists")
    
    user = User(
        username=request.username,
        email=request.email,
        first_name=request.first_name,
        last_name=request.last_name,
        password_hash=get_password_hash(request.password),
    )
    try:
        repo.create(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Registration for '{request.username}' lost a uniqueness race")
        raise ConflictError("username or email already exists")
    db.refresh(user)
    
    logger.info(f"Registered user {user.id} ({user.username})")
    return _issue_token(user)


def login(credentials: UserLogin, db: Session) -> AuthResponse:
    """Check credentials and return a fresh token."""
    if not credentials.username or not credentials.password:
        raise ValidationError("Username and password are required")
    
    user = UserRepository(db).get_by_username(credentials.username)
    if not user or not verify_password(credentials.password, user.password_hash):
        raise AuthError("invalid username or password")
    
    return _issue_token(user)


def get_user_from_token(token: str, db: Session) -> User:
    """Resolve the user a bearer token was issued for."""
    payload = decode_access_token(token)
    if not payload or "user_id" not in payload:
        raise AuthError("Invalid authentication token")
    
    user = UserRepository(db).get_by_id(int(payload["user_id"]))
    if not user:
        raise AuthError("User not found")
    return user
