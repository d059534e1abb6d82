"""
Shared fixtures: an in-memory SQLite database rebuilt for every test.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from reflection_app.main import app
from reflection_app.db.base import Base
from reflection_app.db.session import SessionLocal, engine
from reflection_app.models.reflection import ReflectionVisibility
from reflection_app.schemas.category import CategoryCreate
from reflection_app.schemas.reflection import ReflectionCreate
from reflection_app.schemas.user import UserCreate
from reflection_app.services import category_service, friendship_service, reflection_service, user_service


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db):
    def _make_user(username, first_name="", last_name=""):
        return user_service.create_user(
            UserCreate(
                username=username,
                email=f"{username}@example.com",
                password="password123",
                first_name=first_name,
                last_name=last_name,
            ),
            db,
        )
    return _make_user


@pytest.fixture
def make_category(db):
    def _make_category(user, name="Work"):
        return category_service.create_category(CategoryCreate(user_id=user.id, name=name), db)
    return _make_category


@pytest.fixture
def make_reflection(db, make_category):
    def _make_reflection(user, text="Learned something", visibility=ReflectionVisibility.PUBLIC, category=None):
        if category is None:
            categories = category_service.get_categories_by_user(user.id, db)
            category = categories[0] if categories else make_category(user)
        return reflection_service.create_reflection(
            ReflectionCreate(
                author_id=user.id,
                category_id=category.id,
                reflection_text=text,
                visibility=visibility,
            ),
            db,
        )
    return _make_reflection


@pytest.fixture
def befriend(db):
    def _befriend(requester, recipient):
        friendship_service.send_friend_request(requester.id, recipient.id, db)
        friendship_service.accept_friend_request(recipient.id, requester.id, db)
    return _befriend
