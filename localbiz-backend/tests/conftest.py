"""
Pytest fixtures for the Local Business Directory API

Every test runs against a fresh in-memory SQLite schema.
"""
import os

# must be set before localbiz.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from localbiz.main import app
from localbiz.database import Base, SessionLocal, engine
from localbiz.models import User, Business
from localbiz.auth import hash_password, token_for


@pytest.fixture(autouse=True)
def reset_db():
    """Fresh tables for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(db):
    """
    Factory creating a user directly in the database.

    Returns (user_id, auth_headers).
    """
    counter = {"n": 0}

    def _make(role="customer", name=None, city="New York", email=None):
        counter["n"] += 1
        u = User(
            name=name or f"{role.title()} {counter['n']}",
            email=email or f"{role}{counter['n']}@example.com",
            password_hash=hash_password("secret123"),
            role=role,
            city=city,
        )
        db.add(u)
        db.commit()
        db.refresh(u)
        return u.id, {"Authorization": f"Bearer {token_for(u)}"}

    return _make


@pytest.fixture
def make_business(db):
    """Factory creating a business for an existing owner id. Returns the business id."""

    def _make(owner_id, approved=True, **fields):
        data = {
            "name": "Mike's Pizza Palace",
            "category": "Restaurant",
            "address": "123 Main Street",
            "city": "New York",
            "phone": "(555) 123-4567",
            "description": "Best pizza in New York!",
        }
        data.update(fields)
        biz = Business(owner_user_id=owner_id, approved=approved, **data)
        db.add(biz)
        db.commit()
        db.refresh(biz)
        return biz.id

    return _make


@pytest.fixture
def admin_headers(make_user):
    _, headers = make_user("admin", name="Admin User")
    return headers


@pytest.fixture
def sample_product_data():
    return {
        "name": "Margherita Pizza",
        "price": 12.99,
        "category": "Food & Beverages",
        "description": "Classic margherita pizza with fresh mozzarella, basil, and tomato sauce.",
    }
