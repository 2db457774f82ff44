"""
Tests for the application wiring: welcome route and datastore error handling
"""
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from localbiz.main import app
from localbiz.database import get_db


@pytest.fixture
def broken_db():
    """Route every get_db dependency to a session whose queries fail"""
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT 1", {}, Exception("database is locked"))

    def _override():
        yield session

    app.dependency_overrides[get_db] = _override
    yield session
    app.dependency_overrides.pop(get_db, None)


class TestRoot:

    def test_welcome_lists_endpoints(self, client):
        resp = client.get("/")

        assert resp.status_code == 200
        assert resp.json()["endpoints"]["product"] == "/api/product"


class TestDatabaseErrors:
    """SQLAlchemy failures become a logged 500"""

    def test_listing_query_failure_is_500(self, client, broken_db):
        resp = client.get("/api/business")

        assert resp.status_code == 500
        assert resp.json() == {"detail": "Database error"}
        broken_db.query.assert_called_once()

    def test_login_query_failure_is_500(self, client, broken_db):
        resp = client.post("/api/auth/login", json={"email": "john@example.com", "password": "x"})

        assert resp.status_code == 500
        assert resp.json() == {"detail": "Database error"}
