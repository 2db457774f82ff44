"""
Tests for the sample data loader
"""
from localbiz.models import User, Business, Product
from localbiz.seed import seed


class TestSeed:

    def test_seed_counts(self, db):
        counts = seed(db)

        assert counts == {"users": 6, "businesses": 3, "products": 9}
        assert db.query(User).filter(User.role == "admin").count() == 1
        assert db.query(Business).filter(Business.approved.is_(False)).count() == 1

    def test_seeded_admin_can_log_in(self, client, db):
        seed(db)

        resp = client.post("/api/auth/login", json={"email": "admin@example.com", "password": "admin123"})

        assert resp.status_code == 200
        assert resp.json()["role"] == "admin"

    def test_pending_business_products_not_listed(self, client, db):
        seed(db)

        names = {p["name"] for p in client.get("/api/product").json()}

        assert len(names) == 6
        assert "Smart Watch" not in names
        assert db.query(Product).count() == 9
