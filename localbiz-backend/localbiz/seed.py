"""
Load sample data into the database.

    python -m localbiz.seed

Drops and recreates every table, then creates one admin, two customers,
three business owners with a business each (one still pending approval)
and a handful of products.
"""
import argparse
import logging

from sqlalchemy.orm import Session

from .config import LOG_LEVEL, LOG_FILE
from .logging_config import setup_logging
from .database import Base, SessionLocal, engine
from .models import User, Business, Product
from . import models_audit  # noqa: F401
from .auth import hash_password

logger = logging.getLogger(__name__)

USERS = [
    # name, email, password, role, city
    ("Admin User", "admin@example.com", "admin123", "admin", "New York"),
    ("John Doe", "john@example.com", "customer123", "customer", "New York"),
    ("Jane Smith", "jane@example.com", "customer123", "customer", "Los Angeles"),
    ("Mike Johnson", "mike@example.com", "business123", "business", "New York"),
    ("Sarah Williams", "sarah@example.com", "business123", "business", "Los Angeles"),
    ("David Brown", "david@example.com", "business123", "business", "Chicago"),
]

BUSINESSES = {
    "mike@example.com": dict(
        name="Mike's Pizza Palace",
        category="Restaurant",
        address="123 Main Street",
        city="New York",
        phone="(555) 123-4567",
        description="Best pizza in New York! Fresh ingredients and authentic Italian recipes.",
        approved=True,
    ),
    "sarah@example.com": dict(
        name="Sarah's Fashion Boutique",
        category="Fashion",
        address="456 Sunset Blvd",
        city="Los Angeles",
        phone="(555) 234-5678",
        description="Trendy fashion for everyone. Latest styles and affordable prices.",
        approved=True,
    ),
    "david@example.com": dict(
        name="Tech Haven Electronics",
        category="Electronics",
        address="789 Michigan Ave",
        city="Chicago",
        phone="(555) 345-6789",
        description="Your one-stop shop for all electronics and gadgets.",
        approved=False,
    ),
}

PRODUCTS = {
    "mike@example.com": [
        ("Margherita Pizza", 12.99, "Food & Beverages",
         "Classic margherita pizza with fresh mozzarella, basil, and tomato sauce.", True),
        ("Pepperoni Pizza", 14.99, "Food & Beverages", "Loaded with premium pepperoni and extra cheese.", True),
        ("Caesar Salad", 8.99, "Food & Beverages", "Fresh romaine lettuce with Caesar dressing and croutons.", True),
    ],
    "sarah@example.com": [
        ("Summer Dress", 49.99, "Clothing",
         "Flowy summer dress perfect for warm weather. Available in multiple colors.", True),
        ("Designer Jeans", 89.99, "Clothing", "Premium quality denim jeans with a modern fit.", True),
        ("Leather Handbag", 129.99, "Clothing", "Genuine leather handbag with multiple compartments.", True),
    ],
    "david@example.com": [
        ("Wireless Headphones", 79.99, "Electronics",
         "Premium wireless headphones with noise cancellation and 30-hour battery life.", True),
        ("Smart Watch", 199.99, "Electronics",
         "Feature-packed smart watch with fitness tracking and notifications.", True),
        ("Bluetooth Speaker", 59.99, "Electronics",
         "Portable Bluetooth speaker with powerful sound and waterproof design.", False),  # out of stock
    ],
}


def seed(db: Session) -> dict:
    """Insert the sample rows into an empty schema. Returns row counts."""
    users = {}
    for name, email, password, role, city in USERS:
        u = User(name=name, email=email, password_hash=hash_password(password), role=role, city=city)
        db.add(u)
        users[email] = u
    db.flush()

    n_products = 0
    for email, fields in BUSINESSES.items():
        biz = Business(owner_user_id=users[email].id, **fields)
        db.add(biz)
        db.flush()
        for name, price, category, description, availability in PRODUCTS[email]:
            db.add(
                Product(
                    business_id=biz.id,
                    name=name,
                    price=price,
                    category=category,
                    description=description,
                    availability=availability,
                )
            )
            n_products += 1

    db.commit()
    return {"users": len(users), "businesses": len(BUSINESSES), "products": n_products}


def reset_schema() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Seed the local business directory with sample data")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="do not drop existing tables first (fails if sample emails already exist)",
    )
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL, LOG_FILE)

    if args.keep:
        Base.metadata.create_all(bind=engine)
    else:
        logger.info("Clearing existing data...")
        reset_schema()

    db = SessionLocal()
    try:
        counts = seed(db)
    finally:
        db.close()

    logger.info(
        "Seeded %(users)s users, %(businesses)s businesses, %(products)s products", counts
    )
    logger.info("Admin login: admin@example.com / admin123")
    logger.info("Tech Haven Electronics (david@example.com) is pending approval")


if __name__ == "__main__":
    main()
