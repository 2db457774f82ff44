from sqlalchemy import Column, Integer, String, Float, Boolean, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from .database import Base


USER_ROLES = ("customer", "business", "admin")

BUSINESS_CATEGORIES = (
    "Restaurant",
    "Retail",
    "Electronics",
    "Fashion",
    "Grocery",
    "Healthcare",
    "Education",
    "Services",
    "Automotive",
    "Other",
)

PRODUCT_CATEGORIES = (
    "Food & Beverages",
    "Electronics",
    "Clothing",
    "Home & Garden",
    "Sports",
    "Books",
    "Toys",
    "Health & Beauty",
    "Automotive",
    "Other",
)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String(16), nullable=False, default="customer")  # USER_ROLES
    city = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # a business-role user owns at most one business
    business = relationship("Business", back_populates="owner", uselist=False, cascade="all, delete-orphan")


class Business(Base):
    __tablename__ = "businesses"

    id = Column(Integer, primary_key=True, index=True)
    owner_user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False
    )
    name = Column(String, nullable=False)
    category = Column(String(32), nullable=False)  # BUSINESS_CATEGORIES
    address = Column(String, nullable=False)
    city = Column(String, index=True, nullable=False)
    phone = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    approved = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="business")
    products = relationship("Product", back_populates="business", cascade="all, delete-orphan")


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    business_id = Column(Integer, ForeignKey("businesses.id", ondelete="CASCADE"), index=True, nullable=False)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String(32), nullable=False)  # PRODUCT_CATEGORIES
    description = Column(Text, nullable=False)
    availability = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    business = relationship("Business", back_populates="products")
