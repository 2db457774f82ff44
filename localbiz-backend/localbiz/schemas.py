from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


# ---------- Users ----------
class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: str
    city: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AuthOut(UserOut):
    access_token: str
    token_type: str = "bearer"


class OwnerSummary(BaseModel):
    """Owner as embedded in business listings."""
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class OwnerOut(OwnerSummary):
    city: Optional[str] = None


# ---------- Businesses ----------
class BusinessSummary(BaseModel):
    """Embedded in product listings so they can show where to buy."""
    id: int
    name: str
    category: str
    address: str
    city: str

    model_config = ConfigDict(from_attributes=True)


class BusinessContact(BusinessSummary):
    phone: Optional[str] = None


class BusinessListItem(BaseModel):
    id: int
    name: str
    category: str
    address: str
    city: str
    phone: Optional[str] = None
    description: Optional[str] = None
    approved: bool
    owner: OwnerSummary
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BusinessOut(BusinessListItem):
    owner: OwnerOut


# ---------- Products ----------
class ProductListItem(BaseModel):
    id: int
    name: str
    price: float
    category: str
    description: str
    availability: bool
    business: BusinessSummary
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductOut(ProductListItem):
    business: BusinessContact


# ---------- Admin ----------
class StatsOut(BaseModel):
    total_users: int
    total_businesses: int
    approved_businesses: int
    pending_businesses: int
    total_products: int


class MessageOut(BaseModel):
    message: str
