# localbiz/routes_product.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from .database import get_db
from .models import User, Business, Product, PRODUCT_CATEGORIES
from .schemas import ProductListItem, ProductOut, MessageOut
from .audit import log_audit
from .auth import get_current_user_optional, require_business, require_business_or_admin
from .rbac import is_admin, can_view_business, get_owned_business, require_product_owner
from .utils import clean_str, require_fields, parse_choice, parse_price, parse_bool

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/product", tags=["Product"])

EDITABLE_FIELDS = ("name", "price", "category", "description", "availability")
REQUIRED_FIELDS = ("name", "price", "category", "description")


def filter_products(
    query,
    keyword: Optional[str] = None,
    category: Optional[str] = None,
    city: Optional[str] = None,
    business_id: Optional[int] = None,
    approved_only: bool = True,
):
    """
    Compile search filters into the query.

    keyword matches name or description, city matches the owning
    business's city; both case-insensitive substrings. category is exact.
    """
    query = query.join(Product.business)
    if approved_only:
        query = query.filter(Business.approved.is_(True))
    if keyword:
        query = query.filter(
            or_(
                Product.name.icontains(keyword, autoescape=True),
                Product.description.icontains(keyword, autoescape=True),
            )
        )
    if category:
        query = query.filter(Product.category == category)
    if city:
        query = query.filter(Business.city.icontains(city, autoescape=True))
    if business_id is not None:
        query = query.filter(Product.business_id == business_id)
    return query


def _apply_fields(product: Product, payload: dict, fields) -> list[str]:
    changed = []
    for field in fields:
        if field not in payload:
            continue
        raw = payload.get(field)
        if field == "price":
            value = parse_price(raw)
        elif field == "availability":
            value = parse_bool(raw, "availability")
        elif field == "category":
            value = parse_choice(raw, PRODUCT_CATEGORIES, "category")
        else:
            value = clean_str(raw)
            if not value:
                raise HTTPException(status_code=400, detail=f"{field} cannot be empty")
        setattr(product, field, value)
        changed.append(field)
    return changed


# -----------------------------
# Public
# -----------------------------
@router.get("", response_model=list[ProductListItem])
@router.get("/", response_model=list[ProductListItem], include_in_schema=False)
@router.get("/search", response_model=list[ProductListItem])
def list_products(
    keyword: Optional[str] = None,
    category: Optional[str] = None,
    city: Optional[str] = None,
    business_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    """Products of approved businesses only, unless the caller is an admin."""
    query = filter_products(
        db.query(Product),
        keyword=clean_str(keyword),
        category=clean_str(category),
        city=clean_str(city),
        business_id=business_id,
        approved_only=not is_admin(current_user),
    )
    return query.order_by(Product.name).all()


@router.get("/my/products", response_model=list[ProductListItem])
def my_products(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_business),
):
    biz = get_owned_business(db, current_user)
    if not biz:
        raise HTTPException(status_code=404, detail="No business found")
    return db.query(Product).filter(Product.business_id == biz.id).order_by(Product.name).all()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product or not can_view_business(current_user, product.business):
        raise HTTPException(status_code=404, detail="Product not found")
    return product


# -----------------------------
# Business owner
# -----------------------------
@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductOut)
@router.post("/", status_code=status.HTTP_201_CREATED, response_model=ProductOut, include_in_schema=False)
def create_product(
    payload: dict,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_business),
):
    """
    Body:
    {
      "name": "Margherita Pizza",
      "price": 12.99,
      "category": "Food & Beverages",
      "description": "Classic margherita pizza",
      "availability": true
    }
    """
    require_fields(payload, *REQUIRED_FIELDS)

    biz = get_owned_business(db, current_user)
    if not biz:
        raise HTTPException(status_code=404, detail="You must register a business first")
    if not biz.approved:
        raise HTTPException(status_code=403, detail="Your business must be approved before adding products")

    product = Product(business_id=biz.id, availability=True)
    _apply_fields(product, payload, EDITABLE_FIELDS)
    db.add(product)
    db.commit()
    db.refresh(product)

    logger.info("Business %s added product %s (%s)", biz.id, product.id, product.name)
    log_audit(
        db, request, "PRODUCT_CREATE",
        user_id=current_user.id,
        business_id=biz.id,
        entity="product",
        entity_id=product.id,
        payload={"name": product.name, "price": product.price},
    )
    return product


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: int,
    payload: dict,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_business_or_admin),
):
    product = require_product_owner(db, product_id, current_user, action="update")

    changed = _apply_fields(product, payload, EDITABLE_FIELDS)
    db.commit()
    db.refresh(product)

    log_audit(
        db, request, "PRODUCT_UPDATE",
        user_id=current_user.id,
        business_id=product.business_id,
        entity="product",
        entity_id=product.id,
        payload={"fields": changed},
    )
    return product


@router.delete("/{product_id}", response_model=MessageOut)
def delete_product(
    product_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_business_or_admin),
):
    product = require_product_owner(db, product_id, current_user, action="delete")
    business_id = product.business_id

    db.delete(product)
    db.commit()

    logger.info("User %s deleted product %s", current_user.id, product_id)
    log_audit(
        db, request, "PRODUCT_DELETE",
        user_id=current_user.id,
        business_id=business_id,
        entity="product",
        entity_id=product_id,
    )
    return {"message": "Product removed successfully"}
