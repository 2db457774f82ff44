# localbiz/routes_business.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .database import get_db
from .models import User, Business, BUSINESS_CATEGORIES
from .schemas import BusinessListItem, BusinessOut
from .audit import log_audit
from .auth import get_current_user_optional, require_admin, require_business, require_business_or_admin
from .rbac import is_admin, can_view_business, get_owned_business, require_business_owner
from .utils import clean_str, require_fields, parse_choice

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/business", tags=["Business"])

# owner, approved and id are never writable here
EDITABLE_FIELDS = ("name", "category", "address", "city", "phone", "description")
REQUIRED_FIELDS = ("name", "category", "address", "city")


def filter_businesses(
    query,
    city: Optional[str] = None,
    category: Optional[str] = None,
    keyword: Optional[str] = None,
    approved_only: bool = True,
):
    """Compile listing filters into the query. City/keyword are case-insensitive substrings."""
    if approved_only:
        query = query.filter(Business.approved.is_(True))
    if city:
        query = query.filter(Business.city.icontains(city, autoescape=True))
    if category:
        query = query.filter(Business.category == category)
    if keyword:
        query = query.filter(
            or_(
                Business.name.icontains(keyword, autoescape=True),
                Business.description.icontains(keyword, autoescape=True),
            )
        )
    return query


# -----------------------------
# Public
# -----------------------------
@router.get("", response_model=list[BusinessListItem])
@router.get("/", response_model=list[BusinessListItem], include_in_schema=False)
def list_businesses(
    city: Optional[str] = None,
    category: Optional[str] = None,
    keyword: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    """Approved businesses only, unless the caller is an admin."""
    query = filter_businesses(
        db.query(Business),
        city=clean_str(city),
        category=clean_str(category),
        keyword=clean_str(keyword),
        approved_only=not is_admin(current_user),
    )
    return query.order_by(Business.name).all()


@router.get("/my/business", response_model=BusinessOut)
def my_business(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_business),
):
    biz = get_owned_business(db, current_user)
    if not biz:
        raise HTTPException(status_code=404, detail="No business found for this user")
    return biz


@router.get("/{business_id}", response_model=BusinessOut)
def get_business(
    business_id: int,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    biz = db.query(Business).filter(Business.id == business_id).first()
    # pending businesses are hidden rather than forbidden
    if not biz or not can_view_business(current_user, biz):
        raise HTTPException(status_code=404, detail="Business not found")
    return biz


# -----------------------------
# Business owner
# -----------------------------
@router.post("", status_code=status.HTTP_201_CREATED, response_model=BusinessOut)
@router.post("/", status_code=status.HTTP_201_CREATED, response_model=BusinessOut, include_in_schema=False)
def create_business(
    payload: dict,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_business),
):
    """
    Body:
    {
      "name": "Mike's Pizza Palace",
      "category": "Restaurant",
      "address": "123 Main Street",
      "city": "New York",
      "phone": "(555) 123-4567",
      "description": "Best pizza in New York!"
    }

    New businesses start unapproved.
    """
    values = require_fields(payload, *REQUIRED_FIELDS)
    category = parse_choice(values["category"], BUSINESS_CATEGORIES, "category")

    if get_owned_business(db, current_user):
        raise HTTPException(status_code=400, detail="You already have a registered business")

    biz = Business(
        owner_user_id=current_user.id,
        name=values["name"],
        category=category,
        address=values["address"],
        city=values["city"],
        phone=clean_str(payload.get("phone")) or None,
        description=clean_str(payload.get("description")) or None,
        approved=False,
    )
    db.add(biz)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="You already have a registered business")
    db.refresh(biz)

    logger.info("User %s created business %s (%s)", current_user.id, biz.id, biz.name)
    log_audit(
        db, request, "BUSINESS_CREATE",
        user_id=current_user.id,
        business_id=biz.id,
        entity="business",
        entity_id=biz.id,
        payload={"name": biz.name},
    )
    return biz


@router.put("/{business_id}", response_model=BusinessOut)
def update_business(
    business_id: int,
    payload: dict,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_business_or_admin),
):
    biz = require_business_owner(db, business_id, current_user, action="update")

    changes = {}
    for field in EDITABLE_FIELDS:
        if field not in payload:
            continue
        value = clean_str(payload.get(field))
        if field in REQUIRED_FIELDS and not value:
            raise HTTPException(status_code=400, detail=f"{field} cannot be empty")
        if field == "category":
            value = parse_choice(value, BUSINESS_CATEGORIES, "category")
        changes[field] = value or None

    for field, value in changes.items():
        setattr(biz, field, value)
    db.commit()
    db.refresh(biz)

    log_audit(
        db, request, "BUSINESS_UPDATE",
        user_id=current_user.id,
        business_id=biz.id,
        entity="business",
        entity_id=biz.id,
        payload={"fields": sorted(changes)},
    )
    return biz


# -----------------------------
# Admin
# -----------------------------
@router.put("/approve/{business_id}")
def approve_business(
    business_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    biz = db.query(Business).filter(Business.id == business_id).first()
    if not biz:
        raise HTTPException(status_code=404, detail="Business not found")

    biz.approved = True
    db.commit()
    db.refresh(biz)

    logger.info("Admin %s approved business %s", current_user.id, biz.id)
    log_audit(
        db, request, "BUSINESS_APPROVE",
        user_id=current_user.id,
        business_id=biz.id,
        entity="business",
        entity_id=biz.id,
    )
    return {"message": "Business approved successfully", "business": BusinessOut.model_validate(biz)}
