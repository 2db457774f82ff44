"""
Ownership and visibility checks shared by the business and product routes.

Every mutation asks the same question: is the caller the owner of the
business (directly, or through a product's business) or an admin?
Missing resources are 404, ownership mismatches 403.
"""
import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from .models import User, Business, Product

logger = logging.getLogger(__name__)


def is_admin(user: Optional[User]) -> bool:
    return user is not None and user.role == "admin"


def owns_business(user: Optional[User], biz: Business) -> bool:
    return user is not None and biz.owner_user_id == user.id


def can_view_business(user: Optional[User], biz: Business) -> bool:
    """Unapproved businesses are only visible to their owner and admins."""
    return bool(biz.approved) or is_admin(user) or owns_business(user, biz)


def get_owned_business(db: Session, user: User) -> Optional[Business]:
    return db.query(Business).filter(Business.owner_user_id == user.id).first()


def require_business_owner(db: Session, business_id: int, user: User, action: str = "update") -> Business:
    biz = db.query(Business).filter(Business.id == business_id).first()
    if not biz:
        raise HTTPException(status_code=404, detail="Business not found")
    if not (owns_business(user, biz) or is_admin(user)):
        logger.warning("User %s tried to %s business %s", user.id, action, business_id)
        raise HTTPException(status_code=403, detail=f"Not authorized to {action} this business")
    return biz


def require_product_owner(db: Session, product_id: int, user: User, action: str = "update") -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    if not (owns_business(user, product.business) or is_admin(user)):
        logger.warning("User %s tried to %s product %s", user.id, action, product_id)
        raise HTTPException(status_code=403, detail=f"Not authorized to {action} this product")
    return product
