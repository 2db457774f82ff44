# localbiz/routes_admin.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from .database import get_db
from .models import User, Business, Product
from .models_audit import AuditLog
from .schemas import UserOut, BusinessListItem, StatsOut, MessageOut
from .audit import AUDIT_ACTIONS, log_audit, audit_to_dict
from .auth import require_admin

logger = logging.getLogger(__name__)

# every route here is admin only
router = APIRouter(prefix="/api/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/users", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)):
    return db.query(User).order_by(User.id).all()


@router.delete("/user/{user_id}", response_model=MessageOut)
def delete_user(
    user_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """
    Removes a customer or business owner.

    A business owner's business and its products go with them.
    """
    u = db.query(User).filter(User.id == user_id).first()
    if not u:
        raise HTTPException(status_code=404, detail="User not found")
    if u.role == "admin":
        raise HTTPException(status_code=403, detail="Cannot delete admin users")

    email = u.email
    removed_business = u.business.id if u.business else None
    removed_products = len(u.business.products) if u.business else 0

    # relationship cascades delete the business and its products
    db.delete(u)
    db.commit()

    logger.info(
        "Admin %s deleted user %s (business=%s, products=%s)",
        current_user.id, user_id, removed_business, removed_products,
    )
    log_audit(
        db, request, "USER_DELETE",
        user_id=current_user.id,
        entity="user",
        entity_id=user_id,
        payload={"email": email,"business_id": removed_business, "products": removed_products},
    )
    return {"message": "User removed successfully"}


@router.get("/businesses", response_model=list[BusinessListItem])
def list_all_businesses(
    approved: Optional[bool] = None,
    db: Session = Depends(get_db),
):
    """All businesses, pending ones included. ``approved`` narrows to one side."""
    query = db.query(Business)
    if approved is not None:
        query = query.filter(Business.approved.is_(approved))
    return query.order_by(Business.created_at.desc(), Business.id.desc()).all()


@router.get("/stats", response_model=StatsOut)
def stats(db: Session = Depends(get_db)):
    total_businesses = db.query(Business).count()
    approved_businesses = db.query(Business).filter(Business.approved.is_(True)).count()
    return StatsOut(
        total_users=db.query(User).count(),
        total_businesses=total_businesses,
        approved_businesses=approved_businesses,
        pending_businesses=total_businesses - approved_businesses,
        total_products=db.query(Product).count(),
    )


@router.get("/audit/logs")
def audit_logs(
    limit: int = Query(50, ge=1, le=500),
    action: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(AuditLog)
    if action:
        action = action.strip().upper()
        if action not in AUDIT_ACTIONS:
            raise HTTPException(status_code=400, detail=f"Unknown action. Allowed: {', '.join(AUDIT_ACTIONS)}")
        query = query.filter(AuditLog.action == action)

    rows = query.order_by(AuditLog.id.desc()).limit(limit).all()
    return [audit_to_dict(r) for r in rows]
