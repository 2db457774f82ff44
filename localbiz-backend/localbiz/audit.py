# localbiz/audit.py
import logging

from fastapi import Request
from sqlalchemy.orm import Session

from .models_audit import AuditLog

logger = logging.getLogger(__name__)

AUDIT_ACTIONS = (
    "REGISTER",
    "LOGIN",
    "BUSINESS_CREATE",
    "BUSINESS_UPDATE",
    "BUSINESS_APPROVE",
    "PRODUCT_CREATE",
    "PRODUCT_UPDATE",
    "PRODUCT_DELETE",
    "USER_DELETE",
)


def log_audit(
    db: Session,
    request: Request,
    action: str,
    *,
    user_id: int | None = None,
    business_id: int | None = None,
    entity: str | None = None,
    entity_id: int | None = None,
    payload: dict | None = None,
) -> AuditLog:
    """Record who did what, from where. Commits the session."""
    ip = request.client.host if request.client else None
    ua = request.headers.get("user-agent")

    entry = AuditLog(
        user_id=user_id,
        business_id=business_id,
        action=action,
        entity=entity,
        entity_id=entity_id,
        ip=ip,
        user_agent=ua[:255] if ua else None,
        payload=payload,
    )
    db.add(entry)
    db.commit()

    logger.debug("audit %s %s:%s by user %s", action, entity, entity_id, user_id)
    return entry


def audit_to_dict(r: AuditLog) -> dict:
    return {
        "id": r.id,
        "action": r.action,
        "entity": r.entity,
        "entity_id": r.entity_id,
        "user_id": r.user_id,
        "business_id": r.business_id,
        "ip": r.ip,
        "user_agent": r.user_agent,
        "payload": r.payload,
        "created_at": r.created_at.isoformat() if r.created_at else None,
    }
