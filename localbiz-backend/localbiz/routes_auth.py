# localbiz/routes_auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .database import get_db
from .models import User
from .schemas import AuthOut, UserOut
from .audit import log_audit
from .utils import clean_str
from .auth import (
    hash_password,
    verify_password,
    token_for,
    get_current_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])

# admins are created by seeding, never through the public API
SELF_REGISTER_ROLES = {"customer", "business"}


def _auth_response(u: User) -> AuthOut:
    return AuthOut(**UserOut.model_validate(u).model_dump(), access_token=token_for(u))


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthOut)
def register(payload: dict, request: Request, db: Session = Depends(get_db)):
    """
    Body:
    {
      "name": "John Doe",
      "email": "john@example.com",
      "password": "customer123",
      "role": "customer",
      "city": "New York"
    }
    """
    name = clean_str(payload.get("name"))
    email = clean_str(payload.get("email")).lower()
    password = str(payload.get("password") or "")
    role = (clean_str(payload.get("role")) or "customer").lower()
    city = clean_str(payload.get("city")) or None

    if not name or not email or not password:
        raise HTTPException(status_code=400, detail="name, email and password are required")

    if role not in SELF_REGISTER_ROLES:
        raise HTTPException(status_code=400, detail="role must be 'customer' or 'business'")

    exists = db.query(User).filter(User.email == email).first()
    if exists:
        raise HTTPException(status_code=400, detail="Email already registered")

    u = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
        city=city,
    )
    db.add(u)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Email already registered")
    db.refresh(u)

    logger.info("Registered %s user %s (%s)", role, u.id, email)
    log_audit(db, request, "REGISTER", user_id=u.id, entity="user", entity_id=u.id, payload={"role": role})

    return _auth_response(u)


@router.post("/login", response_model=AuthOut)
def login(payload: dict, request: Request, db: Session = Depends(get_db)):
    """
    Body:
    {
      "email": "john@example.com",
      "password": "customer123"
    }
    """
    email = clean_str(payload.get("email")).lower()
    password = str(payload.get("password") or "")

    if not email or not password:
        raise HTTPException(status_code=400, detail="email and password are required")

    u = db.query(User).filter(User.email == email).first()
    if not u or not verify_password(password, u.password_hash):
        logger.warning("Failed login for %s", email)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    log_audit(db, request, "LOGIN", user_id=u.id, entity="user", entity_id=u.id)
    return _auth_response(u)


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return current_user
