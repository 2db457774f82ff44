# localbiz/main.py
"""
Local Business Directory API.

Run with:
    uvicorn localbiz.main:app --reload
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import CORS_ORIGINS, LOG_LEVEL, LOG_FILE
from .logging_config import setup_logging
from .database import Base, engine

# register every table on Base.metadata
from . import models, models_audit  # noqa: F401

from .routes_auth import router as auth_router
from .routes_business import router as business_router
from .routes_product import router as product_router
from .routes_admin import router as admin_router

logger = logging.getLogger(__name__)


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Database error"})


def create_app() -> FastAPI:
    setup_logging(LOG_LEVEL, LOG_FILE)

    app = FastAPI(title="Local Business Directory API", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(business_router)
    app.include_router(product_router)
    app.include_router(admin_router)

    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    @app.get("/")
    def root():
        return {
            "message": "Welcome to Local Business Directory API",
            "version": app.version,
            "endpoints": {
                "auth": "/api/auth",
                "business": "/api/business",
                "product": "/api/product",
                "admin": "/api/admin",
            },
        }

    # Create tables
    Base.metadata.create_all(bind=engine)
    logger.info("Local Business Directory API ready")

    return app


app = create_app()
