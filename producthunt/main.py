"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from producthunt.config import Settings, get_settings
from producthunt.infrastructure.database import Database
from producthunt.core.logging import configure_logging
from producthunt.core.middleware import setup_middleware
from producthunt.core.exceptions import setup_exception_handlers

# Import all models so SQLAlchemy knows about them
from producthunt.domain.models.user import User
from producthunt.domain.models.product import Product, ProductVote  # noqa: F401
from producthunt.domain.models.report import Report  # noqa: F401
from producthunt.domain.models.coupon import Coupon  # noqa: F401
from producthunt.domain.models.membership import Membership  # noqa: F401
from producthunt.domain.models.review import Review  # noqa: F401

# Import routers
from producthunt.interfaces.api.auth import router as auth_router
from producthunt.interfaces.api.users import router as users_router
from producthunt.interfaces.api.products import router as products_router
from producthunt.interfaces.api.reports import router as reports_router
from producthunt.interfaces.api.memberships import router as memberships_router
from producthunt.interfaces.api.coupons import router as coupons_router
from producthunt.interfaces.api.reviews import router as reviews_router
from producthunt.interfaces.api.stats import router as stats_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — open the database on startup, dispose on shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting Product Hunt API...", env=settings.ENVIRONMENT)

    database = Database(settings.DATABASE_URL)
    database.create_all()
    app.state.database = database

    from producthunt.application.services.auth_service import ensure_default_admin
    from producthunt.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

    db = database.session()
    try:
        ensure_default_admin(SQLAlchemyUserRepository(db, User), settings)
    finally:
        db.close()

    yield

    database.dispose()
    logger.info("Product Hunt API stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Product Hunt API",
        description="Products, votes, memberships, reviews, reports and coupons",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    setup_middleware(app)
    setup_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(products_router)
    app.include_router(reports_router)
    app.include_router(memberships_router)
    app.include_router(coupons_router)
    app.include_router(reviews_router)
    app.include_router(stats_router)

    @app.get("/")
    def root():
        return {
            "name": "Product Hunt API",
            "version": "1.0.0",
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
