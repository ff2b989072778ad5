"""Database engine and session lifetime.

The engine is owned by a ``Database`` instance created in the application
lifespan and kept on ``app.state``; nothing here is a module-level handle.
"""

from typing import Generator

import structlog
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """Owns the SQLAlchemy engine and session factory for one application."""

    def __init__(self, url: str, echo: bool = False):
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.engine = create_engine(url, echo=echo, pool_pre_ping=True, connect_args=connect_args)
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified")

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a request-scoped session from the application's database."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
