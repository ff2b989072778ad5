"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func

from producthunt.infrastructure.database import Base

USER_ROLES = ("user", "moderator", "admin")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    photo_url = Column(Text, nullable=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="user")  # user, moderator, admin
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<User {self.email}>"
