"""Membership — lifts the one-product limit for its owner."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from producthunt.infrastructure.database import Base


class Membership(Base):
    __tablename__ = "memberships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_email = Column(String(255), nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    purchased_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Membership {self.user_email} active={self.is_active}>"
