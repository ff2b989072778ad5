"""Coupon — discount codes managed by admins."""

from sqlalchemy import Column, Date, Integer, String, Text

from producthunt.infrastructure.database import Base


class Coupon(Base):
    __tablename__ = "coupons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(100), nullable=False, index=True)
    expiry_date = Column(Date, nullable=False)
    description = Column(Text, nullable=False)
    discount = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<Coupon {self.code} - {self.discount}%>"
