from sqlalchemy import Column, Integer, ForeignKey, String, Text, DateTime, Index
from sqlalchemy.sql import func

from app.data.database import Base


class ProductModificationRequestModel(Base):
    """Prosba kupujacego o zmiane produktu, rozpatrywana przez sprzedawce."""

    __tablename__ = "product_modification_requests"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    buyer_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    seller_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    request_details = Column(Text, nullable=False)
    status = Column(String(50), nullable=False, default="pending", server_default="pending")
    seller_response = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (Index("idx_modification_requests_product", "product_id"),)
