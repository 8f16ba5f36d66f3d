from sqlalchemy import Column, Integer, Text, Numeric, DateTime, ForeignKey, CheckConstraint, Index, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base
from app.data.types import TextList, JsonDocument


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    seller_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric, nullable=False)
    quantity_available = Column(Integer, nullable=False)

    # kolejnosc url-i = kolejnosc wyswietlania
    images = Column(TextList, nullable=False)
    # url -> base64, podglad bez ponownego pobierania
    image_binaries = Column(JsonDocument, default=dict, server_default=text("'{}'"))

    category = Column(Text, nullable=False)
    color_options = Column(TextList, nullable=True)
    variants = Column(TextList, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    seller = relationship("UserModel", back_populates="products")
    reviews = relationship(
        "ReviewModel",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("quantity_available >= 0", name="ck_products_quantity_non_negative"),
        Index("idx_products_seller", "seller_id"),
    )
