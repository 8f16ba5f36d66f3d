from sqlalchemy import Column, Integer, ForeignKey, Numeric, Text, CheckConstraint, Index
from sqlalchemy.orm import relationship

from app.data.database import Base


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)

    quantity = Column(Integer, nullable=False)
    # cena z chwili zakupu, nie z produktu
    unit_price = Column(Numeric, nullable=False)

    selected_color = Column(Text, nullable=True)
    selected_variant = Column(Text, nullable=True)

    order = relationship("OrderModel", back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
        CheckConstraint("unit_price >= 0", name="ck_order_items_unit_price_non_negative"),
        Index("idx_order_items_order", "order_id"),
    )
