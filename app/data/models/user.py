import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base


class UserRole(str, enum.Enum):
    BUYER = "buyer"
    SELLER = "seller"
    ADMIN = "admin"


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(Text, nullable=False, unique=True)
    username = Column(Text, nullable=False, unique=True)
    # hash liczony poza ta warstwa
    password = Column(Text, nullable=False)
    role = Column(
        Enum(UserRole, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.BUYER,
        server_default=UserRole.BUYER.value,
    )
    name = Column(Text, nullable=False)
    birthday = Column(DateTime, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    stripe_customer_id = Column(Text, nullable=True)
    google_id = Column(String, nullable=True)

    products = relationship(
        "ProductModel",
        back_populates="seller",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    orders = relationship(
        "OrderModel",
        back_populates="buyer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
