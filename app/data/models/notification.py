from sqlalchemy import Column, Integer, ForeignKey, String, Text, Boolean, DateTime, Index, false
from sqlalchemy.sql import func

from app.data.database import Base
from app.data.types import JsonDocument


class NotificationModel(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(50), nullable=False)
    is_read = Column(Boolean, nullable=False, default=False, server_default=false())
    data = Column(JsonDocument, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (Index("idx_notifications_user", "user_id"),)
