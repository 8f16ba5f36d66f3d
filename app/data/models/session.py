from sqlalchemy import Column, String, DateTime, JSON, Index

from app.data.database import Base


class SessionModel(Base):
    # tabela warstwy sesji http, nie logika domeny
    __tablename__ = "session"

    sid = Column(String, primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime, nullable=False)

    __table_args__ = (Index("IDX_session_expire", "expire"),)
