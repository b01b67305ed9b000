from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func
from .database import Base


class Setting(Base):
    """Durable key/value entry. Each value is one full JSON snapshot."""
    __tablename__ = "settings"

    key = Column(String, primary_key=True, index=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
