from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON

from .base import Base


class Document(Base):
    __tablename__ = "documents"

    name = Column(String, primary_key=True, index=True)
    body = Column(JSON, nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
