"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from labelsheet.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Document(Base):
    """A JSON document stored under a slash separated collection path."""

    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    collection = Column(String(255), nullable=False, index=True)
    data = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
