from sqlalchemy import String, Index, JSON
from sqlalchemy.orm import Mapped, mapped_column
from typing import Optional, Dict, Any
import enum

from .database import Base

class Category(str, enum.Enum):
    """Discriminator selecting the record type of a document in the shared collection."""
    POST = "post"
    ACTIVITY = "activity"
    JUNK_FOOD = "junkFood"

class Document(Base):
    """A single JSON document in the shared collection."""
    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    category: Mapped[str] = mapped_column(String(32), nullable=False)
    # YYYY-MM-DD; text order equals calendar order
    date: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    body: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    __table_args__ = (
        Index("ix_documents_category_date", "category", "date"),
    )
