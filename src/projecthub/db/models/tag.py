"""Global tag table, keyed by the normalized tag id."""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from projecthub.db.base import Base, TimestampMixin


class TagRow(Base, TimestampMixin):
    __tablename__ = "tags"

    id: Mapped[str] = mapped_column(String(35), primary_key=True)
    display: Mapped[str] = mapped_column(String(35), nullable=False)
    is_category: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    usage_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_by: Mapped[str | None] = mapped_column(String(128), nullable=True)
