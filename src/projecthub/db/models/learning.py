"""Learning path and per-user learning progress tables."""

from sqlalchemy import JSON, Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from projecthub.db.base import Base, TimestampMixin


class LearningPathRow(Base, TimestampMixin):
    __tablename__ = "learning_paths"

    path_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[str] = mapped_column(String(50), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    is_locked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    modules: Mapped[list] = mapped_column(JSON, nullable=False, default=list)


class LearningProgressRow(Base, TimestampMixin):
    __tablename__ = "learning_progress"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    path_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    completed_modules: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
