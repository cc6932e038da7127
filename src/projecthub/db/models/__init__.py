"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from projecthub.db.models.project import ProjectRow
from projecthub.db.models.tag import TagRow
from projecthub.db.models.user import UserRow
from projecthub.db.models.activity import ActivityRow
from projecthub.db.models.learning import LearningPathRow, LearningProgressRow

__all__ = [
    "ProjectRow",
    "TagRow",
    "UserRow",
    "ActivityRow",
    "LearningPathRow",
    "LearningProgressRow",
]
