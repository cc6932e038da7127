"""Tag models: the per-project tag reference and the global tag record."""

from datetime import datetime

from projecthub.models.common import CamelModel
from projecthub.models.enums import TagRole

MAX_TAG_LENGTH = 35
MAX_CATEGORY_TAGS = 3


class ProjectTag(CamelModel):
    """A tag as submitted with a project draft.

    ``role`` is kept as a plain string so that unknown roles reach the
    validation engine and are reported as field errors.
    """

    id: str
    display: str
    role: str = TagRole.CUSTOM.value


class NormalizedTag(CamelModel):
    id: str
    display: str
    role: TagRole


class TagUpsert(CamelModel):
    id: str
    display: str


class GlobalTag(CamelModel):
    """A tag record in the shared tag namespace."""

    id: str
    display: str
    is_category: bool = False
    usage_count: int = 0
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
