"""Tag normalization and global tag upsert.

Project drafts carry tag ids exactly as the user typed them; only after a
draft passes validation are its tags mapped into the shared tag namespace
here, so validating a draft for form feedback never creates a global tag.
"""

import logging
import re

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.db.models.tag import TagRow
from projecthub.errors.exceptions import ValidationError
from projecthub.models.tag import MAX_TAG_LENGTH, NormalizedTag
from projecthub.repositories.tag_repo import TagRepository

logger = logging.getLogger(__name__)

_DISALLOWED_TAG_CHARS = re.compile(r"[^a-z0-9_-]")


def normalize_tag(raw: str) -> str:
    """Lowercase, trim, replace characters outside ``[a-z0-9_-]`` with ``-``, truncate."""
    return _DISALLOWED_TAG_CHARS.sub("-", raw.lower().strip())[:MAX_TAG_LENGTH]


class TagService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = TagRepository(session)

    async def upsert(self, tag_id: str, display: str, created_by: str | None = None) -> TagRow:
        """Return the global tag for ``tag_id``, creating it if absent.

        New tags are never categories and start with a usage count of 0. The
        existence check and the insert share one savepoint; if a concurrent
        request inserts the same id first, the primary key rejects ours and
        the winner's row is returned instead.
        """
        normalized = normalize_tag(tag_id)
        if not normalized:
            raise ValidationError("Invalid tag name.", details={"id": tag_id})

        existing = await self.repo.get(normalized)
        if existing is not None:
            return existing

        label = display.strip()[:MAX_TAG_LENGTH] or normalized
        try:
            async with self.session.begin_nested():
                row = await self.repo.create(
                    id=normalized,
                    display=label,
                    is_category=False,
                    usage_count=0,
                    created_by=created_by,
                )
        except IntegrityError:
            logger.info("Tag '%s' created concurrently, using existing record", normalized)
            row = await self.repo.get(normalized)
            if row is None:
                raise
            return row

        logger.info("Created tag '%s'", normalized)
        return row

    async def normalize_project_tags(
        self, tags: list[NormalizedTag], created_by: str | None = None
    ) -> list[NormalizedTag]:
        """Map validated project tags onto global tag ids, keeping first occurrences in order."""
        seen: set[str] = set()
        result = []
        for tag in tags:
            row = await self.upsert(tag.id, tag.display, created_by=created_by)
            if row.id in seen:
                continue
            seen.add(row.id)
            result.append(NormalizedTag(id=row.id, display=tag.display, role=tag.role))
        return result

    async def record_usage(self, tag_ids: list[str]) -> None:
        await self.repo.increment_usage(tag_ids)
