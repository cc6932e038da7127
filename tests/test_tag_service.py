"""Tests for tag normalization and the global tag upsert."""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from projecthub.db.models.tag import TagRow
from projecthub.errors.exceptions import ValidationError
from projecthub.models.enums import TagRole
from projecthub.models.tag import NormalizedTag
from projecthub.services.tag_service import TagService, normalize_tag


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Python", "python"),
        ("  Machine Learning  ", "machine-learning"),
        ("C++ & Rust!", "c-----rust-"),
        ("under_score-dash", "under_score-dash"),
        ("Ünïcode", "-n-code"),
        ("x" * 50, "x" * 35),
        ("   ", ""),
    ],
)
def test_normalize_tag(raw, expected):
    assert normalize_tag(raw) == expected


def test_normalize_tag_is_stable():
    once = normalize_tag("Open Source Hardware")
    assert normalize_tag(once) == once


async def test_upsert_creates_new_tag(db_session):
    service = TagService(db_session)

    row = await service.upsert("Open Source", "Open Source", created_by="usr_alice")
    await db_session.commit()

    assert row.id == "open-source"
    assert row.display == "Open Source"
    assert row.is_category is False
    assert row.usage_count == 0
    assert row.created_by == "usr_alice"


async def test_upsert_returns_existing_tag_unchanged(db_session):
    db_session.add(TagRow(id="design", display="Design", is_category=True, usage_count=7))
    await db_session.commit()

    row = await TagService(db_session).upsert("DESIGN", "Something else", created_by="usr_bob")

    assert row.display == "Design"
    assert row.is_category is True
    assert row.usage_count == 7
    assert row.created_by is None


async def test_upsert_rejects_tag_that_normalizes_to_empty(db_session):
    with pytest.raises(ValidationError):
        await TagService(db_session).upsert("   ", "   ")


async def test_upsert_uses_concurrently_created_record(db_engine, db_session):
    """A lost insert race resolves to the winner's row instead of failing."""
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as other:
        other.add(TagRow(id="robotics", display="Robotics (first)", usage_count=2))
        await other.commit()

    service = TagService(db_session)
    real_get = service.repo.get
    calls = []

    async def stale_get(tag_id):
        calls.append(tag_id)
        if len(calls) == 1:
            return None  # existence check ran before the other insert landed
        return await real_get(tag_id)

    service.repo.get = stale_get

    row = await service.upsert("Robotics", "Robotics (second)")

    assert row.display == "Robotics (first)"
    assert row.usage_count == 2
    result = await db_session.execute(select(TagRow).where(TagRow.id == "robotics"))
    assert len(result.scalars().all()) == 1


async def test_normalize_project_tags_dedupes_and_keeps_order(db_session):
    tags = [
        NormalizedTag(id="Web Dev", display="Web Dev", role=TagRole.CATEGORY),
        NormalizedTag(id="AI", display="AI", role=TagRole.RELATIONAL),
        NormalizedTag(id="web dev", display="web dev again", role=TagRole.CUSTOM),
    ]

    result = await TagService(db_session).normalize_project_tags(tags, created_by="usr_alice")

    assert [(t.id, t.display, t.role) for t in result] == [
        ("web-dev", "Web Dev", TagRole.CATEGORY),
        ("ai", "AI", TagRole.RELATIONAL),
    ]


async def test_record_usage_increments_counts(db_session):
    service = TagService(db_session)
    await service.upsert("art", "Art")
    await service.upsert("music", "Music")

    await service.record_usage(["art", "music", "art"])
    await db_session.commit()
    db_session.expire_all()

    rows = {row.id: row.usage_count for row in (await db_session.execute(select(TagRow))).scalars()}
    assert rows == {"art": 1, "music": 1}
