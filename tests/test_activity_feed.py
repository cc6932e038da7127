"""Activity feed hydration tests."""

from datetime import datetime, timezone

import pytest

from projecthub.config import settings
from projecthub.models.activity import Activity
from projecthub.models.enums import ActivityType
from projecthub.models.project import Project
from projecthub.models.user import User
from projecthub.services.activity_feed import hydrate_activity_item, record_activity, to_safe_datetime
from projecthub.services.session_service import issue_session_token

USERS = {"usr_alice": User(id="usr_alice", name="Alice")}
PROJECTS = {
    "proj_1": Project(
        id="proj_1",
        name="Repair Cafe",
        tagline="Fix things together",
        description="Monthly repair meetups.",
        contribution_needs="Electricians",
        status="published",
        owner_id="usr_alice",
    )
}


def _activity(**overrides) -> Activity:
    data = {
        "id": "act_1",
        "actor_id": "usr_alice",
        "type": ActivityType.PROJECT_CREATED,
        "project_id": "proj_1",
        "timestamp": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return Activity(**data)


def test_hydrate_resolves_actor_and_project():
    item = hydrate_activity_item(_activity(), USERS, PROJECTS)

    assert item.actor.name == "Alice"
    assert item.project.name == "Repair Cafe"
    assert item.timestamp == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_hydrate_unknown_actor_is_dropped():
    assert hydrate_activity_item(_activity(actor_id="usr_gone"), USERS, PROJECTS) is None


def test_hydrate_missing_project_is_optional():
    item = hydrate_activity_item(_activity(project_id="proj_gone"), USERS, PROJECTS)
    assert item is not None
    assert item.project is None

    item = hydrate_activity_item(_activity(project_id=None), USERS, PROJECTS)
    assert item.project is None


@pytest.mark.parametrize(
    "raw",
    [
        "2024-05-01T12:00:00Z",
        "2024-05-01T12:00:00+00:00",
        "2024-05-01T12:00:00",
        1714564800,
        1714564800.0,
        datetime(2024, 5, 1, 12, 0),
    ],
)
def test_to_safe_datetime_accepts_common_shapes(raw):
    assert to_safe_datetime(raw) == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", [None, "yesterday", {"seconds": 1}, True])
def test_to_safe_datetime_falls_back_to_now(raw):
    before = datetime.now(timezone.utc)
    value = to_safe_datetime(raw)
    assert before <= value <= datetime.now(timezone.utc)


@pytest.mark.asyncio
async def test_feed_lists_own_activity_newest_first(client, alice_headers, bob_headers):
    payload = {
        "name": "Repair Cafe",
        "tagline": "Fix things together",
        "description": "Monthly repair meetups.",
        "contributionNeeds": "Electricians",
    }
    created = await client.post("/api/v1/projects", json=payload, headers=alice_headers)
    project_id = created.json()["id"]
    await client.post(f"/api/v1/projects/{project_id}/roles/apply", json={"role": "contributor"}, headers=bob_headers)
    await client.post(
        f"/api/v1/projects/{project_id}/roles/approve", json={"userId": "usr_bob"}, headers=alice_headers
    )

    response = await client.get("/api/v1/activity", headers=alice_headers)

    assert response.status_code == 200
    feed = response.json()["activity"]
    assert [item["type"] for item in feed] == ["role-approved", "project-created"]
    assert feed[0]["actor"]["name"] == "Alice"
    assert feed[0]["project"]["id"] == project_id
    assert feed[0]["context"] == {"userId": "usr_bob", "role": "contributor"}

    bob_feed = (await client.get("/api/v1/activity", headers=bob_headers)).json()["activity"]
    assert [item["type"] for item in bob_feed] == ["role-applied"]


@pytest.mark.asyncio
async def test_feed_drops_items_from_unknown_actors(client, db_session):
    await record_activity(db_session, "usr_ghost", ActivityType.PROJECT_CREATED)
    await db_session.commit()

    headers = {"Cookie": f"{settings.session_cookie_name}={issue_session_token('usr_ghost')}"}
    response = await client.get("/api/v1/activity", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"activity": []}
