"""Tests for the project validation engine (create and edit validators)."""

import pytest

from projecthub.models.enums import MemberRole, TagRole
from projecthub.validation import (
    ErrorCode,
    ProjectDraft,
    ValidationFailure,
    ValidationSuccess,
    validate_for_create,
    validate_for_edit,
)

TOO_MANY_CATEGORIES = "A project can have a maximum of 3 category tags."
BAD_GOVERNANCE_SUM = "The sum of all governance shares must be exactly 100%."


def _tag(tag_id: str, role: str = "category", display: str | None = None) -> dict:
    return {"id": tag_id, "display": display if display is not None else tag_id.upper(), "role": role}


def make_draft(**overrides) -> ProjectDraft:
    data = {
        "name": "Foo",
        "tagline": "T",
        "description": "D",
        "contributionNeeds": "C",
        "tags": [],
        "team": [],
    }
    data.update(overrides)
    return ProjectDraft.model_validate(data)


def _pairs(result) -> list[tuple[str, str]]:
    return [(error.path, error.message) for error in result.errors]


def _codes_at(result, path: str) -> list[ErrorCode]:
    return [error.code for error in result.errors if error.path == path]


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def test_four_category_tags_rejected_with_single_tags_error():
    draft = make_draft(tags=[_tag("a"), _tag("b"), _tag("c"), _tag("d")])

    result = validate_for_create(draft)

    assert isinstance(result, ValidationFailure)
    assert result.ok is False
    assert _pairs(result) == [("tags", TOO_MANY_CATEGORIES)]
    assert result.errors[0].code == ErrorCode.TOO_MANY_CATEGORY_TAGS


def test_edit_with_governance_summing_to_90_rejected():
    draft = make_draft(
        id="p1",
        tags=[_tag("a"), _tag("b"), _tag("c")],
        governance={"contributorsShare": 50, "communityShare": 30, "sustainabilityShare": 10},
    )

    result = validate_for_edit(draft)

    assert result.ok is False
    assert ("governance", BAD_GOVERNANCE_SUM) in _pairs(result)
    assert _codes_at(result, "governance") == [ErrorCode.GOVERNANCE_SUM_INVALID]


def test_valid_create_draft_returns_trimmed_value():
    draft = make_draft(
        name="  Foo  ",
        tagline=" T ",
        description="\tD\n",
        contributionNeeds=" C ",
        photoUrl="  https://example.com/p.png ",
        tags=[_tag(" Mixed Id ", role="relational", display="  Label  ")],
        team=[{"userId": " usr_1 ", "role": "lead"}],
    )

    result = validate_for_create(draft)

    assert isinstance(result, ValidationSuccess)
    value = result.value
    assert (value.name, value.tagline, value.description, value.contribution_needs) == ("Foo", "T", "D", "C")
    assert value.photo_url == "https://example.com/p.png"
    assert value.tags[0].id == " Mixed Id "
    assert value.tags[0].display == "Label"
    assert value.tags[0].role is TagRole.RELATIONAL
    assert value.team[0].user_id == "usr_1"
    assert value.team[0].role is MemberRole.LEAD
    assert value.governance is None
    assert value.id is None


# ---------------------------------------------------------------------------
# Cross-field properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("count", [0, 1, 2, 3])
def test_up_to_three_category_tags_allowed(count):
    tags = [_tag(f"c{i}") for i in range(count)] + [_tag("r1", role="relational"), _tag("x", role="custom")]

    result = validate_for_create(make_draft(tags=tags))

    assert result.ok is True


def test_four_category_tags_reported_even_when_other_fields_invalid():
    draft = make_draft(name="", photoUrl="not a url", tags=[_tag("a"), _tag("b"), _tag("c"), _tag("d")])

    result = validate_for_create(draft)

    assert result.ok is False
    assert _codes_at(result, "tags") == [ErrorCode.TOO_MANY_CATEGORY_TAGS]
    assert _codes_at(result, "name") == [ErrorCode.REQUIRED_FIELD_EMPTY]
    assert _codes_at(result, "photoUrl") == [ErrorCode.INVALID_URL]


def test_category_limit_applies_to_edit_as_well():
    draft = make_draft(id="p1", tags=[_tag("a"), _tag("b"), _tag("c"), _tag("d")])

    result = validate_for_edit(draft)

    assert _pairs(result) == [("tags", TOO_MANY_CATEGORIES)]


@pytest.mark.parametrize(
    "shares",
    [(40, 30, 30), (100, 0, 0), (34, 33, 33)],
)
def test_governance_summing_to_100_accepted(shares):
    contributors, community, sustainability = shares
    draft = make_draft(
        id="p1",
        governance={
            "contributorsShare": contributors,
            "communityShare": community,
            "sustainabilityShare": sustainability,
        },
    )

    result = validate_for_edit(draft)

    assert result.ok is True
    assert result.value.governance.total() == 100


@pytest.mark.parametrize(
    "shares",
    [(40, 30, 20), (50, 50, 1), (0, 0, 0)],
)
def test_governance_not_summing_to_100_rejected(shares):
    contributors, community, sustainability = shares
    draft = make_draft(
        id="p1",
        governance={
            "contributorsShare": contributors,
            "communityShare": community,
            "sustainabilityShare": sustainability,
        },
    )

    result = validate_for_edit(draft)

    assert _pairs(result) == [("governance", BAD_GOVERNANCE_SUM)]


def test_absent_governance_is_not_an_error_on_edit():
    result = validate_for_edit(make_draft(id="p1"))

    assert result.ok is True
    assert result.value.governance is None
    assert result.value.id == "p1"


def test_create_ignores_governance_and_id():
    draft = make_draft(
        id="p1",
        governance={"contributorsShare": 10, "communityShare": 10, "sustainabilityShare": 10},
    )

    result = validate_for_create(draft)

    assert result.ok is True
    assert result.value.governance is None
    assert result.value.id is None


def test_both_cross_field_errors_reported_together():
    draft = make_draft(
        id="p1",
        tags=[_tag("a"), _tag("b"), _tag("c"), _tag("d")],
        governance={"contributorsShare": 40, "communityShare": 30, "sustainabilityShare": 20},
    )

    result = validate_for_edit(draft)

    assert _pairs(result) == [("tags", TOO_MANY_CATEGORIES), ("governance", BAD_GOVERNANCE_SUM)]


# ---------------------------------------------------------------------------
# Structural checks
# ---------------------------------------------------------------------------

def test_empty_name_reported_alongside_other_structural_errors():
    draft = make_draft(name="", tagline="   ", contributionNeeds="")

    result = validate_for_create(draft)

    assert result.ok is False
    assert _codes_at(result, "name") == [ErrorCode.REQUIRED_FIELD_EMPTY]
    assert _codes_at(result, "tagline") == [ErrorCode.REQUIRED_FIELD_EMPTY]
    assert _codes_at(result, "contributionNeeds") == [ErrorCode.REQUIRED_FIELD_EMPTY]
    assert ("name", "Project name is required.") in _pairs(result)


@pytest.mark.parametrize("photo_url", [None, "", "   ", "https://cdn.example.com/a.png", "http://localhost:3000/x"])
def test_photo_url_accepts_empty_or_absolute(photo_url):
    result = validate_for_create(make_draft(photoUrl=photo_url))

    assert result.ok is True
    if not (photo_url or "").strip():
        assert result.value.photo_url is None


@pytest.mark.parametrize("photo_url", ["not a url", "example.com/image.png", "/relative/path.png"])
def test_photo_url_rejects_malformed(photo_url):
    result = validate_for_create(make_draft(photoUrl=photo_url))

    assert result.ok is False
    assert _codes_at(result, "photoUrl") == [ErrorCode.INVALID_URL]


def test_tag_fields_checked_for_length_and_emptiness():
    draft = make_draft(
        tags=[
            _tag("x" * 36, role="custom", display="ok"),
            _tag("", role="custom", display="ok"),
            _tag("fine", role="custom", display="y" * 36),
            _tag("fine2", role="custom", display="  "),
        ]
    )

    result = validate_for_create(draft)

    assert _codes_at(result, "tags.0.id") == [ErrorCode.FIELD_TOO_LONG]
    assert _codes_at(result, "tags.1.id") == [ErrorCode.REQUIRED_FIELD_EMPTY]
    assert _codes_at(result, "tags.2.display") == [ErrorCode.FIELD_TOO_LONG]
    assert _codes_at(result, "tags.3.display") == [ErrorCode.REQUIRED_FIELD_EMPTY]


def test_tag_of_exactly_35_characters_accepted():
    result = validate_for_create(make_draft(tags=[_tag("a" * 35, role="custom", display="b" * 35)]))

    assert result.ok is True


def test_unknown_roles_reported_as_invalid_enum_values():
    draft = make_draft(
        tags=[_tag("a", role="topic")],
        team=[{"userId": "usr_1", "role": "owner"}, {"userId": "usr_2", "role": "contributor"}],
    )

    result = validate_for_create(draft)

    assert _codes_at(result, "tags.0.role") == [ErrorCode.INVALID_ENUM_VALUE]
    assert _codes_at(result, "team.0.role") == [ErrorCode.INVALID_ENUM_VALUE]
    assert _codes_at(result, "team.1.role") == []


@pytest.mark.parametrize("project_id", [None, "", "  "])
def test_edit_requires_id(project_id):
    result = validate_for_edit(make_draft(id=project_id))

    assert result.ok is False
    assert _pairs(result) == [("id", "Project id is required.")]


# ---------------------------------------------------------------------------
# Purity
# ---------------------------------------------------------------------------

def test_validation_is_idempotent_and_does_not_mutate_draft():
    draft = make_draft(
        name="  Foo ",
        tags=[_tag("a"), _tag("b"), _tag("c"), _tag("d")],
        governance={"contributorsShare": 40, "communityShare": 30, "sustainabilityShare": 20},
        id="p1",
    )
    before = draft.model_dump()

    first = validate_for_edit(draft)
    second = validate_for_edit(draft)

    assert first == second
    assert draft.model_dump() == before


def test_success_result_serializes_with_camel_case_keys():
    result = validate_for_create(make_draft(contributionNeeds="  Designers "))

    body = result.to_api()

    assert body["ok"] is True
    assert body["value"]["contributionNeeds"] == "Designers"
    assert "photoUrl" not in body["value"]


# ---------------------------------------------------------------------------
# Team members, timeline and share ranges
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("user_id", ["", "   "])
def test_blank_member_user_id_rejected(user_id):
    draft = make_draft(team=[{"userId": "usr_1", "role": "lead"}, {"userId": user_id, "role": "contributor"}])

    result = validate_for_create(draft)

    assert result.ok is False
    assert _pairs(result) == [("team.1.userId", "Member user id is required.")]
    assert _codes_at(result, "team.1.userId") == [ErrorCode.REQUIRED_FIELD_EMPTY]


def test_edit_timeline_blank_rejected_and_trimmed_when_given():
    blank = validate_for_edit(make_draft(id="p1", timeline="  "))
    assert _pairs(blank) == [("timeline", "Timeline is required.")]

    result = validate_for_edit(make_draft(id="p1", timeline=" Q3 2025 "))
    assert result.value.timeline == "Q3 2025"

    assert validate_for_edit(make_draft(id="p1")).value.timeline is None


def test_create_ignores_timeline():
    result = validate_for_create(make_draft(timeline=""))

    assert result.ok is True
    assert result.value.timeline is None


def test_negative_share_rejected_even_when_total_is_100():
    draft = make_draft(
        id="p1",
        governance={"contributorsShare": 150, "communityShare": -50, "sustainabilityShare": 0},
    )

    result = validate_for_edit(draft)

    assert result.ok is False
    assert _codes_at(result, "governance.contributorsShare") == [ErrorCode.SHARE_OUT_OF_RANGE]
    assert _codes_at(result, "governance.communityShare") == [ErrorCode.SHARE_OUT_OF_RANGE]
    assert _codes_at(result, "governance.sustainabilityShare") == []
    assert _codes_at(result, "governance") == []
