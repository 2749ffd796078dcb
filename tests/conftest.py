from __future__ import annotations

import copy

import pytest

PROFILE_TYPE = "com.linkedin.voyager.dash.identity.profile.Profile"
MINI_PROFILE_TYPE = "com.linkedin.voyager.identity.shared.MiniProfile"
COLLECTION_TYPE = "com.linkedin.restli.common.CollectionResponse"
EDUCATION_TYPE = "com.linkedin.voyager.dash.identity.profile.Education"
POSITION_GROUP_TYPE = "com.linkedin.voyager.dash.identity.profile.PositionGroup"
POSITION_TYPE = "com.linkedin.voyager.dash.identity.profile.Position"
SKILL_TYPE = "com.linkedin.voyager.dash.identity.profile.Skill"
LANGUAGE_TYPE = "com.linkedin.voyager.dash.identity.profile.Language"

PROFILE_URN = "urn:li:fsd_profile:ACoAAA123"


def _collection(urn: str, members: list[str]) -> dict:
    return {"$type": COLLECTION_TYPE, "entityUrn": urn, "*elements": members}


_PROFILE_RESPONSE = {
    "data": {"*elements": [PROFILE_URN]},
    "included": [
        {
            "$type": PROFILE_TYPE,
            "entityUrn": PROFILE_URN,
            "firstName": "Ada",
            "lastName": "Lovelace",
            "summary": "Writes programs for engines that do not exist yet.",
            "publicIdentifier": "ada-lovelace",
            "profilePicture": {
                "displayImageReference": {
                    "vectorImage": {
                        "rootUrl": "https://media.licdn.com/dms/image/C4E03/",
                        "artifacts": [
                            {"width": 100, "height": 100, "fileIdentifyingUrlPathSegment": "100_100/ada.jpg"},
                            {"width": 400, "height": 400, "fileIdentifyingUrlPathSegment": "400_400/ada.jpg"},
                        ],
                    }
                }
            },
            "*profileEducations": "urn:li:collectionResponse:educations",
            "*profilePositionGroups": "urn:li:collectionResponse:groups",
            "*profileSkills": "urn:li:collectionResponse:skills",
            "*profileLanguages": "urn:li:collectionResponse:languages",
        },
        _collection(
            "urn:li:collectionResponse:educations",
            ["urn:li:fsd_profileEducation:(ACoAAA123,2)", "urn:li:fsd_profileEducation:(ACoAAA123,1)"],
        ),
        {
            "$type": EDUCATION_TYPE,
            "entityUrn": "urn:li:fsd_profileEducation:(ACoAAA123,1)",
            "schoolName": "Home Tutoring",
            "fieldOfStudy": "Mathematics",
            "dateRange": {"start": {"year": 1828}},
        },
        {
            "$type": EDUCATION_TYPE,
            "entityUrn": "urn:li:fsd_profileEducation:(ACoAAA123,2)",
            "schoolName": "University of London",
            "fieldOfStudy": "Analysis",
            "degreeName": "Correspondence course",
            "grade": "Distinction",
            "description": "Studied under Augustus De Morgan.",
            "dateRange": {"start": {"year": 1840, "month": 7}, "end": {"year": 1842, "month": 5}},
        },
        _collection(
            "urn:li:collectionResponse:groups",
            ["urn:li:fsd_profilePositionGroup:(ACoAAA123,10)", "urn:li:fsd_profilePositionGroup:(ACoAAA123,20)"],
        ),
        {
            "$type": POSITION_GROUP_TYPE,
            "entityUrn": "urn:li:fsd_profilePositionGroup:(ACoAAA123,10)",
            "companyName": "Analytical Engine Ltd",
            "*profilePositionInPositionGroup": "urn:li:collectionResponse:group-10",
        },
        {
            "$type": POSITION_GROUP_TYPE,
            "entityUrn": "urn:li:fsd_profilePositionGroup:(ACoAAA123,20)",
            "companyName": "Royal Society",
            "*profilePositionInPositionGroup": "urn:li:collectionResponse:group-20",
        },
        _collection(
            "urn:li:collectionResponse:group-10",
            ["urn:li:fsd_profilePosition:(ACoAAA123,11)", "urn:li:fsd_profilePosition:(ACoAAA123,12)"],
        ),
        _collection("urn:li:collectionResponse:group-20", ["urn:li:fsd_profilePosition:(ACoAAA123,21)"]),
        {
            "$type": POSITION_TYPE,
            "entityUrn": "urn:li:fsd_profilePosition:(ACoAAA123,11)",
            "title": "Lead Programmer",
            "companyName": "Analytical Engine Ltd",
            "description": "Published the first algorithm for the engine.",
            "dateRange": {"start": {"year": 1843, "month": 1}},
        },
        {
            "$type": POSITION_TYPE,
            "entityUrn": "urn:li:fsd_profilePosition:(ACoAAA123,12)",
            "title": "Translator",
            "companyName": "Analytical Engine Ltd",
            "dateRange": {"start": {"year": 1842, "month": 10}, "end": {"year": 1843, "month": 1}},
        },
        {
            "$type": POSITION_TYPE,
            "entityUrn": "urn:li:fsd_profilePosition:(ACoAAA123,21)",
            "title": "Correspondent",
            "companyName": "Royal Society",
        },
        _collection(
            "urn:li:collectionResponse:skills",
            ["urn:li:fsd_skill:(ACoAAA123,1)", "urn:li:fsd_skill:(ACoAAA123,2)", "urn:li:fsd_skill:(ACoAAA123,3)"],
        ),
        {"$type": SKILL_TYPE, "entityUrn": "urn:li:fsd_skill:(ACoAAA123,1)", "name": "Mathematics"},
        {"$type": SKILL_TYPE, "entityUrn": "urn:li:fsd_skill:(ACoAAA123,2)", "name": "Programming"},
        {"$type": SKILL_TYPE, "entityUrn": "urn:li:fsd_skill:(ACoAAA123,3)", "name": "Translation"},
        _collection("urn:li:collectionResponse:languages", ["urn:li:fsd_language:(ACoAAA123,1)"]),
        {
            "$type": LANGUAGE_TYPE,
            "entityUrn": "urn:li:fsd_language:(ACoAAA123,1)",
            "name": "French",
            "proficiency": "FULL_PROFESSIONAL",
        },
        {
            "$type": MINI_PROFILE_TYPE,
            "entityUrn": "urn:li:fs_miniProfile:ACoAAA123",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "publicIdentifier": "ada-lovelace",
        },
    ],
}


@pytest.fixture
def profile_response() -> dict:
    """Full profile response with every section populated."""
    return copy.deepcopy(_PROFILE_RESPONSE)


def mini_profile(profile_id: str, public_identifier: str, **extra) -> dict:
    record = {
        "$type": MINI_PROFILE_TYPE,
        "entityUrn": f"urn:li:fs_miniProfile:{profile_id}",
        "publicIdentifier": public_identifier,
    }
    record.update(extra)
    return record


@pytest.fixture
def make_mini_profile():
    return mini_profile


def find_entity(response: dict, urn: str) -> dict:
    return next(item for item in response["included"] if item.get("entityUrn") == urn)


@pytest.fixture
def entity():
    """Return a callable that finds an included record by URN."""
    return find_entity
