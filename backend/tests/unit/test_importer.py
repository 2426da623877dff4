# backend/tests/unit/test_importer.py
from unittest.mock import MagicMock

import pytest

from gmassist.models.region import Region
from gmassist.models.scenario import Scenario
from gmassist.models.user import User
from gmassist.services.exceptions import ImportValidationError
from gmassist.services.importer import ScenarioImporter


@pytest.fixture
def user(db_session):
    user = User(username="gamemaster", hashed_password="not-a-real-hash")
    db_session.add(user)
    db_session.commit()
    return user


def importer_for(db_session, user, scenario_rows, region_rows):
    mapper = MagicMock()
    mapper.parse.return_value = (scenario_rows, region_rows)
    return ScenarioImporter(db_session, user, mapper=mapper)


def test_import_creates_rows_with_new_ids(db_session, user):
    importer = importer_for(
        db_session,
        user,
        [(2, {"id": "s1", "title": "Salt Roads", "mainIdea": "Caravans fight over salt"})],
        [(2, {"id": "r1", "scenarioId": "s1", "name": "Salt Mine", "type": "industrial"})],
    )

    counts = importer.import_workbook(b"ignored")

    assert counts == {"scenarios": 1, "regions": 1}
    scenario = db_session.query(Scenario).one()
    region = db_session.query(Region).one()
    assert scenario.user_id == user.id
    assert region.scenario_id == scenario.id
    assert region.threat_level == 1


def test_import_ignores_server_columns(db_session, user):
    importer = importer_for(
        db_session,
        user,
        [(2, {
            "title": "Salt Roads",
            "mainIdea": "Caravans fight over salt",
            "userId": "someone-else",
            "createdAt": "yesterday",
        })],
        [],
    )

    importer.import_workbook(b"ignored")

    assert db_session.query(Scenario).one().user_id == user.id


def test_import_validates_every_row_before_writing(db_session, user):
    importer = importer_for(
        db_session,
        user,
        [
            (2, {"title": "Salt Roads", "mainIdea": "Caravans fight over salt"}),
            (3, {"title": "", "mainIdea": "Caravans fight over salt"}),
        ],
        [(2, {"name": "Orphan", "type": "city"})],
    )

    with pytest.raises(ImportValidationError) as exc_info:
        importer.import_workbook(b"ignored")

    assert exc_info.value.errors == [
        "Scenarios row 3: title: String should have at least 1 character",
        "Regions row 2: scenarioId: Field required",
    ]
    assert db_session.query(Scenario).count() == 0


def test_import_rejects_scenario_of_other_user(db_session, user):
    other = User(username="intruder", hashed_password="not-a-real-hash")
    db_session.add(other)
    db_session.flush()
    foreign = Scenario(user_id=other.id, title="Theirs", main_idea="Not yours to extend")
    db_session.add(foreign)
    db_session.commit()

    importer = importer_for(
        db_session,
        user,
        [],
        [(4, {"scenarioId": str(foreign.id), "name": "Smuggled", "type": "city"})],
    )

    with pytest.raises(ImportValidationError) as exc_info:
        importer.import_workbook(b"ignored")

    assert exc_info.value.errors == [
        f"Regions row 4: scenarioId: unknown scenario '{foreign.id}'"
    ]


def test_error_details_are_truncated():
    error = ImportValidationError([f"Scenarios row {n}: title: Field required" for n in range(2, 10)])

    assert len(error.details) == 6
    assert error.details[-1] == "... and 3 more errors"
    assert str(error) == "8 row(s) failed validation"


def test_error_details_without_truncation():
    error = ImportValidationError(["Regions row 2: type: Field required"])

    assert error.details == ["Regions row 2: type: Field required"]
