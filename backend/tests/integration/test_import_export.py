# backend/tests/integration/test_import_export.py
import io
import zipfile

import pytest
from openpyxl import Workbook, load_workbook

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def build_workbook(scenario_rows, region_rows, scenario_headers=None, region_headers=None):
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Scenarios"
    sheet.append(scenario_headers or ["id", "title", "mainIdea", "keyThemes", "status"])
    for row in scenario_rows:
        sheet.append(row)

    if region_rows is not None:
        regions = workbook.create_sheet("Regions")
        regions.append(region_headers or ["id", "scenarioId", "name", "type", "threatLevel", "tradeRoutes"])
        for row in region_rows:
            regions.append(row)

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def upload(client, headers, content):
    return client.post(
        "/api/scenarios/import",
        headers=headers,
        files={"file": ("scenarios.xlsx", content, XLSX)},
    )


def test_export_workbook(client, auth_headers):
    client.post(
        "/api/scenarios",
        headers=auth_headers,
        json={
            "title": "Trade Wars",
            "mainIdea": "Conflict over water rights in a desert city",
            "keyThemes": ["water", "trade"],
        },
    )

    response = client.get("/api/scenarios/export", headers=auth_headers)

    assert response.status_code == 200
    assert response.headers["content-type"] == XLSX
    assert "attachment; filename=scenarios-" in response.headers["content-disposition"]

    workbook = load_workbook(io.BytesIO(response.content))
    assert workbook.sheetnames == ["Scenarios", "Regions"]
    scenario_rows = list(workbook["Scenarios"].iter_rows(values_only=True))
    assert scenario_rows[0][:3] == ("id", "title", "mainIdea")
    assert scenario_rows[1][1] == "Trade Wars"
    assert scenario_rows[1][5] == "water, trade"
    assert len(list(workbook["Regions"].iter_rows())) == 11


def test_export_for_other_user_is_forbidden(client, auth_headers, other_headers):
    other = client.get("/api/auth/me", headers=other_headers).json()

    response = client.get(
        "/api/scenarios/export", headers=auth_headers, params={"userId": other["id"]}
    )

    assert response.status_code == 403
    assert response.json()["error"] == "forbidden"


def test_export_then_import_copies_scenarios(client, auth_headers):
    original = client.post(
        "/api/scenarios",
        headers=auth_headers,
        json={
            "title": "Trade Wars",
            "mainIdea": "Conflict over water rights in a desert city",
            "keyThemes": ["water", "trade"],
        },
    ).json()
    exported = client.get("/api/scenarios/export", headers=auth_headers).content

    response = upload(client, auth_headers, exported)

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["imported"] == {"scenarios": 1, "regions": 10}

    scenarios = client.get("/api/scenarios", headers=auth_headers).json()
    assert len(scenarios) == 2
    copy = next(s for s in scenarios if s["id"] != original["id"])
    assert copy["title"] == "Trade Wars"
    assert copy["keyThemes"] == ["water", "trade"]

    regions = client.get(
        "/api/regions", headers=auth_headers, params={"scenarioId": copy["id"]}
    ).json()
    assert len(regions) == 10


def test_import_into_other_account(client, auth_headers, other_headers):
    client.post(
        "/api/scenarios",
        headers=auth_headers,
        json={"title": "Trade Wars", "mainIdea": "Conflict over water rights in a desert city"},
    )
    exported = client.get("/api/scenarios/export", headers=auth_headers).content

    response = upload(client, other_headers, exported)

    assert response.status_code == 200
    other_scenarios = client.get("/api/scenarios", headers=other_headers).json()
    assert [s["title"] for s in other_scenarios] == ["Trade Wars"]


def test_import_matches_headers_loosely(client, auth_headers):
    content = build_workbook(
        [["Salt Roads", "Caravans fight over the last salt mine", "salt, caravans"]],
        [],
        scenario_headers=["Title", "Main Idea", "key_themes"],
    )

    response = upload(client, auth_headers, content)

    assert response.status_code == 200
    scenario = client.get("/api/scenarios", headers=auth_headers).json()[0]
    assert scenario["mainIdea"] == "Caravans fight over the last salt mine"
    assert scenario["keyThemes"] == ["salt", "caravans"]


def test_import_links_regions_and_trade_routes(client, auth_headers):
    content = build_workbook(
        [["s1", "Salt Roads", "Caravans fight over the last salt mine", None, "active"]],
        [
            ["r1", "s1", "Salt Mine", "industrial", 4, "r2"],
            ["r2", "s1", "Caravanserai", "trade_hub", 2, "r1"],
        ],
    )

    response = upload(client, auth_headers, content)

    assert response.status_code == 200
    assert response.json()["imported"] == {"scenarios": 1, "regions": 2}
    scenario = client.get("/api/scenarios", headers=auth_headers).json()[0]
    assert scenario["status"] == "active"
    regions = {
        r["name"]: r for r in client.get(
            "/api/regions", headers=auth_headers, params={"scenarioId": scenario["id"]}
        ).json()
    }
    assert regions["Salt Mine"]["tradeRoutes"] == [regions["Caravanserai"]["id"]]
    assert regions["Caravanserai"]["tradeRoutes"] == [regions["Salt Mine"]["id"]]


def test_import_region_into_existing_scenario(client, auth_headers, scenario):
    content = build_workbook(
        [],
        [[None, scenario["id"], "Salt Mine", "industrial", 4, None]],
    )

    response = upload(client, auth_headers, content)

    assert response.status_code == 200
    regions = client.get(
        "/api/regions", headers=auth_headers, params={"scenarioId": scenario["id"]}
    ).json()
    assert [r["name"] for r in regions] == ["Salt Mine"]


def test_import_all_or_nothing_commits_nothing_when_one_row_invalid(client, auth_headers):
    content = build_workbook(
        [
            ["s1", "Salt Roads", "Caravans fight over the last salt mine", None, "draft"],
            ["s2", "Broken", "too short", None, "draft"],
        ],
        [["r1", "s1", "Salt Mine", "industrial", 4, None]],
    )

    response = upload(client, auth_headers, content)

    assert response.status_code == 422
    data = response.json()
    assert data["success"] is False
    assert data["imported"] == {"scenarios": 0, "regions": 0}
    assert data["details"] == [
        "Scenarios row 3: mainIdea: String should have at least 10 characters"
    ]
    assert client.get("/api/scenarios", headers=auth_headers).json() == []


def test_import_reports_unknown_scenario_reference(client, auth_headers):
    content = build_workbook(
        [],
        [["r1", "missing", "Salt Mine", "industrial", 4, None]],
    )

    response = upload(client, auth_headers, content)

    assert response.status_code == 422
    assert response.json()["details"] == [
        "Regions row 2: scenarioId: unknown scenario 'missing'"
    ]


def test_import_reports_region_threat_level(client, auth_headers):
    content = build_workbook(
        [["s1", "Salt Roads", "Caravans fight over the last salt mine", None, "draft"]],
        [["r1", "s1", "Salt Mine", "industrial", 9, None]],
    )

    response = upload(client, auth_headers, content)

    assert response.status_code == 422
    assert response.json()["details"][0].startswith("Regions row 2: threatLevel:")


def test_import_truncates_error_details(client, auth_headers):
    content = build_workbook(
        [[f"s{i}", f"Scenario {i}", None, None, "draft"] for i in range(7)],
        [],
    )

    response = upload(client, auth_headers, content)

    assert response.status_code == 422
    details = response.json()["details"]
    assert len(details) == 6
    assert details[0] == "Scenarios row 2: mainIdea: Field required"
    assert details[-1] == "... and 2 more errors"


def test_import_rejects_unreadable_file(client, auth_headers):
    response = upload(client, auth_headers, b"this is not a workbook")

    assert response.status_code == 400
    assert response.json()["error"] == "bad_request"


def test_import_rejects_workbook_without_regions_sheet(client, auth_headers):
    content = build_workbook(
        [["s1", "Salt Roads", "Caravans fight over the last salt mine", None, "draft"]],
        None,
    )

    response = upload(client, auth_headers, content)

    assert response.status_code == 400
    assert response.json()["message"] == "Workbook is missing the 'Regions' sheet"


def test_export_then_import_keeps_text_starting_with_equals(client, auth_headers):
    client.post(
        "/api/scenarios?seedDefaults=false",
        headers=auth_headers,
        json={"title": "=Trade Wars", "mainIdea": "=Conflict over water rights in a desert city"},
    )
    exported = client.get("/api/scenarios/export", headers=auth_headers).content

    response = upload(client, auth_headers, exported)

    assert response.status_code == 200
    titles = [s["title"] for s in client.get("/api/scenarios", headers=auth_headers).json()]
    assert titles == ["=Trade Wars", "=Trade Wars"]
    cell = load_workbook(io.BytesIO(exported))["Scenarios"]["B2"]
    assert cell.data_type == "s"


def test_import_rejects_workbook_with_broken_sheet_xml(client, auth_headers):
    content = build_workbook(
        [["s1", "Salt Roads", "Caravans fight over the last salt mine", None, "draft"]],
        [],
    )
    broken = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(content)) as source, zipfile.ZipFile(broken, "w") as target:
        for item in source.infolist():
            data = source.read(item.filename)
            if item.filename == "xl/worksheets/sheet1.xml":
                data = b"<worksheet><sheetData><row"
            target.writestr(item, data)

    response = upload(client, auth_headers, broken.getvalue())

    assert response.status_code == 400
    assert response.json()["message"].startswith("Unable to read workbook")
    assert client.get("/api/scenarios", headers=auth_headers).json() == []
