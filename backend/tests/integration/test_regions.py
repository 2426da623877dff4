# backend/tests/integration/test_regions.py
import pytest


@pytest.fixture
def region(client, auth_headers, scenario):
    response = client.post(
        "/api/regions",
        headers=auth_headers,
        json={
            "scenarioId": scenario["id"],
            "name": "Salt Flats",
            "type": "wasteland",
            "resources": ["salt"],
            "threatLevel": 3,
        },
    )
    return response.json()


def test_create_region(client, auth_headers, scenario, region):
    assert region["scenarioId"] == scenario["id"]
    assert region["name"] == "Salt Flats"
    assert region["type"] == "wasteland"
    assert region["threatLevel"] == 3
    assert region["politicalStance"] is None


def test_create_region_defaults_threat_level(client, auth_headers, scenario):
    response = client.post(
        "/api/regions",
        headers=auth_headers,
        json={"scenarioId": scenario["id"], "name": "Crossroads", "type": "trade_hub"},
    )

    assert response.status_code == 201
    assert response.json()["threatLevel"] == 1


@pytest.mark.parametrize("threat_level", [0, 6])
def test_create_region_rejects_threat_level_out_of_range(
    client, auth_headers, scenario, threat_level
):
    response = client.post(
        "/api/regions",
        headers=auth_headers,
        json={
            "scenarioId": scenario["id"],
            "name": "Crater",
            "type": "wasteland",
            "threatLevel": threat_level,
        },
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "threatLevel"


def test_update_region_rejects_threat_level_out_of_range(client, auth_headers, region):
    response = client.patch(
        f"/api/regions/{region['id']}",
        headers=auth_headers,
        json={"threatLevel": 7},
    )

    assert response.status_code == 422

    response = client.get(f"/api/regions/{region['id']}", headers=auth_headers)
    assert response.json()["threatLevel"] == 3


def test_create_region_requires_scenario(client, auth_headers):
    response = client.post(
        "/api/regions",
        headers=auth_headers,
        json={"name": "Nowhere", "type": "wasteland"},
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "scenarioId"


def test_create_region_in_other_users_scenario(client, other_headers, scenario):
    response = client.post(
        "/api/regions",
        headers=other_headers,
        json={"scenarioId": scenario["id"], "name": "Stolen", "type": "city"},
    )

    assert response.status_code == 404


def test_list_regions_requires_scenario_id(client, auth_headers):
    response = client.get("/api/regions", headers=auth_headers)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "scenarioId"


def test_update_region(client, auth_headers, region):
    response = client.patch(
        f"/api/regions/{region['id']}",
        headers=auth_headers,
        json={"politicalStance": "allied", "population": 420},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["politicalStance"] == "allied"
    assert data["population"] == 420
    assert data["name"] == "Salt Flats"


def test_delete_region(client, auth_headers, region):
    response = client.delete(f"/api/regions/{region['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = client.get(f"/api/regions/{region['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Region not found"


class TestSeedDefaults:
    def test_seed_empty_scenario(self, client, auth_headers, scenario):
        response = client.post(
            f"/api/scenarios/{scenario['id']}/regions/seed-defaults", headers=auth_headers
        )

        assert response.status_code == 201
        regions = response.json()
        assert len(regions) == 10
        assert all(r["scenarioId"] == scenario["id"] for r in regions)

    def test_seed_twice_returns_same_regions(self, client, auth_headers, scenario):
        url = f"/api/scenarios/{scenario['id']}/regions/seed-defaults"
        first = client.post(url, headers=auth_headers).json()

        response = client.post(url, headers=auth_headers)

        assert response.status_code == 200
        assert sorted(r["id"] for r in response.json()) == sorted(r["id"] for r in first)

    def test_seed_leaves_existing_regions_alone(self, client, auth_headers, scenario, region):
        response = client.post(
            f"/api/scenarios/{scenario['id']}/regions/seed-defaults", headers=auth_headers
        )

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [region["id"]]

    def test_listing_never_seeds(self, client, auth_headers, scenario):
        for _ in range(2):
            response = client.get(
                "/api/regions", headers=auth_headers, params={"scenarioId": scenario["id"]}
            )
            assert response.json() == []


def test_delete_region_drops_references(client, auth_headers, scenario, region):
    neighbour = client.post(
        "/api/regions",
        headers=auth_headers,
        json={
            "scenarioId": scenario["id"],
            "name": "Caravanserai",
            "type": "trade_hub",
            "tradeRoutes": [region["id"]],
        },
    ).json()
    condition = client.post(
        "/api/conditions",
        headers=auth_headers,
        json={
            "scenarioId": scenario["id"],
            "name": "Salt storm",
            "affectedRegions": [region["id"], neighbour["id"]],
        },
    ).json()

    client.delete(f"/api/regions/{region['id']}", headers=auth_headers)

    stored = client.get(f"/api/conditions/{condition['id']}", headers=auth_headers).json()
    assert stored["affectedRegions"] == [neighbour["id"]]
    assert client.get(
        f"/api/regions/{neighbour['id']}", headers=auth_headers
    ).json()["tradeRoutes"] == []

    # The stored value can be sent back as is
    response = client.patch(
        f"/api/conditions/{condition['id']}",
        headers=auth_headers,
        json={"affectedRegions": stored["affectedRegions"]},
    )
    assert response.status_code == 200
