# backend/tests/integration/test_scenario_content.py
import pytest


class TestNPCs:
    def test_create_npc(self, client, auth_headers, scenario):
        response = client.post(
            "/api/npcs",
            headers=auth_headers,
            json={
                "scenarioId": scenario["id"],
                "name": "Old Marta",
                "role": "Water seller",
                "faction": "Les Gardiens de la Source",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["importance"] == "minor"
        assert data["status"] == "alive"
        assert data["faction"] == "Les Gardiens de la Source"

    def test_list_npcs(self, client, auth_headers, scenario):
        for name in ("Marta", "Silas"):
            client.post(
                "/api/npcs",
                headers=auth_headers,
                json={"scenarioId": scenario["id"], "name": name, "role": "Trader"},
            )

        response = client.get(
            "/api/npcs", headers=auth_headers, params={"scenarioId": scenario["id"]}
        )

        assert response.status_code == 200
        assert {n["name"] for n in response.json()} == {"Marta", "Silas"}

    def test_update_npc_status(self, client, auth_headers, scenario):
        npc = client.post(
            "/api/npcs",
            headers=auth_headers,
            json={"scenarioId": scenario["id"], "name": "Silas", "role": "Smuggler"},
        ).json()

        response = client.patch(
            f"/api/npcs/{npc['id']}", headers=auth_headers, json={"status": "dead"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "dead"
        assert response.json()["role"] == "Smuggler"

    def test_npc_of_other_user_is_not_found(self, client, auth_headers, other_headers, scenario):
        npc = client.post(
            "/api/npcs",
            headers=auth_headers,
            json={"scenarioId": scenario["id"], "name": "Silas", "role": "Smuggler"},
        ).json()

        response = client.delete(f"/api/npcs/{npc['id']}", headers=other_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "NPC not found"


class TestQuests:
    def test_create_quest_defaults(self, client, auth_headers, scenario):
        response = client.post(
            "/api/quests",
            headers=auth_headers,
            json={"scenarioId": scenario["id"], "title": "Find the aquifer"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "not_started"
        assert data["priority"] == "medium"

    def test_update_and_delete_quest(self, client, auth_headers, scenario):
        quest = client.post(
            "/api/quests",
            headers=auth_headers,
            json={"scenarioId": scenario["id"], "title": "Find the aquifer"},
        ).json()

        response = client.patch(
            f"/api/quests/{quest['id']}",
            headers=auth_headers,
            json={"status": "completed", "rewards": "200 liters of water"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "completed"

        assert client.delete(f"/api/quests/{quest['id']}", headers=auth_headers).status_code == 204
        assert client.get(f"/api/quests/{quest['id']}", headers=auth_headers).status_code == 404

    def test_create_quest_rejects_unknown_priority(self, client, auth_headers, scenario):
        response = client.post(
            "/api/quests",
            headers=auth_headers,
            json={"scenarioId": scenario["id"], "title": "Urgent", "priority": "urgent"},
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "priority"


class TestConditions:
    @pytest.fixture
    def region(self, client, auth_headers, scenario):
        return client.post(
            "/api/regions",
            headers=auth_headers,
            json={"scenarioId": scenario["id"], "name": "Salt Flats", "type": "wasteland"},
        ).json()

    def test_create_condition(self, client, auth_headers, scenario, region):
        response = client.post(
            "/api/conditions",
            headers=auth_headers,
            json={
                "scenarioId": scenario["id"],
                "name": "Acid rain",
                "severity": "severe",
                "affectedRegions": [region["id"]],
                "duration": "3 days",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["affectedRegions"] == [region["id"]]
        assert data["duration"] == "3 days"

    def test_create_condition_with_foreign_region(self, client, auth_headers, scenario):
        other = client.post(
            "/api/scenarios",
            headers=auth_headers,
            json={"title": "Elsewhere", "mainIdea": "Another scenario entirely"},
        ).json()
        foreign_region = client.get(
            "/api/regions", headers=auth_headers, params={"scenarioId": other["id"]}
        ).json()[0]

        response = client.post(
            "/api/conditions",
            headers=auth_headers,
            json={
                "scenarioId": scenario["id"],
                "name": "Dust storm",
                "affectedRegions": [foreign_region["id"]],
            },
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["errors"][0]["field"] == "affectedRegions"

    def test_update_condition_with_unknown_region(self, client, auth_headers, scenario, region):
        condition = client.post(
            "/api/conditions",
            headers=auth_headers,
            json={"scenarioId": scenario["id"], "name": "Dust storm"},
        ).json()

        response = client.patch(
            f"/api/conditions/{condition['id']}",
            headers=auth_headers,
            json={"affectedRegions": [region["id"], "not-a-region"]},
        )

        assert response.status_code == 422
        assert "not-a-region" in response.json()["errors"][0]["message"]

    def test_list_conditions(self, client, auth_headers, scenario):
        client.post(
            "/api/conditions",
            headers=auth_headers,
            json={"scenarioId": scenario["id"], "name": "Dust storm"},
        )

        response = client.get(
            "/api/conditions", headers=auth_headers, params={"scenarioId": scenario["id"]}
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["severity"] == "moderate"
