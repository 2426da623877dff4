# backend/tests/integration/test_ai.py
import pytest
from openai import OpenAIError

from gmassist.config import get_settings
from gmassist.main import app
from gmassist.services.ai_service import get_ai_service

GENERATED_EVENT = {
    "name": "Ambush at the Rusted Bridge",
    "description": "Raiders have strung cables across the bridge.",
    "suggestedNodes": [
        {"type": "npc", "name": "Raider chief", "description": "Scarred and patient"}
    ],
    "suggestedConnections": [
        {
            "fromType": "npc",
            "fromName": "Raider chief",
            "toType": "location",
            "toName": "Rusted Bridge",
            "connectionType": "spatial",
        }
    ],
    "estimatedDuration": 30,
    "pacingImpact": "tension",
    "gameplayTips": ["Let the players spot the cables first"],
}

GENERATED_NPC = {
    "name": "Marta Sable",
    "description": "A water seller with a limp and a long memory.",
    "type": "npc",
    "properties": {
        "faction": "Les Gardiens de la Source",
        "motivation": "Keep her family fed",
        "equipment": ["ledger", "revolver"],
        "secrets": ["She dilutes the water"],
    },
}


def sent_messages(mock_openai_client):
    return mock_openai_client.chat.completions.create.call_args.kwargs["messages"]


class TestGenerateEvent:
    def test_generate_event(self, client, auth_headers, ai_reply, mock_openai_client):
        ai_reply(GENERATED_EVENT)

        response = client.post(
            "/api/ai/generate-event",
            headers=auth_headers,
            json={"creatorMode": "road", "aiMode": "chaos", "weather": "dust storm"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Ambush at the Rusted Bridge"
        assert data["pacingImpact"] == "tension"
        assert data["suggestedNodes"][0]["type"] == "npc"
        assert data["suggestedConnections"][0]["connectionType"] == "spatial"
        assert data["alternativeOutcomes"] == []

        kwargs = mock_openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["temperature"] == 0.8
        assert kwargs["response_format"] == {"type": "json_object"}
        assert "- Weather: dust storm" in kwargs["messages"][1]["content"]

    def test_continuity_mode_is_cooler(self, client, auth_headers, ai_reply, mock_openai_client):
        ai_reply(GENERATED_EVENT)

        client.post(
            "/api/ai/generate-event",
            headers=auth_headers,
            json={"creatorMode": "city", "aiMode": "continuity"},
        )

        assert mock_openai_client.chat.completions.create.call_args.kwargs["temperature"] == 0.4

    def test_scenario_context_is_sent(self, client, auth_headers, ai_reply, mock_openai_client):
        scenario = client.post(
            "/api/scenarios",
            headers=auth_headers,
            json={"title": "Trade Wars", "mainIdea": "Conflict over water rights in a desert city"},
        ).json()
        ai_reply(GENERATED_EVENT)

        response = client.post(
            "/api/ai/generate-event",
            headers=auth_headers,
            json={"creatorMode": "city", "scenarioId": scenario["id"]},
        )

        assert response.status_code == 200
        prompt = sent_messages(mock_openai_client)[1]["content"]
        assert "- Title: Trade Wars" in prompt
        assert "Nuke City (city, Le Réacteur à Ciel Ouvert, threat 5/5, hostile)" in prompt

    def test_scenario_of_other_user_is_not_found(
        self, client, auth_headers, other_headers, scenario, ai_reply, mock_openai_client
    ):
        ai_reply(GENERATED_EVENT)

        response = client.post(
            "/api/ai/generate-event",
            headers=other_headers,
            json={"creatorMode": "city", "scenarioId": scenario["id"]},
        )

        assert response.status_code == 404
        mock_openai_client.chat.completions.create.assert_not_called()

    @pytest.mark.parametrize(
        "reply",
        [None, "", "not json at all", {"name": "Half an event"}],
        ids=["missing", "empty", "not-json", "incomplete"],
    )
    def test_bad_reply_is_upstream_error(self, client, auth_headers, ai_reply, reply):
        ai_reply(reply)

        response = client.post(
            "/api/ai/generate-event", headers=auth_headers, json={"creatorMode": "road"}
        )

        assert response.status_code == 502
        assert response.json()["error"] == "upstream_error"

    def test_client_failure_is_upstream_error(self, client, auth_headers, mock_openai_client):
        mock_openai_client.chat.completions.create.side_effect = OpenAIError("connection reset")

        response = client.post(
            "/api/ai/generate-event", headers=auth_headers, json={"creatorMode": "road"}
        )

        assert response.status_code == 502
        assert "connection reset" in response.json()["message"]

    def test_request_validation(self, client, auth_headers, mock_openai_client):
        response = client.post(
            "/api/ai/generate-event",
            headers=auth_headers,
            json={"creatorMode": "road", "threatLevel": "apocalyptic"},
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "threatLevel"
        mock_openai_client.chat.completions.create.assert_not_called()


class TestGenerateNPC:
    def test_generate_npc(self, client, auth_headers, ai_reply, mock_openai_client):
        ai_reply(GENERATED_NPC)

        response = client.post(
            "/api/ai/generate-npc",
            headers=auth_headers,
            json={"setting": "city", "faction": "Les Gardiens de la Source", "relationship": "ally"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Marta Sable"
        assert data["properties"]["secrets"] == ["She dilutes the water"]
        assert mock_openai_client.chat.completions.create.call_args.kwargs["temperature"] == 0.7
        assert "- Relationship to the party: ally" in sent_messages(mock_openai_client)[1]["content"]

    def test_npc_without_properties_is_upstream_error(self, client, auth_headers, ai_reply):
        ai_reply({"name": "Nobody", "description": "Nothing to say"})

        response = client.post(
            "/api/ai/generate-npc", headers=auth_headers, json={"setting": "road"}
        )

        assert response.status_code == 502


class TestSuggestions:
    def test_suggestions_are_capped_at_limit(self, client, auth_headers, ai_reply):
        ai_reply({
            "suggestions": [
                {"query": f"water idea {i}", "type": "related", "relevance": 0.5}
                for i in range(5)
            ]
        })

        response = client.post(
            "/api/ai/suggestions",
            headers=auth_headers,
            json={"query": "water", "limit": 3},
        )

        assert response.status_code == 200
        assert [s["query"] for s in response.json()["suggestions"]] == [
            "water idea 0", "water idea 1", "water idea 2",
        ]

    def test_relevance_out_of_range_is_upstream_error(self, client, auth_headers, ai_reply):
        ai_reply({"suggestions": [{"query": "water", "type": "semantic", "relevance": 3}]})

        response = client.post(
            "/api/ai/suggestions", headers=auth_headers, json={"query": "water"}
        )

        assert response.status_code == 502


def test_ai_unavailable_without_api_key(client, auth_headers, monkeypatch):
    app.dependency_overrides.pop(get_ai_service)
    monkeypatch.setattr(get_settings(), "openai_api_key", None)

    response = client.post(
        "/api/ai/generate-event", headers=auth_headers, json={"creatorMode": "road"}
    )

    assert response.status_code == 503
    assert response.json() == {
        "error": "service_unavailable",
        "message": "No OpenAI API key configured",
    }


def test_ai_requires_authentication(client):
    response = client.post("/api/ai/generate-npc", json={"setting": "road"})

    assert response.status_code in (401, 403)
