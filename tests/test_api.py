import pytest

from shorts_forge.api.v1 import blueprint as blueprint_api


@pytest.mark.parametrize("path", ["/api/generate", "/api/v1/blueprint/generate"])
def test_generate_returns_blueprint(client, full_request, path):
    response = client.post(path, json=full_request)

    assert response.status_code == 200
    payload = response.json()
    assert set(payload) == {"metadata", "workflow"}
    assert set(payload["metadata"]) == {"runtime", "audienceHook", "summary"}
    assert set(payload["workflow"]) == {
        "automationPipeline",
        "contentSegments",
        "audioPlan",
        "assetChecklist",
        "editingTimeline",
        "publishing",
        "qaChecklist",
    }
    assert set(payload["workflow"]["contentSegments"][0]) == {
        "id", "label", "timestamp", "duration", "narration",
        "onScreenText", "visuals", "motion", "soundDesign",
    }
    assert payload["metadata"]["runtime"] == 55


def test_generate_with_only_topic_uses_defaults(client):
    response = client.post("/api/generate", json={"topic": "Automate your mornings", "duration": "abc"})

    assert response.status_code == 200
    assert response.json()["metadata"]["runtime"] == 55


@pytest.mark.parametrize("duration", ["--5", "²", "9" * 5000])
def test_malformed_duration_string_falls_back_to_default(client, duration):
    response = client.post("/api/generate", json={"topic": "x", "duration": duration})

    assert response.status_code == 200
    assert response.json()["metadata"]["runtime"] == 55


@pytest.mark.parametrize("body", [{}, {"topic": ""}, {"topic": "   "}])
def test_blank_topic_returns_400(client, body):
    response = client.post("/api/generate", json=body)

    assert response.status_code == 400
    assert response.json()["detail"] == "Topic is required."


def test_unexpected_failure_returns_500(client, monkeypatch):
    def explode(self, request):
        raise RuntimeError("boom")

    monkeypatch.setattr(blueprint_api.BlueprintGenerationService, "generate_blueprint", explode)

    response = client.post("/api/generate", json={"topic": "x"})

    assert response.status_code == 500
    assert response.json()["detail"] == blueprint_api.GENERIC_FAILURE


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy", "service": "shorts-forge"}
