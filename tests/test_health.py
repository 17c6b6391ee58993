"""Health and readiness endpoints."""


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_ready_reports_generator_configuration(client, monkeypatch):
    monkeypatch.setattr("app.routers.health.settings.OPENAI_API_KEY", None)

    response = await client.get("/ready")

    assert response.json() == {"status": "ready", "note_generation_configured": False}
