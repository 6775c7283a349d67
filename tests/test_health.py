import pytest


@pytest.mark.django_db
def test_health_check(api_client):
    res = api_client.get("/healthz/")
    assert res.status_code == 200
    assert res.json()["database"] == "connected"
