"""
Tests for the health endpoints.
"""

from smartwork import __version__


def test_health_check(anonymous_client):
    response = anonymous_client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "smartwork-api", "version": __version__}


def test_api_responses_are_not_cacheable(anonymous_client):
    response = anonymous_client.get("/api/health")

    assert response.headers["Cache-Control"].startswith("no-store")
    assert response.headers["X-Frame-Options"] == "DENY"
