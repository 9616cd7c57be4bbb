"""
Tests for keyword settings endpoints.
"""


def test_settings_default_to_empty(client):
    response = client.get("/api/settings")
    assert response.status_code == 200
    assert response.json() == {}


def test_save_deduplicates_and_keeps_order(client):
    response = client.post(
        "/api/settings",
        json={"subMenus": {"dev": ["React", " API ", "React", "", "배포"]}},
    )
    assert response.status_code == 200
    assert response.json()["success"] is True

    assert client.get("/api/settings").json() == {"dev": ["React", "API", "배포"]}


def test_save_replaces_only_listed_categories(client):
    client.post("/api/settings", json={"subMenus": {"dev": ["React"], "work": ["보고서"]}})
    client.post("/api/settings", json={"subMenus": {"dev": ["Vue"]}})

    assert client.get("/api/settings").json() == {"dev": ["Vue"], "work": ["보고서"]}


def test_save_requires_sub_menus(client):
    response = client.post("/api/settings", json={})
    assert response.status_code == 400
