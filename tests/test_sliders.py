"""Tests for home page slider endpoints"""
from fastapi.testclient import TestClient

SLIDER = "/api/slider"


def _create(client: TestClient, headers: dict, **fields) -> dict:
    data = {"imageUrl": "/img/slide.jpg"}
    data.update(fields)
    response = client.post(SLIDER, json=data, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_defaults(client: TestClient, super_admin_headers: dict):
    slider = _create(client, super_admin_headers)
    assert slider["buttonText"] == "Learn More"
    assert slider["buttonLink"] == "/"
    assert slider["autoPlayInterval"] == 5000
    assert slider["order"] == 0


def test_image_required(client: TestClient, super_admin_headers: dict):
    response = client.post(SLIDER, json={"title": "No image"}, headers=super_admin_headers)
    assert response.status_code == 400


def test_writes_require_manage_settings(client: TestClient, admin_headers: dict):
    response = client.post(SLIDER, json={"imageUrl": "/x.jpg"}, headers=admin_headers)
    assert response.status_code == 403


def test_public_list_is_active_in_order(client: TestClient, super_admin_headers: dict):
    _create(client, super_admin_headers, title="Second", order=2)
    _create(client, super_admin_headers, title="First", order=1)
    _create(client, super_admin_headers, title="Hidden", order=0, isActive=False)

    titles = [s["title"] for s in client.get(SLIDER).json()["data"]]
    assert titles == ["First", "Second"]


def test_admin_list_needs_login_and_shows_everything(client: TestClient, super_admin_headers: dict, moderator_headers: dict):
    _create(client, super_admin_headers, title="Shown", order=1)
    _create(client, super_admin_headers, title="Hidden", order=0, isActive=False)

    assert client.get(f"{SLIDER}/admin").status_code == 401

    titles = [s["title"] for s in client.get(f"{SLIDER}/admin", headers=moderator_headers).json()["data"]]
    assert titles == ["Hidden", "Shown"]


def test_toggle_update_delete(client: TestClient, super_admin_headers: dict):
    slider = _create(client, super_admin_headers)

    toggled = client.patch(f"{SLIDER}/{slider['id']}/toggle", headers=super_admin_headers)
    assert toggled.json()["message"] == "Slider deactivated successfully"
    assert toggled.json()["data"]["isActive"] is False

    updated = client.put(f"{SLIDER}/{slider['id']}", json={"order": 5, "buttonText": "Apply"}, headers=super_admin_headers)
    assert updated.status_code == 200
    assert updated.json()["data"]["order"] == 5
    assert updated.json()["data"]["buttonText"] == "Apply"

    assert client.delete(f"{SLIDER}/{slider['id']}", headers=super_admin_headers).status_code == 200
    response = client.get(f"{SLIDER}/{slider['id']}")
    assert response.status_code == 404
    assert response.json()["message"] == "Slider not found"
