"""Tests for super-admin account management endpoints"""
from fastapi.testclient import TestClient

from conftest import PASSWORD, bearer, login_headers
from sihs_cms.middleware.rate_limit import limiter
from sihs_cms.models.admin_account import DEFAULT_PERMISSIONS

ADMINS = "/api/admin/admins"


def _new_admin(**overrides) -> dict:
    data = {"name": "Bob", "email": "bob@sihs.edu", "password": PASSWORD, "role": "admin"}
    data.update(overrides)
    return data


def test_list_admins(client: TestClient, super_admin_headers: dict):
    response = client.get(ADMINS, headers=super_admin_headers)
    assert response.status_code == 200
    emails = [a["email"] for a in response.json()["data"]]
    assert emails == ["root@sihs.edu"]


def test_non_super_admin_is_forbidden(client: TestClient, admin_headers: dict):
    response = client.get(ADMINS, headers=admin_headers)
    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Access denied. Super admin only."}


def test_management_requires_token(client: TestClient):
    assert client.get(ADMINS).status_code == 401


def test_create_super_admin(client: TestClient, super_admin_headers: dict):
    response = client.post(ADMINS, json=_new_admin(role="super_admin"), headers=super_admin_headers)
    assert response.status_code == 201

    admin = response.json()["data"]
    assert admin["role"] == "super_admin"
    assert "manage_admins" in admin["permissions"]

    # the new account can log in and manage admins itself
    headers = login_headers(client, "bob@sihs.edu")
    assert client.get(ADMINS, headers=headers).status_code == 200


def test_create_with_explicit_permissions(client: TestClient, super_admin_headers: dict):
    response = client.post(
        ADMINS,
        json=_new_admin(role="moderator", permissions=["manage_news", "manage_research"]),
        headers=super_admin_headers,
    )
    assert response.status_code == 201
    assert response.json()["data"]["permissions"] == ["manage_news", "manage_research"]


def test_create_validation(client: TestClient, super_admin_headers: dict):
    bad_role = client.post(ADMINS, json=_new_admin(role="owner"), headers=super_admin_headers)
    assert bad_role.status_code == 400

    bad_permission = client.post(ADMINS, json=_new_admin(permissions=["manage_everything"]), headers=super_admin_headers)
    assert bad_permission.status_code == 400

    duplicate = client.post(ADMINS, json=_new_admin(email="ROOT@sihs.edu"), headers=super_admin_headers)
    assert duplicate.status_code == 400


def test_update_admin(client: TestClient, super_admin_headers: dict):
    admin_id = client.post(ADMINS, json=_new_admin(), headers=super_admin_headers).json()["data"]["adminId"]

    response = client.put(
        f"{ADMINS}/{admin_id}",
        json={"role": "moderator", "permissions": ["manage_news"], "name": "Robert"},
        headers=super_admin_headers,
    )
    assert response.status_code == 200
    admin = response.json()["data"]
    assert admin["role"] == "moderator"
    assert admin["permissions"] == ["manage_news"]
    assert admin["name"] == "Robert"


def test_update_admin_invalid_permission(client: TestClient, super_admin_headers: dict):
    admin_id = client.post(ADMINS, json=_new_admin(), headers=super_admin_headers).json()["data"]["adminId"]

    response = client.put(f"{ADMINS}/{admin_id}", json={"permissions": ["fly"]}, headers=super_admin_headers)
    assert response.status_code == 400


def test_update_unknown_admin(client: TestClient, super_admin_headers: dict):
    response = client.put(f"{ADMINS}/adm_missing", json={"name": "X"}, headers=super_admin_headers)
    assert response.status_code == 404


def test_soft_delete_invalidates_tokens(client: TestClient, super_admin_headers: dict):
    admin_id = client.post(ADMINS, json=_new_admin(), headers=super_admin_headers).json()["data"]["adminId"]
    bob_headers = login_headers(client, "bob@sihs.edu")
    assert client.get("/api/admin/auth/me", headers=bob_headers).status_code == 200

    response = client.delete(f"{ADMINS}/{admin_id}", headers=super_admin_headers)
    assert response.status_code == 200

    rejected = client.get("/api/admin/auth/me", headers=bob_headers)
    assert rejected.status_code == 401
    assert rejected.json()["message"] == "Token is not valid"

    # gone from the active list, and cannot log in any more
    emails = [a["email"] for a in client.get(ADMINS, headers=super_admin_headers).json()["data"]]
    assert "bob@sihs.edu" not in emails
    login = client.post("/api/admin/auth/login", json={"email": "bob@sihs.edu", "password": PASSWORD})
    assert login.status_code == 401


def test_cannot_delete_self(client: TestClient, super_admin, super_admin_headers: dict):
    response = client.delete(f"{ADMINS}/{super_admin.admin_id}", headers=super_admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete your own account"


def test_reactivate_admin(client: TestClient, super_admin_headers: dict):
    admin_id = client.post(ADMINS, json=_new_admin(), headers=super_admin_headers).json()["data"]["adminId"]
    client.delete(f"{ADMINS}/{admin_id}", headers=super_admin_headers)

    response = client.put(f"{ADMINS}/{admin_id}", json={"isActive": True}, headers=super_admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["isActive"] is True
    token = client.post(
        "/api/admin/auth/login", json={"email": "bob@sihs.edu", "password": PASSWORD}
    ).json()["data"]["token"]
    assert client.get("/api/admin/auth/me", headers=bearer(token)).status_code == 200


def test_cannot_deactivate_self_through_update(client: TestClient, super_admin, super_admin_headers: dict):
    response = client.put(f"{ADMINS}/{super_admin.admin_id}", json={"isActive": False}, headers=super_admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot deactivate your own account"

    assert client.get("/api/admin/auth/me", headers=super_admin_headers).status_code == 200


def test_cannot_demote_self(client: TestClient, super_admin, super_admin_headers: dict):
    response = client.put(f"{ADMINS}/{super_admin.admin_id}", json={"role": "admin"}, headers=super_admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot change your own role"

    assert client.get(ADMINS, headers=super_admin_headers).status_code == 200


def test_self_update_of_contact_fields_allowed(client: TestClient, super_admin, super_admin_headers: dict):
    response = client.put(
        f"{ADMINS}/{super_admin.admin_id}",
        json={"name": "Root Admin", "role": "super_admin", "isActive": True},
        headers=super_admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Root Admin"


def test_role_change_resets_permissions_to_role_defaults(client: TestClient, super_admin_headers: dict):
    admin_id = client.post(ADMINS, json=_new_admin(), headers=super_admin_headers).json()["data"]["adminId"]

    response = client.put(f"{ADMINS}/{admin_id}", json={"role": "moderator"}, headers=super_admin_headers)
    assert response.status_code == 200
    assert sorted(response.json()["data"]["permissions"]) == sorted(DEFAULT_PERMISSIONS["moderator"])

    # the demoted account can no longer write departments
    headers = login_headers(client, "bob@sihs.edu")
    department = {
        "name": "Physics",
        "description": "d",
        "code": "PHY",
        "headOfDept": "Dr. X",
        "foundedYear": 2000,
        "totalFaculty": 3,
    }
    assert client.post("/api/departments", json=department, headers=headers).status_code == 403


def test_admin_writes_are_rate_limited():
    for endpoint in ("create_admin", "update_admin", "deactivate_admin"):
        assert f"sihs_cms.api.admins.{endpoint}" in limiter._route_limits
