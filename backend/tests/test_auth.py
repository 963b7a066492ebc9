import pytest

from resource_hub.core.config import settings
from resource_hub.core.security import create_access_token
from resource_hub.crud.users import create_user
from resource_hub.db.models.user import Role
from resource_hub.schemas.auth import UserCreateIn

API = "/api"


@pytest.fixture
def auth_required(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_REQUIRED", True)


@pytest.fixture
def editor(db):
    create_user(db, UserCreateIn(login="editor", password="secret123", role=Role.editor))
    return "editor", "secret123"


@pytest.fixture
def admin(db):
    create_user(db, UserCreateIn(login="root", password="secret123", role=Role.admin))
    return "root", "secret123"


def _token(client, login, password):
    r = client.post(f"{API}/auth/login", json={"login": login, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["accessToken"]


def test_login_and_me(client, editor):
    token = _token(client, *editor)
    r = client.get(f"{API}/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["login"] == "editor"
    assert r.json()["role"] == "editor"


def test_login_with_wrong_password_is_401(client, editor):
    r = client.post(f"{API}/auth/login", json={"login": "editor", "password": "nope"})
    assert r.status_code == 401


def test_me_without_token_is_401(client):
    assert client.get(f"{API}/auth/me").status_code == 401
    r = client.get(f"{API}/auth/me", headers={"Authorization": "Bearer garbage"})
    assert r.status_code == 401


def test_writes_are_open_when_auth_is_off(client):
    assert client.post(f"{API}/categories", json={"name": "Open"}).status_code == 201


def test_writes_need_token_when_auth_is_on(client, editor, auth_required):
    assert client.post(f"{API}/categories", json={"name": "Closed"}).status_code == 401

    token = _token(client, *editor)
    r = client.post(f"{API}/categories", json={"name": "Closed"}, headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 201
    # reads stay public
    assert client.get(f"{API}/categories").status_code == 200


def test_token_for_unknown_user_is_rejected(client, auth_required):
    token = create_access_token("ghost", Role.admin.value)
    r = client.post(f"{API}/categories", json={"name": "x"}, headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_user_admin_requires_admin_role(client, editor, admin):
    editor_token = _token(client, *editor)
    r = client.get(f"{API}/admin/users", headers={"Authorization": f"Bearer {editor_token}"})
    assert r.status_code == 403

    admin_token = _token(client, *admin)
    headers = {"Authorization": f"Bearer {admin_token}"}
    r = client.post(f"{API}/admin/users", json={"login": "newbie", "password": "secret123"}, headers=headers)
    assert r.status_code == 201
    assert r.json()["role"] == "editor"
    assert "passwordHash" not in r.json()

    dup = client.post(f"{API}/admin/users", json={"login": "newbie", "password": "secret123"}, headers=headers)
    assert dup.status_code == 409

    logins = [u["login"] for u in client.get(f"{API}/admin/users", headers=headers).json()]
    assert logins == ["editor", "root", "newbie"]
