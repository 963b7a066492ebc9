API = "/api"

PALETTE = {
    "primaryColor": "#9D5CFF",
    "backgroundColor": "#0C0D13",
    "surfaceColor": "#14151F",
    "borderColor": "#1F2231",
    "textColor": "#FFF",
}


def _theme(client, name, **extra):
    r = client.post(f"{API}/theme-settings", json={"name": name, **PALETTE, **extra})
    assert r.status_code == 201, r.text
    return r.json()


def _active_ids(client):
    return [t["id"] for t in client.get(f"{API}/theme-settings").json() if t["isActive"]]


def test_no_active_theme_is_404(client):
    assert client.get(f"{API}/theme-settings/active").status_code == 404
    t = _theme(client, "Inactive")
    assert t["isActive"] is False
    assert t["logoUrl"] is None
    assert client.get(f"{API}/theme-settings/active").status_code == 404


def test_scenario_activate_switches_active_theme(client):
    a = _theme(client, "A", isActive=True)
    b = _theme(client, "B", isActive=False)

    r = client.post(f"{API}/theme-settings/{b['id']}/activate")
    assert r.status_code == 200
    assert r.json()["isActive"] is True

    assert client.get(f"{API}/theme-settings/active").json()["id"] == b["id"]
    assert client.get(f"{API}/theme-settings/{a['id']}").json()["isActive"] is False


def test_activate_twice_leaves_only_the_last(client):
    a = _theme(client, "A")
    b = _theme(client, "B")
    client.post(f"{API}/theme-settings/{a['id']}/activate")
    client.post(f"{API}/theme-settings/{b['id']}/activate")
    assert _active_ids(client) == [b["id"]]


def test_create_active_theme_deactivates_others(client):
    a = _theme(client, "A", isActive=True)
    b = _theme(client, "B", isActive=True)
    assert _active_ids(client) == [b["id"]]
    assert client.get(f"{API}/theme-settings/{a['id']}").json()["isActive"] is False


def test_update_to_active_deactivates_others(client):
    a = _theme(client, "A", isActive=True)
    b = _theme(client, "B")
    r = client.put(f"{API}/theme-settings/{b['id']}", json={"isActive": True, "name": "B2"})
    assert r.status_code == 200
    assert r.json()["name"] == "B2"
    assert _active_ids(client) == [b["id"]]
    assert client.get(f"{API}/theme-settings/{a['id']}").json()["isActive"] is False


def test_update_keeps_unsent_colors(client):
    t = _theme(client, "A")
    r = client.put(f"{API}/theme-settings/{t['id']}", json={"primaryColor": "#0073E6"})
    assert r.status_code == 200
    body = r.json()
    assert body["primaryColor"] == "#0073E6"
    assert body["textColor"] == "#FFF"


def test_invalid_hex_color_is_400(client):
    r = client.post(f"{API}/theme-settings", json={"name": "Bad", **{**PALETTE, "primaryColor": "purple"}})
    assert r.status_code == 400
    t = _theme(client, "A")
    r = client.put(f"{API}/theme-settings/{t['id']}", json={"borderColor": "#12345"})
    assert r.status_code == 400


def test_theme_name_is_required(client):
    r = client.post(f"{API}/theme-settings", json={"name": "", **PALETTE})
    assert r.status_code == 400


def test_delete_active_theme_is_refused(client):
    a = _theme(client, "A", isActive=True)
    r = client.delete(f"{API}/theme-settings/{a['id']}")
    assert r.status_code == 409

    still = client.get(f"{API}/theme-settings/{a['id']}")
    assert still.status_code == 200
    assert still.json()["isActive"] is True


def test_delete_inactive_theme(client):
    _theme(client, "A", isActive=True)
    b = _theme(client, "B")
    assert client.delete(f"{API}/theme-settings/{b['id']}").status_code == 204
    assert client.get(f"{API}/theme-settings/{b['id']}").status_code == 404
    assert client.delete(f"{API}/theme-settings/{b['id']}").status_code == 404


def test_activate_missing_theme_is_404(client):
    assert client.post(f"{API}/theme-settings/999/activate").status_code == 404
    assert client.put(f"{API}/theme-settings/999", json={"name": "x"}).status_code == 404
