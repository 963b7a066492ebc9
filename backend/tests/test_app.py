def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_routes_are_mounted_under_api_prefix(client):
    assert client.get("/api/categories").status_code == 200
    assert client.get("/categories").status_code == 404
