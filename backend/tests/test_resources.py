API = "/api"


def test_create_resource_applies_defaults(client, category):
    c = category()
    r = client.post(f"{API}/resources", json={"title": "Checklist", "categoryId": c["id"]})
    assert r.status_code == 201
    body = r.json()
    assert body["readTime"] == 5
    assert body["description"] is None
    assert body["categoryId"] == c["id"]

    assert client.get(f"{API}/resources/{body['id']}").json() == body


def test_snake_case_input_is_accepted(client, category):
    c = category()
    r = client.post(f"{API}/resources", json={"title": "Docs", "category_id": c["id"], "read_time": 3})
    assert r.status_code == 201
    assert r.json()["readTime"] == 3


def test_create_resource_with_unknown_category_is_400(client):
    r = client.post(f"{API}/resources", json={"title": "Orphan", "categoryId": 42})
    assert r.status_code == 400


def test_filter_by_category(client, category, resource):
    c1 = category("One")
    c2 = category("Two")
    a = resource(c1["id"], title="A")
    resource(c2["id"], title="B")

    listed = client.get(f"{API}/resources", params={"categoryId": c1["id"]}).json()
    assert [x["id"] for x in listed] == [a["id"]]
    assert len(client.get(f"{API}/resources").json()) == 2


def test_invalid_category_filter_is_400(client):
    assert client.get(f"{API}/resources", params={"categoryId": "abc"}).status_code == 400


def test_search_matches_title_and_description(client, category, resource):
    c = category()
    a = resource(c["id"], title="Horários do Evento")
    b = resource(c["id"], title="Contatos", description="Lista de contatos de emergência")
    resource(c["id"], title="Materiais Gráficos")

    found = client.get(f"{API}/resources", params={"q": "evento"}).json()
    assert [x["id"] for x in found] == [a["id"]]
    found = client.get(f"{API}/resources", params={"q": "EMERG"}).json()
    assert [x["id"] for x in found] == [b["id"]]


def test_put_updates_only_sent_fields(client, category, resource):
    c = category()
    res = resource(c["id"], title="Old", description="keep me", readTime=8)
    r = client.put(f"{API}/resources/{res['id']}", json={"title": "New"})
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "New"
    assert body["description"] == "keep me"
    assert body["readTime"] == 8


def test_put_rejects_null_read_time(client, category, resource):
    c = category()
    res = resource(c["id"], readTime=8)
    r = client.put(f"{API}/resources/{res['id']}", json={"readTime": None})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid request data"
    assert client.get(f"{API}/resources/{res['id']}").json()["readTime"] == 8


def test_zero_read_time_falls_back_to_default(client, category, resource):
    c = category()
    res = resource(c["id"], readTime=0)
    assert res["readTime"] == 5
    r = client.put(f"{API}/resources/{res['id']}", json={"readTime": 12})
    assert r.json()["readTime"] == 12
    r = client.put(f"{API}/resources/{res['id']}", json={"readTime": 0})
    assert r.status_code == 200
    assert r.json()["readTime"] == 5


def test_put_missing_resource_is_404(client):
    assert client.put(f"{API}/resources/999", json={"title": "x"}).status_code == 404


def test_patch_reassigns_category(client, category, resource):
    c1 = category("One")
    c2 = category("Two")
    res = resource(c1["id"], title="Mover", description="d", readTime=7)

    r = client.patch(f"{API}/resources/{res['id']}", json={"categoryId": c2["id"]})
    assert r.status_code == 200
    moved = r.json()
    assert moved["categoryId"] == c2["id"]
    # frame: nothing else changes except updatedAt
    for key in ("id", "title", "description", "readTime", "createdAt"):
        assert moved[key] == res[key]
    assert moved["updatedAt"] >= res["updatedAt"]

    in_two = [x["id"] for x in client.get(f"{API}/resources", params={"categoryId": c2["id"]}).json()]
    in_one = [x["id"] for x in client.get(f"{API}/resources", params={"categoryId": c1["id"]}).json()]
    assert res["id"] in in_two
    assert res["id"] not in in_one


def test_patch_unknown_resource_or_category_is_404(client, category, resource):
    c = category()
    res = resource(c["id"])
    assert client.patch(f"{API}/resources/999", json={"categoryId": c["id"]}).status_code == 404
    assert client.patch(f"{API}/resources/{res['id']}", json={"categoryId": 999}).status_code == 404


def test_delete_resource_removes_its_blocks(client, category, resource, block):
    c = category()
    res = resource(c["id"])
    other = resource(c["id"], title="Other")
    b = block(res["id"])
    kept = block(other["id"])

    assert client.delete(f"{API}/resources/{res['id']}").status_code == 204
    assert client.delete(f"{API}/resources/{res['id']}").status_code == 404
    assert client.get(f"{API}/blocks/{b['id']}").status_code == 404
    assert client.get(f"{API}/blocks/{kept['id']}").status_code == 200
