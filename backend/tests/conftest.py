import os

# must be set before resource_hub is imported: settings and engine are built at import time
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO"] = "false"
os.environ["AUTH_REQUIRED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from resource_hub.db.base import Base
from resource_hub.db.session import engine, SessionLocal
from resource_hub.main import app

API = "/api"


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def category(client):
    def _make(name="Pré-Evento", icon="CheckCircle"):
        r = client.post(f"{API}/categories", json={"name": name, "icon": icon})
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture
def resource(client):
    def _make(category_id, title="Checklist", **extra):
        r = client.post(f"{API}/resources", json={"title": title, "categoryId": category_id, **extra})
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture
def block(client):
    def _make(resource_id, block_type="text", content=None, **extra):
        payload = {
            "resourceId": resource_id,
            "blockType": block_type,
            "content": content if content is not None else {"content": "hello"},
            **extra,
        }
        r = client.post(f"{API}/blocks", json=payload)
        assert r.status_code == 201, r.text
        return r.json()
    return _make
