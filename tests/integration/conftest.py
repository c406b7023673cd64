import pytest
from fastapi.testclient import TestClient
from dish_manager.main import create_app


@pytest.fixture
def client(tmp_path, monkeypatch):
    # isolate data dir for this test run
    d = tmp_path / "data"
    d.mkdir()
    monkeypatch.setenv("DATA_DIR", str(d))
    monkeypatch.setenv("DISHES_FILE", str(d / "dishes.json"))
    monkeypatch.setenv("INGREDIENTS_FILE", str(d / "ingredients.json"))
    monkeypatch.setenv("EVENTS_FILE", str(d / "dish_log.jsonl"))
    monkeypatch.setenv("MAX_SELECTED_DISHES", "3")

    app = create_app()
    return TestClient(app)


@pytest.fixture
def make_dish(client):
    def _make(name, **ingredients):
        body = {
            "name": name,
            "ingredients": {
                "Fruit shop": ingredients.get("fruit", []),
                "Butchery": ingredients.get("butchery", []),
                "Supermarket": ingredients.get("supermarket", []),
            },
        }
        resp = client.post("/api/v1/dishes", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
