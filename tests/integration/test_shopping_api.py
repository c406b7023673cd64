def test_shopping_list_consolidates_selected_dishes(client, make_dish):
    a = make_dish("Apple Pie", fruit=["Apple", "Apple"], supermarket=["Flour"])
    b = make_dish("Apple Sauce", fruit=["apple"])
    make_dish("Stew", butchery=["Beef"])

    resp = client.post("/api/v1/shopping-list", json={"dish_ids": [b["id"], a["id"]]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["dishes"] == ["Apple Pie", "Apple Sauce"]
    assert body["list"] == {
        "Fruit shop": [{"name": "apple", "count": 3, "display": "apple ++"}],
        "Butchery": [],
        "Supermarket": [{"name": "flour", "count": 1, "display": "flour"}],
    }
    assert body["text"] == "Fruit shop:\n  - apple ++\n\nSupermarket:\n  - flour"


def test_empty_selection_gives_empty_list(client):
    resp = client.post("/api/v1/shopping-list", json={"dish_ids": []})
    assert resp.status_code == 200
    body = resp.json()
    assert sorted(body) == ["dishes", "list", "text"]
    assert body["text"] == ""
    assert body["list"] == {"Fruit shop": [], "Butchery": [], "Supermarket": []}


def test_selection_limit_and_unknown_ids(client, make_dish):
    ids = [make_dish(f"Dish {i}", supermarket=["salt"])["id"] for i in range(4)]

    resp = client.post("/api/v1/shopping-list", json={"dish_ids": ids})
    assert resp.status_code == 400
    assert "maximum of 3" in resp.json()["detail"]

    resp = client.post("/api/v1/shopping-list", json={"dish_ids": [ids[0], "missing"]})
    assert resp.status_code == 404


def test_only_selected_categories_appear_in_text(client, make_dish):
    stew = make_dish("Stew", butchery=["Beef", "beef "])
    body = client.post("/api/v1/shopping-list", json={"dish_ids": [stew["id"]]}).json()
    assert sorted(body) == ["dishes", "list", "text"]
    assert body["text"] == "Butchery:\n  - beef +"
    assert body["list"]["Fruit shop"] == []
