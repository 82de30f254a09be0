from decimal import Decimal


def test_list_menu_is_public(client, menu):
    resp = client.get("/api/menu")
    assert resp.status_code == 200
    items = resp.json()
    assert [item["id"] for item in items] == menu

    latte = items[0]
    assert latte["name"] == "Caffe Latte"
    assert Decimal(str(latte["price"])) == Decimal("4.5")
    assert latte["isSpecial"] is False
    assert items[2]["isSpecial"] is True


def test_search_matches_name_or_category_case_insensitively(client, menu):
    resp = client.get("/api/menu/search", params={"q": "latte"})
    assert resp.status_code == 200
    names = {item["name"] for item in resp.json()}
    assert names == {"Caffe Latte", "Matcha"}
    for item in resp.json():
        assert "latte" in item["name"].lower() or "latte" in item["category"].lower()

    resp = client.get("/api/menu/search", params={"q": "COFFEE"})
    assert {item["name"] for item in resp.json()} == {"Caffe Latte", "Americano"}


def test_search_requires_query(client):
    for params in ({}, {"q": ""}, {"q": "  "}):
        resp = client.get("/api/menu/search", params=params)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Search query required"}


def test_admin_updates_and_deletes_item(client, admin, menu):
    item_id = menu[1]

    resp = client.put(f"/api/menu/{item_id}", json={"price": 3.75, "isSpecial": True}, headers=admin["headers"])
    assert resp.status_code == 200
    assert resp.json() == {"message": "Menu item updated"}

    item = next(i for i in client.get("/api/menu").json() if i["id"] == item_id)
    assert Decimal(str(item["price"])) == Decimal("3.75")
    assert item["isSpecial"] is True
    assert item["name"] == "Croissant"

    resp = client.delete(f"/api/menu/{item_id}", headers=admin["headers"])
    assert resp.status_code == 200
    assert item_id not in [i["id"] for i in client.get("/api/menu").json()]


def test_update_with_empty_body_is_bad_request(client, admin, menu):
    resp = client.put(f"/api/menu/{menu[0]}", json={}, headers=admin["headers"])
    assert resp.status_code == 400


def test_delete_unknown_item_reports_success(client, admin):
    resp = client.delete("/api/menu/9999", headers=admin["headers"])
    assert resp.status_code == 200
    assert resp.json() == {"message": "Menu item deleted"}


def test_create_requires_name_and_price(client, admin):
    resp = client.post("/api/menu", json={"category": "Coffee"}, headers=admin["headers"])
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_update_rejects_null_for_required_columns(client, admin, menu):
    for body in ({"name": None}, {"price": None}, {"isSpecial": None}):
        resp = client.put(f"/api/menu/{menu[0]}", json=body, headers=admin["headers"])
        assert resp.status_code == 400, body
        assert "must not be null" in resp.json()["error"]

    # Необязательные колонки можно обнулить
    resp = client.put(f"/api/menu/{menu[0]}", json={"description": None}, headers=admin["headers"])
    assert resp.status_code == 200
    assert client.get("/api/menu").json()[0]["description"] is None
