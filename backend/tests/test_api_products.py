def _store(client):
    user = client.post("/users", json={"email": "owner@x.com", "name": "Owner"}).json()
    resp = client.post("/stores", json={"name": "Shop", "userId": user["id"]})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_and_get_product(client):
    store = _store(client)

    resp = client.post("/products", json={"name": "P", "price": 10, "storeId": store["id"]})
    assert resp.status_code == 201, resp.text
    product = resp.json()
    assert product["price"] == 10
    assert product["storeId"] == store["id"]

    detail = client.get(f"/products/{product['id']}")
    assert detail.status_code == 200
    body = detail.json()
    assert body["store"]["id"] == store["id"]
    assert body["store"]["user"]["email"] == "owner@x.com"


def test_create_product_for_missing_store(client):
    resp = client.post("/products", json={"name": "P", "price": 10, "storeId": 42})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Store not found."}
    assert client.get("/products").json() == []


def test_create_product_validation(client):
    store = _store(client)
    for body in (
        {"name": "P", "price": "abc", "storeId": store["id"]},
        {"name": "P", "storeId": store["id"]},
        {"name": "", "price": 1, "storeId": store["id"]},
        {"name": "P", "price": 1, "storeId": 0},
    ):
        resp = client.post("/products", json=body)
        assert resp.status_code == 400, body
        assert resp.json() == {"error": "Required fields: name (string), price (number), storeId (number > 0)."}


def test_list_products_newest_first(client):
    store = _store(client)
    ids = [
        client.post("/products", json={"name": f"P{i}", "price": i + 0.5, "storeId": store["id"]}).json()["id"]
        for i in range(3)
    ]

    resp = client.get("/products")
    assert resp.status_code == 200
    items = resp.json()
    assert [p["id"] for p in items] == list(reversed(ids))
    assert all(p["store"]["user"]["name"] == "Owner" for p in items)


def test_update_product(client):
    store = _store(client)
    product = client.post("/products", json={"name": "P", "price": 10, "storeId": store["id"]}).json()

    bad = client.put(f"/products/{product['id']}", json={"price": "abc"})
    assert bad.status_code == 400
    assert bad.json() == {"error": "Invalid price."}
    assert client.get(f"/products/{product['id']}").json()["price"] == 10

    empty = client.put(f"/products/{product['id']}", json={"color": "red"})
    assert empty.status_code == 400
    assert empty.json() == {"error": "Provide at least one field to update (name, price)."}

    ok = client.put(f"/products/{product['id']}", json={"name": " Renamed ", "price": "12.5"})
    assert ok.status_code == 200, ok.text
    assert ok.json()["name"] == "Renamed"
    assert ok.json()["price"] == 12.5

    assert client.put("/products/999", json={"name": "x"}).status_code == 404


def test_delete_product(client):
    store = _store(client)
    product = client.post("/products", json={"name": "P", "price": 10, "storeId": store["id"]}).json()

    assert client.delete(f"/products/{product['id']}").status_code == 204
    assert client.get(f"/products/{product['id']}").status_code == 404
    assert client.delete(f"/products/{product['id']}").status_code == 404
    assert client.delete("/products/abc").status_code == 400
    # The store keeps existing
    assert client.get(f"/stores/{store['id']}").json()["products"] == []
