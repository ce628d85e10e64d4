def test_id_path_injection_is_treated_as_plain_id(client, category):
    resp = client.put("/api/category/1' OR '1'='1", json={"name": "x"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Category not found"}


def test_query_injection_on_lookup_returns_404(client, category):
    resp = client.get("/api/category", params={"name": "'; DROP TABLE categories;--"})
    assert resp.status_code == 404

    # Table still intact
    assert client.get("/api/categories").status_code == 200


def test_body_type_confusion_returns_400(client, category):
    resp = client.post("/api/item", json={
        "name": "Tea",
        "image": "t.png",
        "description": "d",
        "taxApplicable": False,
        "baseAmount": "100; DROP TABLE items",
        "category": category["id"],
    })
    assert resp.status_code == 400
    assert "baseAmount" in resp.json()["message"]
