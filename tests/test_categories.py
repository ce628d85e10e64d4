def test_create_category_returns_201_with_tax(client):
    resp = client.post("/api/category", json={
        "name": "Beverages",
        "image": "b.png",
        "description": "Drinks",
        "taxApplicable": True,
        "tax": 5,
    })
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["tax"] == 5
    assert data["taxApplicable"] is True
    assert data["taxType"] is None
    assert data["id"]
    assert "createdAt" in data and "updatedAt" in data


def test_create_category_missing_fields(client):
    resp = client.post("/api/category", json={"name": "Beverages", "image": "b.png", "taxApplicable": False})
    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields are required"}


def test_create_category_requires_explicit_tax_applicable(client):
    resp = client.post("/api/category", json={"name": "Beverages", "image": "b.png", "description": "Drinks"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields are required"}


def test_create_category_tax_applicable_without_tax_info(client):
    resp = client.post("/api/category", json={
        "name": "Beverages",
        "image": "b.png",
        "description": "Drinks",
        "taxApplicable": True,
    })
    assert resp.status_code == 400
    assert resp.json() == {"message": "Tax or TaxType is required"}


def test_create_category_accepts_tax_type_only(client):
    resp = client.post("/api/category", json={
        "name": "Desserts",
        "image": "d.png",
        "description": "Sweet",
        "taxApplicable": True,
        "taxType": "GST",
    })
    assert resp.status_code == 201, resp.text
    assert resp.json()["taxType"] == "GST"


def test_create_category_rejects_non_boolean_tax_applicable(client):
    resp = client.post("/api/category", json={
        "name": "Beverages",
        "image": "b.png",
        "description": "Drinks",
        "taxApplicable": "yes",
    })
    assert resp.status_code == 400
    assert "taxApplicable" in resp.json()["message"]


def test_list_categories_empty_is_404(client):
    resp = client.get("/api/categories")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Categories not found"}


def test_list_categories(client, category):
    resp = client.get("/api/categories")
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()] == [category["id"]]


def test_get_category_requires_id_or_name(client):
    resp = client.get("/api/category")
    assert resp.status_code == 400
    assert resp.json() == {"message": "Id or name is required"}


def test_get_category_by_id_and_name(client, category):
    by_id = client.get("/api/category", params={"id": category["id"]})
    assert by_id.status_code == 200
    assert by_id.json()["name"] == "Beverages"

    by_name = client.get("/api/category", params={"name": "VERAG"})
    assert by_name.status_code == 200
    assert by_name.json()["id"] == category["id"]


def test_get_category_not_found(client, category):
    resp = client.get("/api/category", params={"id": "missing"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Category not found"}

    resp = client.get("/api/category", params={"name": "pizza"})
    assert resp.status_code == 404


def test_update_category_partial(client, category):
    resp = client.put(f"/api/category/{category['id']}", json={"description": "Cold and hot drinks"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["description"] == "Cold and hot drinks"
    assert data["name"] == "Beverages"
    assert data["tax"] == 5
    assert data["id"] == category["id"]


def test_update_category_requires_a_field(client, category):
    resp = client.put(f"/api/category/{category['id']}", json={})
    assert resp.status_code == 400
    assert resp.json() == {"message": "At least one field is required"}


def test_update_category_tax_applicable_without_tax_leaves_record_unchanged(client):
    created = client.post("/api/category", json={
        "name": "Snacks",
        "image": "s.png",
        "description": "Small bites",
        "taxApplicable": False,
    }).json()

    resp = client.put(f"/api/category/{created['id']}", json={"taxApplicable": True})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Tax or TaxType is required"}

    stored = client.get("/api/category", params={"id": created["id"]}).json()
    assert stored["taxApplicable"] is False
    assert stored["tax"] is None


def test_update_category_can_turn_tax_off_and_zero_tax(client, category):
    resp = client.put(f"/api/category/{category['id']}", json={"taxApplicable": False, "tax": 0})
    assert resp.status_code == 200, resp.text
    assert resp.json()["taxApplicable"] is False
    assert resp.json()["tax"] == 0


def test_update_category_rejects_clearing_required_field(client, category):
    resp = client.put(f"/api/category/{category['id']}", json={"name": None})
    assert resp.status_code == 400


def test_update_category_not_found(client):
    resp = client.put("/api/category/does-not-exist", json={"name": "X"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Category not found"}


def test_update_category_refreshes_updated_at(client, category):
    resp = client.put(f"/api/category/{category['id']}", json={"name": "Drinks"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["createdAt"] == category["createdAt"]
    assert data["updatedAt"] != category["updatedAt"]
    assert data["updatedAt"] > category["updatedAt"]
