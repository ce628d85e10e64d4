import pytest
from sqlalchemy.exc import IntegrityError

from app.db.models.category import Category


def test_create_sub_category_inherits_tax(client, category):
    resp = client.post("/api/subcategory", json={
        "name": "Hot",
        "image": "h.png",
        "description": "Hot drinks",
        "categoryId": category["id"],
    })
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["taxApplicable"] is True
    assert data["tax"] == 5
    assert data["categoryId"] == category["id"]


def test_create_sub_category_keeps_explicit_false_and_zero(client, category):
    resp = client.post("/api/subcategory", json={
        "name": "Tax free",
        "image": "t.png",
        "description": "Exempt",
        "categoryId": category["id"],
        "taxApplicable": False,
        "tax": 0,
    })
    assert resp.status_code == 200, resp.text
    assert resp.json()["taxApplicable"] is False
    assert resp.json()["tax"] == 0


def test_inheritance_happens_only_at_creation(client, category, sub_category):
    client.put(f"/api/category/{category['id']}", json={"taxApplicable": True, "tax": 12})

    stored = client.get("/api/subcategory", params={"id": sub_category["id"]}).json()
    assert stored["tax"] == 5


def test_create_sub_category_missing_fields(client):
    resp = client.post("/api/subcategory", json={"name": "Hot", "image": "h.png", "description": "Hot drinks"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields are required"}


def test_create_sub_category_unknown_parent(client):
    resp = client.post("/api/subcategory", json={
        "name": "Hot",
        "image": "h.png",
        "description": "Hot drinks",
        "categoryId": "nope",
    })
    assert resp.status_code == 404
    assert resp.json() == {"message": "Category not found, unable to create subcategory"}


def test_list_sub_categories(client, sub_category):
    resp = client.get("/api/subcategories")
    assert resp.status_code == 200
    assert [s["id"] for s in resp.json()] == [sub_category["id"]]


def test_list_sub_categories_empty_is_404(client):
    resp = client.get("/api/subcategories")
    assert resp.status_code == 404
    assert resp.json() == {"message": "SubCategories not found"}


def test_list_sub_categories_by_category(client, category, sub_category):
    resp = client.get(f"/api/subcategories/category/{category['id']}")
    assert resp.status_code == 200
    assert len(resp.json()) == 1

    other = client.post("/api/category", json={
        "name": "Food", "image": "f.png", "description": "Meals", "taxApplicable": False,
    }).json()
    resp = client.get(f"/api/subcategories/category/{other['id']}")
    assert resp.status_code == 404


def test_list_sub_categories_by_blank_category_id(client):
    resp = client.get("/api/subcategories/category/%20")
    assert resp.status_code == 400
    assert resp.json() == {"message": "Id is required"}


def test_get_sub_category_by_name(client, sub_category):
    resp = client.get("/api/subcategory", params={"name": "hO"})
    assert resp.status_code == 200
    assert resp.json()["id"] == sub_category["id"]

    assert client.get("/api/subcategory").status_code == 400
    assert client.get("/api/subcategory", params={"id": "missing"}).json() == {"message": "SubCategory not found"}


def test_update_sub_category(client, sub_category):
    resp = client.put(f"/api/subcategory/{sub_category['id']}", json={"taxApplicable": False})
    assert resp.status_code == 200, resp.text
    assert resp.json()["taxApplicable"] is False
    assert resp.json()["name"] == "Hot"

    assert client.put(f"/api/subcategory/{sub_category['id']}", json={}).status_code == 400
    missing = client.put("/api/subcategory/missing", json={"name": "Cold"})
    assert missing.status_code == 404
    assert missing.json() == {"message": "SubCategory not found"}


def test_category_with_sub_categories_cannot_be_deleted(database, sub_category):
    session = database.session()
    try:
        category = session.get(Category, sub_category["categoryId"])
        session.delete(category)
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()
    finally:
        session.close()
