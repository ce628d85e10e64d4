from types import SimpleNamespace

import pytest

from app.domain import menu_rules
from app.schemas.category import CreateCategoryInput, UpdateCategoryInput
from app.schemas.item import CreateItemInput, UpdateItemInput
from app.schemas.sub_category import CreateSubCategoryInput
from app.services.exceptions import ValidationError


def test_compute_total_amount():
    assert menu_rules.compute_total_amount(100, 20) == 80
    assert menu_rules.compute_total_amount(100, None) == 100
    assert menu_rules.compute_total_amount(100, 0) == 100


def test_category_create_blank_name_is_missing():
    payload = CreateCategoryInput(name="  ", image="b.png", description="Drinks", tax_applicable=False)
    with pytest.raises(ValidationError) as exc:
        menu_rules.validate_category_create(payload)
    assert exc.value.user_message == "All fields are required"


def test_category_create_zero_tax_counts_as_tax_info():
    payload = CreateCategoryInput.model_validate(
        {"name": "Beverages", "image": "b.png", "description": "Drinks", "taxApplicable": True, "tax": 0}
    )
    values = menu_rules.validate_category_create(payload)
    assert values["tax"] == 0


def test_category_update_returns_only_supplied_fields():
    payload = UpdateCategoryInput.model_validate({"taxApplicable": False, "tax": None})
    assert menu_rules.validate_category_update(payload) == {"tax_applicable": False, "tax": None}


def test_category_update_rejects_null_tax_applicable():
    payload = UpdateCategoryInput.model_validate({"taxApplicable": None})
    with pytest.raises(ValidationError):
        menu_rules.validate_category_update(payload)


def test_inherit_tax_from_category_only_fills_omitted_fields():
    category = SimpleNamespace(tax_applicable=True, tax=5.0)

    omitted = CreateSubCategoryInput(name="Hot", image="h.png", description="Hot drinks", category_id="c1")
    values = menu_rules.inherit_tax_from_category(omitted, category)
    assert values["tax_applicable"] is True
    assert values["tax"] == 5.0

    explicit = CreateSubCategoryInput(
        name="Hot", image="h.png", description="Hot drinks", category_id="c1", tax_applicable=False, tax=0
    )
    values = menu_rules.inherit_tax_from_category(explicit, category)
    assert values["tax_applicable"] is False
    assert values["tax"] == 0


def test_item_create_accepts_either_parent_spelling():
    short = CreateItemInput.model_validate(
        {"name": "Tea", "image": "t.png", "description": "d", "taxApplicable": False, "baseAmount": 10, "category": "c1"}
    )
    long = CreateItemInput.model_validate(
        {"name": "Tea", "image": "t.png", "description": "d", "taxApplicable": False, "baseAmount": 10, "subCategoryId": "s1"}
    )
    assert menu_rules.validate_item_create(short)["category_id"] == "c1"
    assert menu_rules.validate_item_create(long)["sub_category_id"] == "s1"


def test_item_update_null_discount_is_zero():
    payload = UpdateItemInput.model_validate({"discount": None})
    assert menu_rules.validate_item_update(payload) == {"discount": 0}


@pytest.mark.parametrize(
    "changes, expected",
    [
        ({"base_amount": 150}, 130),
        ({"discount": 0}, 100),
        ({"base_amount": 50, "discount": 5}, 45),
        ({"name": "Tea"}, None),
    ],
)
def test_recompute_total_amount(changes, expected):
    stored = SimpleNamespace(base_amount=100, discount=20)
    assert menu_rules.recompute_total_amount(changes, stored) == expected


def test_recompute_total_amount_with_missing_stored_discount():
    stored = SimpleNamespace(base_amount=100, discount=None)
    assert menu_rules.recompute_total_amount({"base_amount": 60}, stored) == 60


def test_resolve_lookup_prefers_id():
    assert menu_rules.resolve_lookup("abc", "tea") == {"id": "abc"}
    assert menu_rules.resolve_lookup(None, " tea ") == {"name": "tea"}
    with pytest.raises(ValidationError) as exc:
        menu_rules.resolve_lookup("", None)
    assert exc.value.user_message == "Id or name is required"
