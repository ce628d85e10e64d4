"""Validation, tax inheritance and amount rules for menu entities.

All functions here are pure: they look only at the request schemas (and, for
inheritance and recomputation, at already-loaded rows) and either return the
values to persist or raise ``ValidationError``. Whether a field was "supplied"
is decided by key presence in the request body, so ``0``, ``false`` and
``null`` are all treated as deliberate values.
"""

from typing import Any, Dict, Iterable, Optional

from app.schemas.category import CreateCategoryInput, UpdateCategoryInput
from app.schemas.item import CreateItemInput, UpdateItemInput
from app.schemas.mixin import CamelModel
from app.schemas.sub_category import CreateSubCategoryInput, UpdateSubCategoryInput
from app.services.exceptions import ValidationError


ALL_FIELDS_REQUIRED = "All fields are required"
AT_LEAST_ONE_FIELD = "At least one field is required"
TAX_OR_TAX_TYPE_REQUIRED = "Tax or TaxType is required"
TAX_REQUIRED = "Tax is required"
ID_REQUIRED = "Id is required"
ID_OR_NAME_REQUIRED = "Id or name is required"
NAME_REQUIRED = "Name is required"

# Columns that may never be cleared by an update
NON_NULLABLE = {
	"category": ("name", "image", "description", "tax_applicable"),
	"sub_category": ("name", "image", "description"),
	"item": ("name", "image", "description", "base_amount"),
}


def _has_value(payload: CamelModel, field: str) -> bool:
	if not payload.supplied(field):
		return False
	value = getattr(payload, field)
	if value is None:
		return False
	if isinstance(value, str):
		return bool(value.strip())
	return True


def require_fields(payload: CamelModel, fields: Iterable[str], message: str = ALL_FIELDS_REQUIRED) -> None:
	"""Raise unless every field in ``fields`` was supplied with a usable value."""
	missing = [field for field in fields if not _has_value(payload, field)]
	if missing:
		raise ValidationError(message, field=", ".join(missing))


def require_any_field(payload: CamelModel) -> None:
	"""Raise when an update body carries no recognised field at all."""
	if not payload.model_fields_set:
		raise ValidationError(AT_LEAST_ONE_FIELD)


def reject_cleared_fields(payload: CamelModel, fields: Iterable[str]) -> None:
	"""Raise when a supplied field is null/blank but its column is required."""
	for field in fields:
		if payload.supplied(field) and not _has_value(payload, field):
			raise ValidationError(f"{field} cannot be empty", field=field)


def require_identifier(value: Optional[str], message: str = ID_REQUIRED) -> str:
	"""Return the stripped identifier or raise if it is blank."""
	if value is None or not value.strip():
		raise ValidationError(message)
	return value.strip()


def resolve_lookup(id: Optional[str], name: Optional[str]) -> Dict[str, str]:
	"""Pick the lookup key for an id-or-name query; ``id`` wins when both are set."""
	if id is not None and id.strip():
		return {"id": id.strip()}
	if name is not None and name.strip():
		return {"name": name.strip()}
	raise ValidationError(ID_OR_NAME_REQUIRED)


def compute_total_amount(base_amount: float, discount: Optional[float]) -> float:
	"""Total payable for an item: base amount minus discount (absent counts as 0)."""
	return base_amount - (discount or 0)


# =============================================================================
# CATEGORY
# =============================================================================

def validate_category_create(payload: CreateCategoryInput) -> Dict[str, Any]:
	"""Check a new category and return the column values to insert."""
	require_fields(payload, ("name", "image", "description", "tax_applicable"))

	if payload.tax_applicable and not (_has_value(payload, "tax") or _has_value(payload, "tax_type")):
		raise ValidationError(TAX_OR_TAX_TYPE_REQUIRED, field="tax")

	return {
		"name": payload.name,
		"image": payload.image,
		"description": payload.description,
		"tax_applicable": payload.tax_applicable,
		"tax": payload.tax,
		"tax_type": payload.tax_type,
	}


def validate_category_update(payload: UpdateCategoryInput) -> Dict[str, Any]:
	"""Check a category update and return only the supplied columns."""
	require_any_field(payload)

	if payload.supplied("tax_applicable") and payload.tax_applicable is True:
		if not (_has_value(payload, "tax") or _has_value(payload, "tax_type")):
			raise ValidationError(TAX_OR_TAX_TYPE_REQUIRED, field="tax")

	reject_cleared_fields(payload, NON_NULLABLE["category"])
	return payload.model_dump(exclude_unset=True)


# =============================================================================
# SUBCATEGORY
# =============================================================================

def validate_sub_category_create(payload: CreateSubCategoryInput) -> None:
	require_fields(payload, ("name", "image", "description", "category_id"))


def inherit_tax_from_category(payload: CreateSubCategoryInput, category: Any) -> Dict[str, Any]:
	"""Build subcategory columns, copying omitted tax fields from ``category``.

	The copy happens once, at creation; later changes to the category are not
	propagated.
	"""
	tax_applicable = payload.tax_applicable if payload.tax_applicable is not None else category.tax_applicable
	tax = payload.tax if payload.tax is not None else category.tax

	return {
		"name": payload.name,
		"image": payload.image,
		"description": payload.description,
		"tax_applicable": tax_applicable,
		"tax": tax,
		"category_id": payload.category_id,
	}


def validate_sub_category_update(payload: UpdateSubCategoryInput) -> Dict[str, Any]:
	require_any_field(payload)
	reject_cleared_fields(payload, NON_NULLABLE["sub_category"])
	return payload.model_dump(exclude_unset=True)


# =============================================================================
# ITEM
# =============================================================================

def validate_item_create(payload: CreateItemInput) -> Dict[str, Any]:
	"""Check a new item and return the column values to insert.

	Parent existence is checked by the service; this only requires that at
	least one parent reference was given.
	"""
	require_fields(payload, ("name", "image", "description", "tax_applicable", "base_amount"))
	if not (_has_value(payload, "sub_category_id") or _has_value(payload, "category_id")):
		raise ValidationError(ALL_FIELDS_REQUIRED, field="subCategory, category")

	if payload.base_amount <= 0:
		raise ValidationError("baseAmount must be greater than 0", field="base_amount")

	discount = payload.discount if payload.discount is not None else 0
	return {
		"name": payload.name,
		"image": payload.image,
		"description": payload.description,
		"tax_applicable": payload.tax_applicable,
		"tax": payload.tax,
		"base_amount": payload.base_amount,
		"discount": discount,
		"total_amount": compute_total_amount(payload.base_amount, discount),
		"sub_category_id": payload.sub_category_id if _has_value(payload, "sub_category_id") else None,
		"category_id": payload.category_id if _has_value(payload, "category_id") else None,
	}


def validate_item_update(payload: UpdateItemInput) -> Dict[str, Any]:
	"""Check an item update and return the supplied columns.

	``total_amount`` is not included; see ``recompute_total_amount``.
	"""
	require_any_field(payload)

	if payload.supplied("tax_applicable") and payload.tax_applicable is True and not _has_value(payload, "tax"):
		raise ValidationError(TAX_REQUIRED, field="tax")

	reject_cleared_fields(payload, NON_NULLABLE["item"])
	if payload.supplied("base_amount") and payload.base_amount <= 0:
		raise ValidationError("baseAmount must be greater than 0", field="base_amount")

	changes = payload.model_dump(exclude_unset=True)
	if "discount" in changes and changes["discount"] is None:
		changes["discount"] = 0
	return changes


def recompute_total_amount(changes: Dict[str, Any], item: Any) -> Optional[float]:
	"""New total for an item update, or None when neither amount was touched.

	Supplied values win; the stored values fill in whatever was not supplied.
	"""
	if "base_amount" not in changes and "discount" not in changes:
		return None
	base_amount = changes.get("base_amount", item.base_amount)
	discount = changes.get("discount", item.discount)
	return compute_total_amount(base_amount, discount)
