from typing import Optional

from pydantic import StrictBool

from app.schemas.mixin import CamelModel, TimestampModel


class CategoryRead(TimestampModel):
	id: str
	name: str
	image: str
	description: str
	tax_applicable: bool
	tax: Optional[float] = None
	tax_type: Optional[str] = None


class CreateCategoryInput(CamelModel):
	"""Body of ``POST /category``.

	Every field is optional at the schema level so that missing values are
	reported with the domain message rather than a generic schema error.
	"""
	name: Optional[str] = None
	image: Optional[str] = None
	description: Optional[str] = None
	tax_applicable: Optional[StrictBool] = None
	tax: Optional[float] = None
	tax_type: Optional[str] = None


class UpdateCategoryInput(CamelModel):
	"""Body of ``PUT /category/{id}``; only supplied keys are applied."""
	name: Optional[str] = None
	image: Optional[str] = None
	description: Optional[str] = None
	tax_applicable: Optional[StrictBool] = None
	tax: Optional[float] = None
	tax_type: Optional[str] = None
