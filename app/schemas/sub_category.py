from typing import Optional

from pydantic import StrictBool

from app.schemas.mixin import CamelModel, TimestampModel


class SubCategoryRead(TimestampModel):
	id: str
	name: str
	image: str
	description: str
	tax_applicable: Optional[bool] = None
	tax: Optional[float] = None
	category_id: str


class CreateSubCategoryInput(CamelModel):
	"""Body of ``POST /subcategory``. Omitted tax fields are inherited."""
	name: Optional[str] = None
	image: Optional[str] = None
	description: Optional[str] = None
	tax_applicable: Optional[StrictBool] = None
	tax: Optional[float] = None
	category_id: Optional[str] = None


class UpdateSubCategoryInput(CamelModel):
	name: Optional[str] = None
	image: Optional[str] = None
	description: Optional[str] = None
	tax_applicable: Optional[StrictBool] = None
	tax: Optional[float] = None
