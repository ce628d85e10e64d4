from typing import Optional

from pydantic import AliasChoices, Field, StrictBool

from app.schemas.mixin import CamelModel, TimestampModel


# Parent references are accepted under both the short and the *Id spelling
SUB_CATEGORY_ALIASES = AliasChoices("subCategory", "subCategoryId", "sub_category_id")
CATEGORY_ALIASES = AliasChoices("category", "categoryId", "category_id")


class ItemRead(TimestampModel):
	id: str
	name: str
	image: str
	description: str
	tax_applicable: Optional[bool] = None
	tax: Optional[float] = None
	base_amount: float
	discount: Optional[float] = None
	total_amount: float
	sub_category_id: Optional[str] = None
	category_id: Optional[str] = None


class CreateItemInput(CamelModel):
	"""Body of ``POST /item``."""
	name: Optional[str] = None
	image: Optional[str] = None
	description: Optional[str] = None
	tax_applicable: Optional[StrictBool] = None
	tax: Optional[float] = None
	base_amount: Optional[float] = None
	discount: Optional[float] = None
	sub_category_id: Optional[str] = Field(default=None, validation_alias=SUB_CATEGORY_ALIASES)
	category_id: Optional[str] = Field(default=None, validation_alias=CATEGORY_ALIASES)


class UpdateItemInput(CamelModel):
	"""Body of ``PUT /item/{id}``; only supplied keys are applied."""
	name: Optional[str] = None
	image: Optional[str] = None
	description: Optional[str] = None
	tax_applicable: Optional[StrictBool] = None
	tax: Optional[float] = None
	base_amount: Optional[float] = None
	discount: Optional[float] = None
	sub_category_id: Optional[str] = Field(default=None, validation_alias=SUB_CATEGORY_ALIASES)
	category_id: Optional[str] = Field(default=None, validation_alias=CATEGORY_ALIASES)
