from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
	"""Snake_case attributes in Python, camelCase keys on the wire."""
	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		from_attributes=True,
	)

	def supplied(self, field: str) -> bool:
		"""True when the client sent ``field``, even as null, zero or false."""
		return field in self.model_fields_set


class TimestampModel(CamelModel):
	created_at: datetime
	updated_at: datetime


class ErrorMessage(BaseModel):
	message: str
