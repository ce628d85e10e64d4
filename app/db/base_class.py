import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_id() -> str:
	return str(uuid.uuid4())


def utcnow() -> datetime:
	# Microsecond precision; SQLite's CURRENT_TIMESTAMP only has whole seconds
	return datetime.now(timezone.utc)


class IdentityMixin:
	# Opaque string identity, assigned once on insert
	id = Column(String(36), primary_key=True, default=generate_id, index=True)


class AuditMixin:
	created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
	updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
