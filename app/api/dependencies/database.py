"""Database session dependency."""

from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from app.db.session import Database


def get_database(request: Request) -> Database:
	"""Return the Database owned by the running application."""
	return request.app.state.database


def get_db(request: Request) -> Iterator[Session]:
	"""Yield one session per request and close it when the response is sent."""
	yield from get_database(request).session_scope()
