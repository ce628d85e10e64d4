"""Database lifecycle management.

The application owns exactly one ``Database`` instance which is constructed
from settings, connected when the app starts and closed when it stops. Request
handlers never touch the engine directly; they receive sessions through the
``get_db`` dependency.
"""

import logging
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.db.base_class import Base


logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
	cursor = dbapi_connection.cursor()
	cursor.execute("PRAGMA foreign_keys=ON")
	cursor.close()


class Database:
	"""Owns the SQLAlchemy engine and session factory for one database URL."""

	def __init__(self, url: str, echo: bool = False, create_tables: bool = False):
		self.url = url
		self.echo = echo
		self.create_tables = create_tables
		self._engine: Optional[Engine] = None
		self._session_factory: Optional[sessionmaker] = None

	@property
	def engine(self) -> Engine:
		if self._engine is None:
			raise RuntimeError("Database is not connected")
		return self._engine

	@property
	def is_connected(self) -> bool:
		return self._engine is not None

	def connect(self) -> None:
		"""Create the engine, session factory and (optionally) the schema."""
		if self._engine is not None:
			return

		connect_args = {}
		if self.url.startswith("sqlite"):
			# Sessions are used from FastAPI's threadpool
			connect_args["check_same_thread"] = False

		engine = create_engine(self.url, echo=self.echo, connect_args=connect_args, pool_pre_ping=True)
		if engine.dialect.name == "sqlite":
			event.listen(engine, "connect", _enable_sqlite_foreign_keys)

		self._engine = engine
		self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

		if self.create_tables:
			# Import models so every table is registered on the metadata
			from app.db import base  # noqa: F401
			Base.metadata.create_all(bind=engine)

		logger.info("Database connected", extra={"dialect": engine.dialect.name})

	def close(self) -> None:
		if self._engine is None:
			return
		self._engine.dispose()
		self._engine = None
		self._session_factory = None
		logger.info("Database connection closed")

	def session(self) -> Session:
		if self._session_factory is None:
			raise RuntimeError("Database is not connected")
		return self._session_factory()

	def session_scope(self) -> Iterator[Session]:
		"""Yield a session and always close it afterwards."""
		db = self.session()
		try:
			yield db
		finally:
			db.close()
