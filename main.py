from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.api.endpoints import category, sub_category, item
from app.api.errors import register_exception_handlers
from app.core.config import settings
from app.core.observability import RequestLoggingMiddleware, configure_logging
# Import all models to ensure relationships are properly resolved
from app.db import base  # noqa: F401
from app.db.session import Database


def create_app(database: Optional[Database] = None) -> FastAPI:
	"""Build the application around an explicitly constructed Database.

	The database is connected when the app starts serving and closed when it
	shuts down.
	"""
	configure_logging()
	database = database or Database(
		settings.DATABASE_URL,
		echo=settings.SQL_ECHO,
		create_tables=settings.CREATE_TABLES_ON_STARTUP,
	)

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		database.connect()
		try:
			yield
		finally:
			database.close()

	app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
	app.state.database = database

	app.add_middleware(RequestLoggingMiddleware)
	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.CORS_ORIGINS,
		allow_methods=["*"],
		allow_headers=["*"],
		expose_headers=["X-Correlation-ID"],
	)
	register_exception_handlers(app)

	@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
	def root():
		return "Server is running!"

	app.include_router(category.router, prefix=settings.API_PREFIX)
	app.include_router(sub_category.router, prefix=settings.API_PREFIX)
	app.include_router(item.router, prefix=settings.API_PREFIX)
	return app


app = create_app()


if __name__ == "__main__":
	uvicorn.run(app, host=settings.HOST, port=settings.PORT)
