"""Exception handlers mapping failures to ``{"message": ...}`` responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.services.exceptions import ErrorSeverity, ServiceError, create_error_response

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Something went wrong"


def _correlation_id(request: Request):
	return getattr(request.state, "correlation_id", None)


def _describe_validation_error(exc: RequestValidationError) -> str:
	errors = exc.errors()
	if not errors:
		return "Invalid request"
	first = errors[0]
	# Drop the "body"/"query" prefix FastAPI puts in front of the field path
	location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
	if first.get("type") == "json_invalid":
		return "Request body is not valid JSON"
	if not location:
		return first.get("msg", "Invalid request")
	return f"Invalid {'.'.join(location)}: {first.get('msg', 'invalid value')}"


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
	log = logger.error if exc.severity in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL) else logger.info
	log(
		"Service error",
		extra={
			"correlation_id": exc.correlation_id or _correlation_id(request),
			"error": exc.to_dict(include_sensitive=True),
		},
	)
	return JSONResponse(status_code=exc.http_status.value, content=create_error_response(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
	message = _describe_validation_error(exc)
	logger.info(
		"Request validation failed",
		extra={"correlation_id": _correlation_id(request), "error": message},
	)
	return JSONResponse(status_code=400, content={"message": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
	return JSONResponse(
		status_code=exc.status_code,
		content={"message": str(exc.detail)},
		headers=getattr(exc, "headers", None),
	)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
	# Reads reach the database outside run_in_transaction and surface here
	logger.error(
		"Database error",
		exc_info=exc,
		extra={"correlation_id": _correlation_id(request), "error_type": type(exc).__name__},
	)
	return JSONResponse(status_code=500, content={"message": UNEXPECTED_ERROR_MESSAGE})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
	logger.exception(
		"Unhandled error",
		extra={"correlation_id": _correlation_id(request), "error_type": type(exc).__name__},
	)
	return JSONResponse(status_code=500, content={"message": UNEXPECTED_ERROR_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
	app.add_exception_handler(ServiceError, service_error_handler)
	app.add_exception_handler(RequestValidationError, request_validation_handler)
	app.add_exception_handler(StarletteHTTPException, http_exception_handler)
	app.add_exception_handler(SQLAlchemyError, database_error_handler)
	app.add_exception_handler(Exception, unhandled_exception_handler)
