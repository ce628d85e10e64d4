from __future__ import annotations

import logging
import sys
import time
import uuid
from random import random
from typing import Callable, Optional, Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.core.config import settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s"
HANDLER_NAME = "menu-api-console"

logger = logging.getLogger("app.requests")


def configure_logging(level: Optional[str] = None) -> None:
	"""Install a console handler on the root logger once."""
	root = logging.getLogger()
	root.setLevel((level or settings.LOG_LEVEL).upper())
	if any(handler.get_name() == HANDLER_NAME for handler in root.handlers):
		return

	handler = logging.StreamHandler(sys.stdout)
	handler.set_name(HANDLER_NAME)
	handler.setFormatter(logging.Formatter(LOG_FORMAT))
	root.addHandler(handler)


def generate_correlation_id(existing: Optional[str]) -> str:
	if existing and existing.strip():
		return existing.strip()
	return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Middleware to log inbound HTTP requests with correlation IDs."""

	async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
		correlation_id = generate_correlation_id(request.headers.get("X-Correlation-ID"))
		setattr(request.state, "correlation_id", correlation_id)

		if not settings.ENABLE_REQUEST_LOGGING:
			response = await call_next(request)
			response.headers["X-Correlation-ID"] = correlation_id
			return response

		sampled_out = settings.LOG_SAMPLE_RATE < 1.0 and random() > float(settings.LOG_SAMPLE_RATE)

		start_ns = time.monotonic_ns()
		status_code: int = 500
		try:
			response = await call_next(request)
			status_code = response.status_code
		finally:
			duration_ms = int((time.monotonic_ns() - start_ns) / 1_000_000)
			if not sampled_out:
				logger.info(
					f"{request.method} {request.url.path} -> {status_code} ({duration_ms} ms)",
					extra=_build_inbound_payload(request, correlation_id, status_code, duration_ms),
				)

		response.headers["X-Correlation-ID"] = correlation_id
		return response


def _build_inbound_payload(request: Request, correlation_id: str, status_code: int, duration_ms: int) -> dict:
	# Route template may be unavailable for 404 or early errors
	route = request.scope.get("route")
	path_template = getattr(route, "path", None) if route is not None else None

	xff = request.headers.get("x-forwarded-for")
	client_ip = (xff.split(",")[0].strip() if xff else (request.client.host if request.client else None))

	return {
		"correlation_id": correlation_id,
		"method": request.method,
		"raw_path": request.url.path,
		"path_template": path_template or request.url.path,
		"status_code": status_code,
		"duration_ms": duration_ms,
		"client_ip": client_ip,
		"user_agent": (request.headers.get("user-agent") or "")[:256],
	}
