from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from fastapi import APIRouter, Depends

from app.schemas.mixin import ErrorMessage


# Shared default error responses for all routers for consistency
DEFAULT_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorMessage, "description": "Bad Request"},
    404: {"model": ErrorMessage, "description": "Not Found"},
    500: {"model": ErrorMessage, "description": "Internal Server Error"},
}


def create_router(
    *,
    name: Optional[str] = None,
    dependencies: Optional[Sequence[Depends]] = None,
    default_responses: Optional[Dict[int, Dict[str, Any]]] = None,
) -> APIRouter:
    """Create a pre-configured APIRouter with standardized defaults.

    Args:
        name: Optional logical name for the router; used as its OpenAPI tag.
        dependencies: Optional dependencies applied to all routes in the router.
        default_responses: Optional map to override default error responses.

    Returns:
        Configured APIRouter instance.
    """
    router = APIRouter(
        dependencies=list(dependencies) if dependencies else None,
        responses=(default_responses or DEFAULT_ERROR_RESPONSES),
        tags=[name] if name else None,
    )
    if name:
        setattr(router, "name", name)
    return router
