"""Service dependency providers for FastAPI dependency injection."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from typing import Optional

from app.api.dependencies.database import get_db
from app.services.category_services import CategoryService
from app.services.sub_category_services import SubCategoryService
from app.services.item_services import ItemService
from app.repositories.category import CategoryRepository
from app.repositories.sub_category import SubCategoryRepository
from app.repositories.item import ItemRepository


def get_correlation_id(request: Request) -> Optional[str]:
	"""Extract or generate correlation ID for logging and tracing."""
	from app.core.observability import generate_correlation_id
	cid = getattr(request.state, "correlation_id", None)
	if not cid:
		cid = generate_correlation_id(request.headers.get("X-Correlation-ID"))
		setattr(request.state, "correlation_id", cid)
	return cid


# Repository Dependencies
def get_category_repository(
    db: Session = Depends(get_db),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> CategoryRepository:
    """Provide CategoryRepository instance."""
    return CategoryRepository(db=db, correlation_id=correlation_id)


def get_sub_category_repository(
    db: Session = Depends(get_db),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> SubCategoryRepository:
    """Provide SubCategoryRepository instance."""
    return SubCategoryRepository(db=db, correlation_id=correlation_id)


def get_item_repository(
    db: Session = Depends(get_db),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> ItemRepository:
    """Provide ItemRepository instance."""
    return ItemRepository(db=db, correlation_id=correlation_id)


# Service Dependencies
def get_category_service(
    category_repo: CategoryRepository = Depends(get_category_repository),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> CategoryService:
    """Provide CategoryService instance with its repository and correlation ID.

    Args:
        category_repo: Category repository from dependency injection
        correlation_id: Optional correlation ID from request headers

    Returns:
        Configured CategoryService instance
    """
    return CategoryService(correlation_id=correlation_id, category_repo=category_repo)


def get_sub_category_service(
    sub_category_repo: SubCategoryRepository = Depends(get_sub_category_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> SubCategoryService:
    """Provide SubCategoryService instance with required repositories."""
    return SubCategoryService(
        correlation_id=correlation_id,
        sub_category_repo=sub_category_repo,
        category_repo=category_repo
    )


def get_item_service(
    item_repo: ItemRepository = Depends(get_item_repository),
    sub_category_repo: SubCategoryRepository = Depends(get_sub_category_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> ItemService:
    """Provide ItemService instance with required repositories.

    All three repositories share the request's session, so parent checks and
    the write happen in the same transaction.

    Args:
        item_repo: Item repository from dependency injection
        sub_category_repo: SubCategory repository from dependency injection
        category_repo: Category repository from dependency injection
        correlation_id: Optional correlation ID from request headers

    Returns:
        Configured ItemService instance
    """
    return ItemService(
        correlation_id=correlation_id,
        item_repo=item_repo,
        sub_category_repo=sub_category_repo,
        category_repo=category_repo
    )
