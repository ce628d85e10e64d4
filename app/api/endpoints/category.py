from typing import List, Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.api.router import create_router
from app.api.dependencies.database import get_db
from app.api.dependencies.services import get_category_service
from app.services.category_services import CategoryService
from app.schemas.category import CategoryRead, CreateCategoryInput, UpdateCategoryInput

router = create_router(name="categories")


@router.post("/category", status_code=201, response_model=CategoryRead)
def create_category(
	payload: CreateCategoryInput,
	db: Session = Depends(get_db),
	category_service: CategoryService = Depends(get_category_service)
):
	"""
	Create a category. When taxApplicable is true, tax or taxType must be given.
	"""
	return category_service.create_category(payload, db)


@router.get("/categories", response_model=List[CategoryRead])
def get_categories(category_service: CategoryService = Depends(get_category_service)):
	"""
	List every category; 404 when there are none.
	"""
	return category_service.list_categories()


@router.get("/category", response_model=CategoryRead)
def get_category(
	id: Optional[str] = Query(default=None),
	name: Optional[str] = Query(default=None),
	category_service: CategoryService = Depends(get_category_service)
):
	"""
	Get one category by id, or by a case-insensitive fragment of its name.
	"""
	return category_service.get_category(id=id, name=name)


@router.put("/category/{category_id}", response_model=CategoryRead)
def edit_category(
	category_id: str,
	payload: UpdateCategoryInput,
	db: Session = Depends(get_db),
	category_service: CategoryService = Depends(get_category_service)
):
	"""
	Update only the supplied fields of a category.
	"""
	return category_service.update_category(category_id, payload, db)
