from typing import List, Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.api.router import create_router
from app.api.dependencies.database import get_db
from app.api.dependencies.services import get_sub_category_service
from app.services.sub_category_services import SubCategoryService
from app.schemas.sub_category import CreateSubCategoryInput, SubCategoryRead, UpdateSubCategoryInput

router = create_router(name="subcategories")


@router.post("/subcategory", status_code=200, response_model=SubCategoryRead)
def create_sub_category(
	payload: CreateSubCategoryInput,
	db: Session = Depends(get_db),
	sub_category_service: SubCategoryService = Depends(get_sub_category_service)
):
	"""
	Create a subcategory. Omitted taxApplicable/tax are copied from the parent category.
	"""
	return sub_category_service.create_sub_category(payload, db)


@router.get("/subcategories", response_model=List[SubCategoryRead])
def get_sub_categories(sub_category_service: SubCategoryService = Depends(get_sub_category_service)):
	return sub_category_service.list_sub_categories()


@router.get("/subcategories/category/{category_id}", response_model=List[SubCategoryRead])
def get_sub_categories_by_category(
	category_id: str,
	sub_category_service: SubCategoryService = Depends(get_sub_category_service)
):
	"""
	List the subcategories of one category.
	"""
	return sub_category_service.list_by_category(category_id)


@router.get("/subcategory", response_model=SubCategoryRead)
def get_sub_category(
	id: Optional[str] = Query(default=None),
	name: Optional[str] = Query(default=None),
	sub_category_service: SubCategoryService = Depends(get_sub_category_service)
):
	return sub_category_service.get_sub_category(id=id, name=name)


@router.put("/subcategory/{sub_category_id}", response_model=SubCategoryRead)
def edit_sub_category(
	sub_category_id: str,
	payload: UpdateSubCategoryInput,
	db: Session = Depends(get_db),
	sub_category_service: SubCategoryService = Depends(get_sub_category_service)
):
	return sub_category_service.update_sub_category(sub_category_id, payload, db)
