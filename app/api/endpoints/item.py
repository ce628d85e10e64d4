from typing import List, Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.api.router import create_router
from app.api.dependencies.database import get_db
from app.api.dependencies.services import get_item_service
from app.services.item_services import ItemService
from app.schemas.item import CreateItemInput, ItemRead, UpdateItemInput

router = create_router(name="items")


@router.post("/item", status_code=201, response_model=ItemRead)
def create_item(
	payload: CreateItemInput,
	db: Session = Depends(get_db),
	item_service: ItemService = Depends(get_item_service)
):
	"""
	Create an item under a subcategory and/or a category.

	totalAmount is computed as baseAmount - discount; discount defaults to 0.
	"""
	return item_service.create_item(payload, db)


@router.get("/items", response_model=List[ItemRead])
def get_items(item_service: ItemService = Depends(get_item_service)):
	return item_service.list_items()


@router.get("/item/search", response_model=List[ItemRead])
def search_items(
	name: Optional[str] = Query(default=None),
	item_service: ItemService = Depends(get_item_service)
):
	"""
	Search items whose name contains the given text, ignoring case.
	"""
	return item_service.search_items(name)


@router.get("/item", response_model=ItemRead)
def get_item(
	id: Optional[str] = Query(default=None),
	name: Optional[str] = Query(default=None),
	item_service: ItemService = Depends(get_item_service)
):
	return item_service.get_item(id=id, name=name)


@router.get("/item/category/{category_id}", response_model=List[ItemRead])
def get_items_by_category(
	category_id: str,
	item_service: ItemService = Depends(get_item_service)
):
	return item_service.list_by_category(category_id)


@router.get("/item/subcategory/{sub_category_id}", response_model=List[ItemRead])
def get_items_by_sub_category(
	sub_category_id: str,
	item_service: ItemService = Depends(get_item_service)
):
	return item_service.list_by_sub_category(sub_category_id)


@router.put("/item/{item_id}", response_model=ItemRead)
def edit_item(
	item_id: str,
	payload: UpdateItemInput,
	db: Session = Depends(get_db),
	item_service: ItemService = Depends(get_item_service)
):
	"""
	Update only the supplied fields of an item. totalAmount is recomputed when
	baseAmount or discount is part of the update.
	"""
	return item_service.update_item(item_id, payload, db)
