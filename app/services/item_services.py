"""Item service providing menu item management operations.

Items carry the only derived value in the menu: ``total_amount`` is kept equal
to ``base_amount - discount`` whenever either amount is written.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.domain import menu_rules
from app.services.base import BaseService
from app.services.exceptions import (
    CategoryNotFoundError,
    ItemNotFoundError,
    SubCategoryNotFoundError,
    ValidationError
)
from app.repositories.category import CategoryRepository
from app.repositories.item import ItemRepository
from app.repositories.sub_category import SubCategoryRepository
from app.db.models.item import Item
from app.schemas.item import CreateItemInput, UpdateItemInput


class ItemService(BaseService):
    """Service class for handling item operations."""

    required_repositories = ("item_repo", "sub_category_repo", "category_repo")
    item_repo: ItemRepository
    sub_category_repo: SubCategoryRepository
    category_repo: CategoryRepository

    def _ensure_parents_exist(
        self,
        sub_category_id: Optional[str],
        category_id: Optional[str],
        action: str
    ) -> None:
        """Raise NotFound for any referenced parent that does not resolve.

        Args:
            sub_category_id: SubCategory reference, or None when not given
            category_id: Category reference, or None when not given
            action: "create" or "edit", used in the client message
        """
        if sub_category_id is not None and not self.sub_category_repo.exists(sub_category_id):
            raise SubCategoryNotFoundError(
                sub_category_id=sub_category_id,
                correlation_id=self.correlation_id,
                user_message=f"SubCategory not found, unable to {action} item"
            )
        if category_id is not None and not self.category_repo.exists(category_id):
            raise CategoryNotFoundError(
                category_id=category_id,
                correlation_id=self.correlation_id,
                user_message=f"Category not found, unable to {action} item"
            )

    def create_item(self, payload: CreateItemInput, db: Session) -> Item:
        """Create an item under a subcategory and/or a category.

        Raises:
            ValidationError: If a required field or both parents are missing
            SubCategoryNotFoundError: If the referenced subcategory does not exist
            CategoryNotFoundError: If the referenced category does not exist
        """
        values = menu_rules.validate_item_create(payload)
        self.log_operation(
            "create_item_attempt",
            sub_category_id=values["sub_category_id"],
            category_id=values["category_id"]
        )

        def _create_item() -> Item:
            self._ensure_parents_exist(values["sub_category_id"], values["category_id"], "create")
            item = self.item_repo.create(values)
            self.log_operation("create_item_success", item_id=item.id, total_amount=item.total_amount)
            return item

        return self.run_in_transaction(db, _create_item)

    def list_items(self) -> List[Item]:
        return self.ensure_not_empty(self.item_repo.get_multi(), "Item", "Items not found")

    def list_by_category(self, category_id: str) -> List[Item]:
        category_id = menu_rules.require_identifier(category_id)
        items = self.item_repo.get_by_category(category_id)
        return self.ensure_not_empty(items, "Item", "Items not found", category_id=category_id)

    def list_by_sub_category(self, sub_category_id: str) -> List[Item]:
        sub_category_id = menu_rules.require_identifier(sub_category_id)
        items = self.item_repo.get_by_sub_category(sub_category_id)
        return self.ensure_not_empty(items, "Item", "Items not found", sub_category_id=sub_category_id)

    def search_items(self, name: Optional[str]) -> List[Item]:
        """Case-insensitive substring search over item names."""
        if name is None or not name.strip():
            raise ValidationError(menu_rules.NAME_REQUIRED, field="name")
        items = self.item_repo.search_by_name(name.strip())
        return self.ensure_not_empty(items, "Item", "items not found", name=name.strip())

    def get_item(self, id: Optional[str] = None, name: Optional[str] = None) -> Item:
        lookup = menu_rules.resolve_lookup(id, name)
        if "id" in lookup:
            item = self.item_repo.get_by_id(lookup["id"])
        else:
            item = self.item_repo.get_first_by_name(lookup["name"])

        if not item:
            raise ItemNotFoundError(item_id=lookup.get("id"), correlation_id=self.correlation_id)
        return item

    def update_item(self, item_id: str, payload: UpdateItemInput, db: Session) -> Item:
        """Apply a partial update to an item, recomputing its total if needed.

        Raises:
            ValidationError: If no field is supplied or tax is missing
            ItemNotFoundError: If the item does not exist
            SubCategoryNotFoundError: If a supplied subcategory does not exist
            CategoryNotFoundError: If a supplied category does not exist
        """
        item_id = menu_rules.require_identifier(item_id)
        changes = menu_rules.validate_item_update(payload)
        self.log_operation("update_item_attempt", item_id=item_id, fields=sorted(changes))

        def _update_item() -> Item:
            item = self.item_repo.get_by_id(item_id)
            if not item:
                raise ItemNotFoundError(
                    item_id=item_id,
                    correlation_id=self.correlation_id,
                    user_message="Item not found with given id"
                )

            self._ensure_parents_exist(
                changes.get("sub_category_id"),
                changes.get("category_id"),
                "edit"
            )

            total_amount = menu_rules.recompute_total_amount(changes, item)
            if total_amount is not None:
                changes["total_amount"] = total_amount

            updated = self.item_repo.update(item_id, changes)
            self.log_operation("update_item_success", item_id=item_id, total_amount=updated.total_amount)
            return updated

        return self.run_in_transaction(db, _update_item)
