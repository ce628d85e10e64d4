"""Category service: create, look up, list and update top-level menu groups."""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.domain import menu_rules
from app.services.base import BaseService
from app.services.exceptions import CategoryNotFoundError
from app.repositories.category import CategoryRepository
from app.db.models.category import Category
from app.schemas.category import CreateCategoryInput, UpdateCategoryInput


class CategoryService(BaseService):
    """Service class for handling category operations."""

    required_repositories = ("category_repo",)
    category_repo: CategoryRepository

    def create_category(self, payload: CreateCategoryInput, db: Session) -> Category:
        """Create a category.

        Categories are the root of the hierarchy, so tax fields are stored
        exactly as given.

        Raises:
            ValidationError: If required fields or tax information are missing
        """
        values = menu_rules.validate_category_create(payload)
        self.log_operation("create_category_attempt", tax_applicable=values["tax_applicable"])

        def _create_category() -> Category:
            category = self.category_repo.create(values)
            self.log_operation("create_category_success", category_id=category.id)
            return category

        return self.run_in_transaction(db, _create_category)

    def list_categories(self) -> List[Category]:
        categories = self.category_repo.get_multi()
        return self.ensure_not_empty(categories, "Category", "Categories not found")

    def get_category(self, id: Optional[str] = None, name: Optional[str] = None) -> Category:
        """Look a category up by id, or by case-insensitive name fragment.

        Raises:
            ValidationError: If neither id nor name is given
            CategoryNotFoundError: If nothing matches
        """
        lookup = menu_rules.resolve_lookup(id, name)
        if "id" in lookup:
            category = self.category_repo.get_by_id(lookup["id"])
        else:
            category = self.category_repo.get_first_by_name(lookup["name"])

        if not category:
            raise CategoryNotFoundError(
                category_id=lookup.get("id"),
                correlation_id=self.correlation_id
            )
        return category

    def update_category(self, category_id: str, payload: UpdateCategoryInput, db: Session) -> Category:
        """Apply a partial update to a category.

        Validation runs before any lookup so a rejected update never touches
        the stored row.

        Raises:
            ValidationError: If no field is supplied or tax information is missing
            CategoryNotFoundError: If the category does not exist
        """
        category_id = menu_rules.require_identifier(category_id)
        changes = menu_rules.validate_category_update(payload)
        self.log_operation("update_category_attempt", category_id=category_id, fields=sorted(changes))

        def _update_category() -> Category:
            if not self.category_repo.exists(category_id):
                raise CategoryNotFoundError(
                    category_id=category_id,
                    correlation_id=self.correlation_id
                )
            category = self.category_repo.update(category_id, changes)
            self.log_operation("update_category_success", category_id=category_id)
            return category

        return self.run_in_transaction(db, _update_category)
