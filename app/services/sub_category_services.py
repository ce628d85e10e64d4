"""SubCategory service: mid-level menu groups owned by a category."""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.domain import menu_rules
from app.services.base import BaseService
from app.services.exceptions import CategoryNotFoundError, SubCategoryNotFoundError
from app.repositories.category import CategoryRepository
from app.repositories.sub_category import SubCategoryRepository
from app.db.models.sub_category import SubCategory
from app.schemas.sub_category import CreateSubCategoryInput, UpdateSubCategoryInput


class SubCategoryService(BaseService):
    """Service class for handling subcategory operations.

    Tax fields omitted at creation are copied from the parent category as it
    is at that moment.
    """

    required_repositories = ("sub_category_repo", "category_repo")
    sub_category_repo: SubCategoryRepository
    category_repo: CategoryRepository

    def create_sub_category(self, payload: CreateSubCategoryInput, db: Session) -> SubCategory:
        """Create a subcategory under an existing category.

        Raises:
            ValidationError: If a required field is missing
            CategoryNotFoundError: If the parent category does not exist
        """
        menu_rules.validate_sub_category_create(payload)
        self.log_operation("create_sub_category_attempt", category_id=payload.category_id)

        def _create_sub_category() -> SubCategory:
            category = self.category_repo.get_by_id(payload.category_id)
            if not category:
                raise CategoryNotFoundError(
                    category_id=payload.category_id,
                    correlation_id=self.correlation_id,
                    user_message="Category not found, unable to create subcategory"
                )

            values = menu_rules.inherit_tax_from_category(payload, category)
            sub_category = self.sub_category_repo.create(values)
            self.log_operation(
                "create_sub_category_success",
                sub_category_id=sub_category.id,
                category_id=category.id,
                inherited_tax=payload.tax is None
            )
            return sub_category

        return self.run_in_transaction(db, _create_sub_category)

    def list_sub_categories(self) -> List[SubCategory]:
        sub_categories = self.sub_category_repo.get_multi()
        return self.ensure_not_empty(sub_categories, "SubCategory", "SubCategories not found")

    def list_by_category(self, category_id: str) -> List[SubCategory]:
        category_id = menu_rules.require_identifier(category_id)
        sub_categories = self.sub_category_repo.get_by_category(category_id)
        return self.ensure_not_empty(
            sub_categories, "SubCategory", "SubCategories not found", category_id=category_id
        )

    def get_sub_category(self, id: Optional[str] = None, name: Optional[str] = None) -> SubCategory:
        lookup = menu_rules.resolve_lookup(id, name)
        if "id" in lookup:
            sub_category = self.sub_category_repo.get_by_id(lookup["id"])
        else:
            sub_category = self.sub_category_repo.get_first_by_name(lookup["name"])

        if not sub_category:
            raise SubCategoryNotFoundError(
                sub_category_id=lookup.get("id"),
                correlation_id=self.correlation_id
            )
        return sub_category

    def update_sub_category(self, sub_category_id: str, payload: UpdateSubCategoryInput, db: Session) -> SubCategory:
        """Apply a partial update to a subcategory.

        Raises:
            ValidationError: If no field is supplied
            SubCategoryNotFoundError: If the subcategory does not exist
        """
        sub_category_id = menu_rules.require_identifier(sub_category_id)
        changes = menu_rules.validate_sub_category_update(payload)
        self.log_operation("update_sub_category_attempt", sub_category_id=sub_category_id, fields=sorted(changes))

        def _update_sub_category() -> SubCategory:
            if not self.sub_category_repo.exists(sub_category_id):
                raise SubCategoryNotFoundError(
                    sub_category_id=sub_category_id,
                    correlation_id=self.correlation_id
                )
            sub_category = self.sub_category_repo.update(sub_category_id, changes)
            self.log_operation("update_sub_category_success", sub_category_id=sub_category_id)
            return sub_category

        return self.run_in_transaction(db, _update_sub_category)
