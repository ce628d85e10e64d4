"""Item repository for item-related database operations."""

from typing import Optional, List
from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.db.models.item import Item


class ItemRepository(BaseRepository[Item]):
    """Repository for Item entity operations."""

    def __init__(self, db: Session, correlation_id: Optional[str] = None):
        super().__init__(db, Item, correlation_id)

    def get_by_category(self, category_id: str) -> List[Item]:
        """Get all items attached directly to a category.

        Args:
            category_id: Category ID to filter by

        Returns:
            List of Item instances for the category
        """
        return self.get_multi(filters={"category_id": category_id})

    def get_by_sub_category(self, sub_category_id: str) -> List[Item]:
        """Get all items attached to a subcategory.

        Args:
            sub_category_id: SubCategory ID to filter by

        Returns:
            List of Item instances for the subcategory
        """
        return self.get_multi(filters={"sub_category_id": sub_category_id})
