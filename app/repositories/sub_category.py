"""SubCategory repository for subcategory-related database operations."""

from typing import Optional, List
from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.db.models.sub_category import SubCategory


class SubCategoryRepository(BaseRepository[SubCategory]):
    """Repository for SubCategory entity operations."""

    def __init__(self, db: Session, correlation_id: Optional[str] = None):
        super().__init__(db, SubCategory, correlation_id)

    def get_by_category(self, category_id: str) -> List[SubCategory]:
        """Get all subcategories belonging to a category.

        Args:
            category_id: Parent category ID

        Returns:
            List of SubCategory instances in creation order
        """
        return self.get_multi(filters={"category_id": category_id})
