"""Category repository for category-related database operations."""

from typing import Optional
from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.db.models.category import Category


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category entity operations."""

    def __init__(self, db: Session, correlation_id: Optional[str] = None):
        super().__init__(db, Category, correlation_id)
