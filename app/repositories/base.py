"""Base repository class with common CRUD operations."""

import logging
from abc import ABC
from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.db.base_class import Base, utcnow

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType")
UpdateSchemaType = TypeVar("UpdateSchemaType")

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term is matched literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class BaseRepository(Generic[ModelType], ABC):
    """Base repository class providing common CRUD operations.

    Provides:
    - Create, read and partial update
    - Equality filtering and case-insensitive name matching
    - Structured logging for data operations
    """

    def __init__(self, db: Session, model: Type[ModelType], correlation_id: Optional[str] = None):
        """Initialize repository with database session and model type.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
            correlation_id: Optional request correlation ID for logging
        """
        self.db = db
        self.model = model
        self.correlation_id = correlation_id
        self.logger = logging.getLogger(self.__class__.__name__)

    def create(self, obj_in: CreateSchemaType, **kwargs: Any) -> ModelType:
        """Create a new record in the database.

        Args:
            obj_in: Pydantic model or dict with creation data
            **kwargs: Additional fields to set on the model

        Returns:
            Created model instance

        Raises:
            SQLAlchemyError: On database operation failure
        """
        try:
            if hasattr(obj_in, 'model_dump'):
                # Pydantic model
                obj_data = obj_in.model_dump(exclude_unset=True)
            else:
                # Dictionary
                obj_data = dict(obj_in)

            obj_data.update(kwargs)
            db_obj = self.model(**obj_data)

            self.db.add(db_obj)
            self.db.flush()
            self.db.refresh(db_obj)

            self._log_operation("create", model=self.model.__name__, id=getattr(db_obj, 'id', None))
            return db_obj

        except SQLAlchemyError as e:
            self.logger.error(
                f"Failed to create {self.model.__name__}",
                extra={
                    "correlation_id": self.correlation_id,
                    "repository": self.__class__.__name__,
                    "error": str(e)
                }
            )
            raise

    def get_by_id(self, id: str) -> Optional[ModelType]:
        """Get a record by ID.

        Args:
            id: Record ID

        Returns:
            Model instance or None if not found
        """
        result = self.db.query(self.model).filter(self.model.id == id).first()
        self._log_operation("get_by_id", model=self.model.__name__, id=id, found=result is not None)
        return result

    def get_multi(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = "created_at"
    ) -> List[ModelType]:
        """Get all records matching equality filters.

        Args:
            filters: Dictionary of field filters
            order_by: Field name to order by (ascending)

        Returns:
            List of model instances
        """
        query = self.db.query(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.filter(getattr(self.model, field) == value)
                else:
                    self._log_operation("get_multi_filter_field_not_found", model=self.model.__name__, field=field)

        if order_by and hasattr(self.model, order_by):
            # id breaks ties between rows sharing a timestamp
            query = query.order_by(getattr(self.model, order_by), self.model.id)

        results = query.all()
        self._log_operation(
            "get_multi",
            model=self.model.__name__,
            count=len(results),
            filters=filters or {}
        )
        return results

    def _name_contains(self, name: str):
        return self.db.query(self.model).filter(
            self.model.name.ilike(f"%{escape_like(name)}%", escape=LIKE_ESCAPE)
        ).order_by(self.model.created_at, self.model.id)

    def get_first_by_name(self, name: str) -> Optional[ModelType]:
        """Get the first record whose name contains ``name`` (case-insensitive).

        Args:
            name: Substring to look for

        Returns:
            Earliest created matching instance or None
        """
        result = self._name_contains(name).first()
        self._log_operation("get_first_by_name", model=self.model.__name__, term=name, found=result is not None)
        return result

    def search_by_name(self, name: str) -> List[ModelType]:
        """Get every record whose name contains ``name`` (case-insensitive).

        Args:
            name: Substring to look for

        Returns:
            List of matching instances in creation order
        """
        results = self._name_contains(name).all()
        self._log_operation("search_by_name", model=self.model.__name__, term=name, count=len(results))
        return results

    def update(self, id: str, obj_in: UpdateSchemaType, **kwargs: Any) -> Optional[ModelType]:
        """Update a record by ID.

        Only the keys present in ``obj_in`` (or set on a Pydantic model) are
        written; ``updated_at`` is refreshed on every call.

        Args:
            id: Record ID
            obj_in: Pydantic model or dict with update data
            **kwargs: Additional fields to update

        Returns:
            Updated model instance or None if not found

        Raises:
            SQLAlchemyError: On database operation failure
        """
        try:
            db_obj = self.get_by_id(id)
            if not db_obj:
                return None

            if hasattr(obj_in, 'model_dump'):
                # Pydantic model
                update_data = obj_in.model_dump(exclude_unset=True)
            else:
                # Dictionary
                update_data = dict(obj_in)

            update_data.update(kwargs)
            update_data.pop("id", None)

            for field, value in update_data.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)

            if hasattr(db_obj, "updated_at"):
                db_obj.updated_at = utcnow()

            self.db.flush()
            self.db.refresh(db_obj)

            self._log_operation("update", model=self.model.__name__, id=id, fields=sorted(update_data))
            return db_obj

        except SQLAlchemyError as e:
            self.logger.error(
                f"Failed to update {self.model.__name__} with id {id}",
                extra={
                    "correlation_id": self.correlation_id,
                    "repository": self.__class__.__name__,
                    "error": str(e)
                }
            )
            raise

    def exists(self, id: str) -> bool:
        """Check if a record exists by ID.

        Args:
            id: Record ID

        Returns:
            True if record exists, False otherwise
        """
        result = self.db.query(self.model.id).filter(self.model.id == id).first() is not None
        self._log_operation("exists", model=self.model.__name__, id=id, exists=result)
        return result

    def _log_operation(self, operation: str, **kwargs: Any) -> None:
        """Log repository operation with structured fields.

        Args:
            operation: Name of the operation being performed
            **kwargs: Additional fields to include in log
        """
        log_data = {
            "correlation_id": self.correlation_id,
            "repository": self.__class__.__name__,
            "operation": operation,
            **kwargs
        }
        self.logger.debug(f"Repository operation: {operation}", extra=log_data)
