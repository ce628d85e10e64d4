"""Base service class with common functionality for all services."""

import logging
from typing import Optional, Callable, TypeVar, Any, List, Sequence
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.services.exceptions import EmptyResultError, PersistenceError, ServiceError

T = TypeVar("T")


class BaseService:
    """Base service class providing common functionality for all services.

    Provides:
    - Transaction handling with rollback
    - Structured logging with correlation ID
    - Common error handling patterns
    - Repository coordination for business operations
    """

    required_repositories: Sequence[str] = ()

    def __init__(self, correlation_id: Optional[str] = None, **repositories):
        """Initialize base service with optional correlation ID.

        Args:
            correlation_id: Optional request correlation ID for logging
            **repositories: Named repository instances
        """
        self.correlation_id = correlation_id
        self.logger = logging.getLogger(self.__class__.__name__)
        if repositories:
            self._set_repositories(**repositories)

        # Ensure required repositories are available
        for name in self.required_repositories:
            if not hasattr(self, name):
                raise RuntimeError(f"{name} is required for {self.__class__.__name__}")

    def _set_repositories(self, **repositories):
        """Set repository instances for this service.

        Args:
            **repositories: Named repository instances
        """
        for name, repo in repositories.items():
            setattr(self, name, repo)

    def run_in_transaction(self, db: Session, operation: Callable[[], T]) -> T:
        """Execute operation within a database transaction.

        Commits on success, rolls back on any exception. Database errors are
        re-raised as ``PersistenceError``; service errors pass through.

        Args:
            db: Database session to use for the transaction
            operation: Callable that performs database operations

        Returns:
            Result of the operation
        """
        try:
            result = operation()
            db.commit()
            self.logger.info(
                "Transaction committed successfully",
                extra={
                    "correlation_id": self.correlation_id,
                    "service": self.__class__.__name__
                }
            )
            return result
        except SQLAlchemyError as e:
            db.rollback()
            self.logger.error(
                "Database error occurred, transaction rolled back",
                extra={
                    "correlation_id": self.correlation_id,
                    "service": self.__class__.__name__,
                    "error": str(e)
                }
            )
            raise PersistenceError(
                operation=getattr(operation, "__name__", "operation"),
                reason=str(e),
                correlation_id=self.correlation_id
            ) from e
        except ServiceError:
            db.rollback()
            raise
        except Exception as e:
            db.rollback()
            self.logger.error(
                "Unexpected error occurred, transaction rolled back",
                extra={
                    "correlation_id": self.correlation_id,
                    "service": self.__class__.__name__,
                    "error": str(e)
                }
            )
            raise

    def ensure_not_empty(self, rows: List[T], resource_type: str, message: str, **filters: Any) -> List[T]:
        """Return ``rows`` or raise ``EmptyResultError`` when there are none."""
        if not rows:
            self.log_operation("empty_result", resource_type=resource_type, filters=filters)
            raise EmptyResultError(
                resource_type=resource_type,
                user_message=message,
                correlation_id=self.correlation_id,
                filters=filters
            )
        return rows

    def log_operation(self, operation: str, **kwargs: Any) -> None:
        """Log service operation with structured fields.

        Args:
            operation: Name of the operation being performed
            **kwargs: Additional fields to include in log
        """
        log_data = {
            "correlation_id": self.correlation_id,
            "service": self.__class__.__name__,
            "operation": operation,
            **kwargs
        }
        self.logger.info(f"Service operation: {operation}", extra=log_data)
