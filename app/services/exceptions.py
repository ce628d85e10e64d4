"""Domain-specific exceptions for service layer operations.

This module provides a structured exception hierarchy for menu operations,
enabling consistent error handling, logging, and client response generation.

Architecture:
- ServiceError: Base exception with correlation ID and context support
- Category Base Classes: ValidationError, BusinessError, InfrastructureError
- Specific Exceptions: Concrete exceptions for menu resources
- Error Context: Rich metadata and a client-facing message

Every client-facing message is the ``user_message`` of the exception; the API
layer renders it as ``{"message": ...}`` with the exception's ``http_status``.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union
from http import HTTPStatus


class ErrorSeverity(Enum):
    """Error severity levels for logging and monitoring."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INFRASTRUCTURE = "infrastructure"
    SYSTEM = "system"


class ServiceError(Exception):
    """Base exception for all service layer errors.

    Attributes:
        message: Human-readable error message for logging
        error_code: Machine-readable error code
        correlation_id: Request correlation ID for tracing
        details: Additional error context (sanitized for logging)
        user_message: Message returned to the client
        severity: Error severity level for logging/monitoring
        category: Error category for classification
        http_status: HTTP status code for API responses
    """

    def __init__(
        self,
        message: str,
        error_code: str = "SERVICE_ERROR",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        http_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.correlation_id = correlation_id
        self.details = details or {}
        self.user_message = user_message or message
        self.severity = severity
        self.category = category
        self.http_status = http_status

    def to_dict(self, include_sensitive: bool = False) -> Dict[str, Any]:
        """Convert exception to dictionary for logging.

        Args:
            include_sensitive: Whether to include sensitive details

        Returns:
            Dictionary representation of the error
        """
        result = {
            "error_code": self.error_code,
            "message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "http_status": self.http_status.value
        }

        if self.correlation_id:
            result["correlation_id"] = self.correlation_id

        if include_sensitive and self.details:
            result["details"] = self.details
            result["internal_message"] = self.message

        return result

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================

class ValidationError(ServiceError):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        correlation_id: Optional[str] = None,
        validation_errors: Optional[List[Dict[str, Any]]] = None
    ):
        details: Dict[str, Any] = {"validation_message": message}
        if field:
            details["field"] = field
        if validation_errors:
            details["validation_errors"] = validation_errors

        super().__init__(
            message=f"Validation failed for {field}: {message}" if field else f"Validation failed: {message}",
            error_code="VALIDATION_ERROR",
            correlation_id=correlation_id,
            details=details,
            user_message=message,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            http_status=HTTPStatus.BAD_REQUEST
        )


# =============================================================================
# BUSINESS DOMAIN ERRORS
# =============================================================================

class BusinessError(ServiceError):
    """Base class for business domain errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.BUSINESS_RULE,
        http_status: HTTPStatus = HTTPStatus.BAD_REQUEST
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            correlation_id=correlation_id,
            details=details,
            user_message=user_message,
            severity=severity,
            category=category,
            http_status=http_status
        )


class ResourceNotFoundError(BusinessError):
    """Base class for resource not found errors."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[Union[int, str]] = None,
        correlation_id: Optional[str] = None,
        user_message: Optional[str] = None
    ):
        details: Dict[str, Any] = {"resource_type": resource_type}
        if resource_id is not None:
            details["resource_id"] = resource_id

        super().__init__(
            message=f"{resource_type} {resource_id} not found" if resource_id is not None else f"{resource_type} not found",
            error_code=f"{resource_type.upper()}_NOT_FOUND",
            correlation_id=correlation_id,
            details=details,
            user_message=user_message or f"{resource_type} not found",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.RESOURCE_NOT_FOUND,
            http_status=HTTPStatus.NOT_FOUND
        )


class CategoryNotFoundError(ResourceNotFoundError):
    """Category does not exist."""

    def __init__(
        self,
        category_id: Optional[str] = None,
        correlation_id: Optional[str] = None,
        user_message: str = "Category not found"
    ):
        super().__init__(
            resource_type="Category",
            resource_id=category_id,
            correlation_id=correlation_id,
            user_message=user_message
        )


class SubCategoryNotFoundError(ResourceNotFoundError):
    """SubCategory does not exist."""

    def __init__(
        self,
        sub_category_id: Optional[str] = None,
        correlation_id: Optional[str] = None,
        user_message: str = "SubCategory not found"
    ):
        super().__init__(
            resource_type="SubCategory",
            resource_id=sub_category_id,
            correlation_id=correlation_id,
            user_message=user_message
        )


class ItemNotFoundError(ResourceNotFoundError):
    """Item does not exist."""

    def __init__(
        self,
        item_id: Optional[str] = None,
        correlation_id: Optional[str] = None,
        user_message: str = "item not found"
    ):
        super().__init__(
            resource_type="Item",
            resource_id=item_id,
            correlation_id=correlation_id,
            user_message=user_message
        )


class EmptyResultError(BusinessError):
    """A listing or search matched no rows."""

    def __init__(
        self,
        resource_type: str,
        user_message: str,
        correlation_id: Optional[str] = None,
        filters: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"No {resource_type} rows matched",
            error_code="EMPTY_RESULT",
            correlation_id=correlation_id,
            details={"resource_type": resource_type, "filters": filters or {}},
            user_message=user_message,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.RESOURCE_NOT_FOUND,
            http_status=HTTPStatus.NOT_FOUND
        )


# =============================================================================
# INFRASTRUCTURE ERRORS
# =============================================================================

class InfrastructureError(ServiceError):
    """Base class for infrastructure-related errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        http_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            correlation_id=correlation_id,
            details=details,
            user_message=user_message or "Something went wrong",
            severity=severity,
            category=ErrorCategory.INFRASTRUCTURE,
            http_status=http_status
        )


class PersistenceError(InfrastructureError):
    """The database rejected or failed an operation."""

    def __init__(
        self,
        operation: str,
        reason: str,
        correlation_id: Optional[str] = None
    ):
        super().__init__(
            message=f"Persistence failure during {operation}: {reason}",
            error_code="PERSISTENCE_ERROR",
            correlation_id=correlation_id,
            details={"operation": operation, "reason": reason}
        )


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def create_error_response(error: ServiceError) -> Dict[str, Any]:
    """Create the client response body for a service error."""
    return {"message": error.user_message}
