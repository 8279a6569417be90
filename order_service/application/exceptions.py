"""Application layer exceptions."""

from typing import Any, Optional


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize application error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of error."""
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


class ConflictError(ApplicationError):
    """Raised when an operation conflicts with the current state."""

    def __init__(
        self,
        message: str = "Operation conflicts with current state",
        operation: Optional[str] = None,
        current_state: Optional[str] = None,
        error_code: str = "CONFLICT",
    ):
        """
        Initialize conflict error.

        Args:
            message: Human-readable error message
            operation: Operation that was attempted
            current_state: Current state that conflicts
            error_code: Machine-readable error code
        """
        details = {}
        if operation:
            details["operation"] = operation
        if current_state:
            details["current_state"] = current_state

        super().__init__(message, error_code, details)


class ConcurrentOrderUpdateError(ConflictError):
    """Raised when an order changed in storage after it was loaded."""

    def __init__(self, order_id: str, expected_status: str):
        self.order_id = order_id
        self.expected_status = expected_status
        super().__init__(
            message=(
                f"Order {order_id} was modified concurrently; "
                f"expected status {expected_status}"
            ),
            operation="advance_status",
            current_state=expected_status,
            error_code="CONCURRENT_ORDER_UPDATE",
        )


class ExternalServiceError(ApplicationError):
    """Raised when an infrastructure collaborator call fails."""

    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        operation: Optional[str] = None,
        error_code: str = "EXTERNAL_SERVICE_ERROR",
    ):
        """
        Initialize external service error.

        Args:
            message: Human-readable error message
            service: Name of the external service
            operation: Operation that failed
            error_code: Machine-readable error code
        """
        details = {}
        if service:
            details["service"] = service
        if operation:
            details["operation"] = operation

        super().__init__(message, error_code, details)


class RepositoryError(ExternalServiceError):
    """Raised when the order store cannot complete an operation."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(
            message=message,
            service="order_repository",
            operation=operation,
            error_code="REPOSITORY_ERROR",
        )


class EventPublishError(ExternalServiceError):
    """Raised when a domain event cannot be handed to the message broker."""

    def __init__(self, event_name: str, reason: str):
        self.event_name = event_name
        super().__init__(
            message=f"Failed to publish event {event_name}: {reason}",
            service="event_publisher",
            operation=event_name,
            error_code="EVENT_PUBLISH_ERROR",
        )
