"""
Domain exceptions for the rod stock ledger.

Every error raised by the core derives from RodStockError and carries a
machine-readable code plus structured details, so callers can surface it to
the operator and allow a retry.
"""

from typing import Any


class RodStockError(Exception):
    """Base exception for all ledger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Stock Exceptions
class StockError(RodStockError):
    """Base exception for stock ledger operations."""

    pass


class InsufficientStockError(StockError):
    """Requested withdrawal exceeds the available weight for a diameter."""

    def __init__(self, diameter: float, requested: float, available: float):
        super().__init__(
            f"Insufficient stock for diameter {diameter} mm: "
            f"requested {requested} kg, available {available} kg",
            code="INSUFFICIENT_STOCK",
            details={
                "diameter": diameter,
                "requested": requested,
                "available": available,
            },
        )

    @property
    def requested(self) -> float:
        return self.details["requested"]

    @property
    def available(self) -> float:
        return self.details["available"]


class InvalidQuantityError(StockError):
    """Non-positive, negative or malformed numeric input."""

    def __init__(self, field: str, value: Any, reason: str = "must be positive"):
        super().__init__(
            f"Invalid quantity for '{field}': {value!r} {reason}",
            code="INVALID_QUANTITY",
            details={"field": field, "value": value, "reason": reason},
        )


# Process Exceptions
class ProcessError(RodStockError):
    """Base exception for process lifecycle operations."""

    pass


class ProcessNotFoundError(ProcessError):
    """Process id does not resolve to a stored process."""

    def __init__(self, process_id: str):
        super().__init__(
            f"Process not found: {process_id}",
            code="PROCESS_NOT_FOUND",
            details={"process_id": process_id},
        )


class InvalidStateError(ProcessError):
    """Operation attempted on a process not in the required lifecycle state."""

    def __init__(self, process_id: str, status: str, required: str):
        super().__init__(
            f"Process {process_id} is '{status}', operation requires '{required}'",
            code="INVALID_STATE",
            details={"process_id": process_id, "status": status, "required": required},
        )


class ProcessGroupNotFoundError(ProcessError):
    """Process group not found."""

    def __init__(self, group_id: str):
        super().__init__(
            f"Process group not found: {group_id}",
            code="PROCESS_GROUP_NOT_FOUND",
            details={"group_id": group_id},
        )


# Storage Exceptions
class StorageError(RodStockError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class SnapshotError(StorageError):
    """Import snapshot is malformed or references unknown collections."""

    def __init__(self, reason: str, errors: list[str] | None = None):
        super().__init__(
            f"Invalid inventory snapshot: {reason}",
            code="SNAPSHOT_INVALID",
            details={"reason": reason, "errors": errors or []},
        )


# Validation Exceptions
class ValidationError(RodStockError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class ConfigurationError(RodStockError):
    """Configuration error."""

    pass
