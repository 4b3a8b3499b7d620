"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundError(ApplicationError):
    """Raised when a lookup by id yields no row"""

    def __init__(self, entity: str, entity_id: int, message: str | None = None):
        details = {"entity": entity, "entity_id": entity_id}
        msg = message or f"{entity} '{entity_id}' not found"
        super().__init__(msg, details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail (constraint violation, connectivity)"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
