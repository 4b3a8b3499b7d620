"""
Error handling decorators and utilities for API endpoints.

This module centralizes the translation of application exceptions into
HTTP responses so the endpoints only describe the success path.
"""

import inspect
import logging
from functools import wraps
from typing import Callable

from fastapi import HTTPException

from constants import HTTPStatus
from exceptions import (
    ApplicationError,
    DatabaseError,
    EntityNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Mapping:
        EntityNotFoundError -> 404
        ValidationError     -> 400
        DatabaseError       -> 500
        ApplicationError    -> 500
        HTTPException       -> re-raised unchanged
        anything else       -> 500, logged with traceback

    Args:
        operation_name: Human-readable name of the operation (e.g., "Get employee")

    Example:
        @router.get("/{id}")
        @handle_api_errors("Get employee")
        async def get_employee(...):
            ...
    """
    def decorator(func: Callable):
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"handle_api_errors expects an async endpoint, got {func.__name__}")

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except EntityNotFoundError as e:
                logger.info(f"{operation_name} - Not found: {e.message}")
                raise HTTPException(
                    status_code=HTTPStatus.NOT_FOUND,
                    detail=e.message
                )
            except ValidationError as e:
                logger.warning(f"{operation_name} - Validation error: {e.message}")
                raise HTTPException(
                    status_code=HTTPStatus.BAD_REQUEST,
                    detail=e.message
                )
            except DatabaseError as e:
                logger.error(f"{operation_name} - Database error: {e.message}")  # traceback already logged by the repository
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"Database operation failed: {e.details.get('operation', operation_name)}"
                )
            except ApplicationError as e:
                logger.error(f"{operation_name} - Application error: {e.message}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"{operation_name} failed: {e.message}"
                )
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"{operation_name} failed. Please check server logs or contact support."
                )

        return async_wrapper

    return decorator
