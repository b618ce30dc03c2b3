"""
Error handling decorator for service operations.

Centralizes the rule every service method follows: authorization failures
propagate unchanged, store failures and unexpected errors are rolled back,
logged once, and re-raised as an opaque ServiceError.
"""

from functools import wraps
from typing import Callable
import logging

from sqlalchemy.exc import SQLAlchemyError

from exceptions import ApplicationError, ServiceError

logger = logging.getLogger(__name__)


def _rollback(service) -> None:
    rollback = getattr(service, "rollback", None)
    if rollback is None:
        return
    try:
        rollback()
    except SQLAlchemyError:
        logger.warning("Rollback failed after service error", exc_info=True)


def service_operation(operation_name: str):
    """
    Decorator wrapping a service method with the shared failure taxonomy.

    Args:
        operation_name: Human-readable operation (e.g., "create user")

    Returns:
        Decorated method that raises only ApplicationError subclasses

    Example:
        @service_operation("create project")
        def create(self, actor, dto):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except ApplicationError:
                raise
            except SQLAlchemyError as e:
                _rollback(self)
                logger.error(f"{operation_name} - Database error: {type(e).__name__}", exc_info=True)
                raise ServiceError(
                    operation_name,
                    f"Failed to {operation_name}. Please try again."
                ) from e
            except Exception as e:
                _rollback(self)
                logger.error(f"{operation_name} - Unexpected error: {type(e).__name__}", exc_info=True)
                raise ServiceError(
                    operation_name,
                    "An unexpected error occurred. Please try again."
                ) from e

        return wrapper

    return decorator
