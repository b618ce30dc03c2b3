"""
Custom exception classes for the application.

Services raise these instead of HTTP errors; main.py maps them to responses.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(ApplicationError):
    """Raised when a request carries no valid bearer token"""

    def __init__(self, message: str = "Unauthenticated."):
        super().__init__(message)


class AuthorizationError(ApplicationError):
    """Raised when a policy denies the acting user"""

    def __init__(self, message: str = "This action is unauthorized.", action: str | None = None):
        details = {"action": action} if action else {}
        super().__init__(message, details)


class ServiceError(ApplicationError):
    """
    Raised when a service operation fails in the store or unexpectedly.

    The message is safe to show to clients. The underlying exception is kept
    as ``__cause__`` for diagnostics only.
    """

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when a write would break an entity invariant"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)
