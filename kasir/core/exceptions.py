"""
Failure kinds raised by services and rendered by the API layer.

Every failure carries a client-safe ``message`` and the HTTP status it maps
to. Internal store error text is logged where it is caught and never copied
into these objects.
"""
from typing import Any, Optional


class ServiceError(Exception):
    """Base class for all expected failures."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: Optional[str] = None, detail: Any = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class MissingTokenError(ServiceError):
    status_code = 401
    default_message = "Token not provided"


class InvalidTokenError(ServiceError):
    status_code = 403
    default_message = "Invalid or expired token"


class AuthenticationError(ServiceError):
    status_code = 401
    default_message = "Invalid username or password"


class PermissionDeniedError(ServiceError):
    status_code = 403
    default_message = "Access denied. Admin role required."


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid request data"


class ConflictError(ServiceError):
    status_code = 400
    default_message = "Conflicting record"


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Not found"


class BusinessRuleError(ServiceError):
    """A business rule rejected the whole operation (e.g. insufficient stock)."""

    status_code = 500
    default_message = "Operation rejected"


class StoreError(ServiceError):
    status_code = 500
    default_message = "Server error"
