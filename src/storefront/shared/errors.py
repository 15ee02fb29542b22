"""Storefront error taxonomy.

Malformed input is reported with protean's ``ValidationError`` (HTTP 400).
The classes below cover the remaining outcomes; each carries the HTTP status
the API boundary answers with.
"""


class StorefrontError(Exception):
    status_code = 500

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    default_message = "Internal server error"

    @property
    def error_type(self) -> str:
        return type(self).__name__


class Unauthorized(StorefrontError):
    """Credential missing, malformed, badly signed or expired."""

    status_code = 401
    default_message = "Access token required"


class Forbidden(StorefrontError):
    """Credential is well-formed but the user it names no longer exists."""

    status_code = 403
    default_message = "Access denied"


class NotFound(StorefrontError):
    """Resource does not exist, or exists but belongs to another user."""

    status_code = 404
    default_message = "Not found"


class Conflict(StorefrontError):
    """Aggregate changed between read and write; the request can be retried."""

    status_code = 409
    default_message = "Resource was modified concurrently, retry the request"


class EmptyCartError(StorefrontError):
    status_code = 400
    default_message = "Cart is empty"


class InternalError(StorefrontError):
    status_code = 500
