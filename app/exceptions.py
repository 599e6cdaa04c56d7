from typing import Any, Mapping, Optional


class RestaurantError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message, also the ``str()`` of the error
        details: optional mapping with extra context for the response body
        code: machine-readable error code, defaults to ``default_code``
        http_status: status code the API handlers answer with
    """

    http_status = 500
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else None
        self.code = code or self.default_code

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(RestaurantError):
    """A write breaks a rule the request schema cannot express (e.g. a menu window)."""

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", **kwargs: Any):
        super().__init__(message, **kwargs)


class NotFoundError(RestaurantError):
    """A requested record, or a record it references, does not exist."""

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", **kwargs: Any):
        super().__init__(message, **kwargs)
