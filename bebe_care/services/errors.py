"""
Service Errors

Exceptions raised by the service layer. Controllers render them with
``service_error()``; each carries the error code and HTTP status it maps to.
"""


class ServiceError(Exception):
    """Base exception for service operations."""

    code = "UNKNOWN_ERROR"
    status = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Missing or malformed input."""

    code = "VALIDATION_ERROR"
    status = 400


class NotFoundError(ServiceError):
    """A referenced row does not exist."""

    code = "NOT_FOUND"
    status = 404


class InvalidStateError(ServiceError):
    """The operation is not allowed in the current state of the data."""

    code = "INVALID_STATE"
    status = 400
