"""Exceptions raised when a service result is unwrapped."""


class EcomError(Exception):
    """Base class for service errors."""


class NotFoundError(EcomError):
    """The requested record does not exist or is not visible."""


class InvalidRequestError(EcomError):
    """The request was rejected by a business rule."""
