"""Service-level errors."""


class RepositoryError(RuntimeError):
    """Raised when the backing store rejects or fails a request."""


class InvalidRequestError(ValueError):
    """Raised when caller-supplied input breaks a domain rule."""
