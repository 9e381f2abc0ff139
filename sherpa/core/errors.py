class AppError(Exception):
    """Base class for all application errors."""

    status_code = 500
    code = "internal_error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidRequestError(AppError):
    """Client sent a request with missing or malformed fields (400)."""

    status_code = 400
    code = "invalid_request"


class NotFoundError(AppError):
    """Requested resource does not exist (404)."""

    status_code = 404
    code = "not_found"


class RouteNotFoundError(AppError):
    """No route matches the request path (404)."""

    status_code = 404
    code = "route_not_found"


class RequestTooLargeError(AppError):
    """Request body exceeds the configured limit (413)."""

    status_code = 413
    code = "request_too_large"


class ConfigurationError(AppError):
    """Server misconfiguration, e.g. a missing API key (500)."""

    status_code = 500
    code = "configuration_error"


class GenerationError(AppError):
    """The generation provider failed or returned no usable text (500)."""

    status_code = 500
    code = "generation_failed"


class PersistenceError(AppError):
    """The insight store rejected or failed an operation (500)."""

    status_code = 500
    code = "persistence_failed"
