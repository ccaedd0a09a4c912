"""Exceptions raised by the client.

Backend services answer failures with a named error
(``{"code": 16, "name": "ResourceUnknownError", "message": ...}``). Errors
the client knows by name get their own class, placed under the status class
the backend sends them with, so both ``except NotFoundError`` and
``except ResourceUnknownError`` work.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from rql_client.errors.models import ErrorDetail


class InvalidUsageError(ValueError):
    """Raised before any request when the client is called incorrectly."""

    pass


class PaginationError(RuntimeError):
    """Raised when a find function returns a page that cannot be walked."""

    pass


class APIError(Exception):
    """Error response from a backend service.

    Attributes:
        status_code: HTTP status of the response.
        response: The response itself.
        error_detail: Parsed error body, if the backend sent one.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_detail = error_detail

    @property
    def error_name(self) -> str | None:
        """Backend error name, e.g. ``"ResourceUnknownError"``."""
        return self.error_detail.name if self.error_detail else None

    @property
    def error_code(self) -> int | None:
        """Numeric backend error code."""
        return self.error_detail.code if self.error_detail else None


class ClientError(APIError):
    pass


class ServerError(APIError):
    pass


class BadRequestError(ClientError):
    pass


class UnauthorizedError(ClientError):
    pass


class ForbiddenError(ClientError):
    pass


class NotFoundError(ClientError):
    pass


class ConflictError(ClientError):
    pass


class RateLimitError(ClientError):
    """Too many requests; ``retry_after`` holds the advertised wait in seconds."""

    def __init__(self, message: str, *, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ResourceUnknownError(NotFoundError):
    """The requested resource (id, name or path) does not exist."""

    pass


class TemplateFillingError(BadRequestError):
    """A template could not be resolved with the provided content."""

    pass


class LocalizationKeyMissingError(BadRequestError):
    """A template refers to a localization key that has no translation."""

    pass
