"""Turn failed HTTP responses into exceptions.

The backend error name decides the exception class first; the status code
is only consulted for unnamed or unknown errors.
"""

import logging

import httpx

from rql_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    LocalizationKeyMissingError,
    NotFoundError,
    RateLimitError,
    ResourceUnknownError,
    ServerError,
    TemplateFillingError,
    UnauthorizedError,
)
from rql_client.errors.models import ErrorDetail

logger = logging.getLogger(__name__)

ERRORS_BY_NAME: dict[str, type[APIError]] = {
    cls.__name__: cls for cls in (ResourceUnknownError, TemplateFillingError, LocalizationKeyMissingError)
}

ERRORS_BY_STATUS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def exception_class_for(status_code: int, error_name: str | None = None) -> type[APIError]:
    """Pick the exception class for a status code and backend error name."""
    if error_name in ERRORS_BY_NAME:
        return ERRORS_BY_NAME[error_name]
    if status_code in ERRORS_BY_STATUS:
        return ERRORS_BY_STATUS[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def _retry_after(response: httpx.Response) -> int | None:
    try:
        return int(response.headers["retry-after"])
    except (KeyError, ValueError):
        return None


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching ``APIError`` subclass for a failed response.

    Raises:
        APIError: Subclass chosen by ``exception_class_for``.
    """
    if response.is_success:
        return

    detail = ErrorDetail.from_response(response)
    exc_class = exception_class_for(response.status_code, detail.name if detail else None)

    if detail:
        message = detail.to_exception_message()
    else:
        text = response.text[:200]
        message = f"HTTP {response.status_code}: {text}" if text else f"HTTP {response.status_code}"

    logger.debug(f"{response.status_code} response mapped to {exc_class.__name__}")

    kwargs = {"status_code": response.status_code, "response": response, "error_detail": detail}
    if issubclass(exc_class, RateLimitError):
        kwargs["retry_after"] = _retry_after(response)
    raise exc_class(message, **kwargs)
