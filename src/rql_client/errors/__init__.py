"""Error handling for client misuse and backend error responses."""

from rql_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    InvalidUsageError,
    LocalizationKeyMissingError,
    NotFoundError,
    PaginationError,
    RateLimitError,
    ResourceUnknownError,
    ServerError,
    TemplateFillingError,
    UnauthorizedError,
)
from rql_client.errors.handler import exception_class_for, raise_for_status
from rql_client.errors.models import ErrorDetail

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorDetail",
    "ForbiddenError",
    "InvalidUsageError",
    "LocalizationKeyMissingError",
    "NotFoundError",
    "PaginationError",
    "RateLimitError",
    "ResourceUnknownError",
    "ServerError",
    "TemplateFillingError",
    "UnauthorizedError",
    "exception_class_for",
    "raise_for_status",
]
