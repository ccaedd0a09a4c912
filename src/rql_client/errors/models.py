"""Models for error bodies returned by the backend."""

from dataclasses import dataclass
from typing import Any

import httpx

STANDARD_FIELDS = frozenset({"code", "name", "message"})


@dataclass
class ErrorDetail:
    """Error body returned by the backend services.

    Services answer failed requests with ``{"code": ..., "name": ...,
    "message": ...}`` and may add fields specific to the error.
    """

    code: int | None = None  # Numeric backend error code
    name: str | None = None  # Error name, e.g. "ResourceUnknownError"
    message: str | None = None  # Human-readable explanation

    # Any other fields sent along with the error
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorDetail | None":
        """Parse the error body of an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorDetail object or None if the body is not a backend error
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # Not JSON, or no body at all
            return None

        if not isinstance(data, dict) or not any(field in data for field in STANDARD_FIELDS):
            return None

        extensions = {k: v for k, v in data.items() if k not in STANDARD_FIELDS}

        return cls(
            code=data.get("code"),
            name=data.get("name"),
            message=data.get("message"),
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        lines = []

        if self.name and self.message:
            lines.append(f"{self.name}: {self.message}")
        elif self.name or self.message:
            lines.append(self.name or self.message)

        if self.code is not None:
            lines.append(f"Error Code: {self.code}")

        if self.extensions:
            lines.append("Extension fields:")
            for key, value in self.extensions.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines) if lines else "Unknown API error"
