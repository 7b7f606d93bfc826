"""Public exceptions for the Linode SDK."""

from typing import Any


class LinodeError(Exception):
    """Base exception for all Linode SDK errors."""


class LinodeAPIError(LinodeError):
    """Error reported by the Linode API in the response ERRORARRAY."""

    def __init__(
        self,
        message: str,
        *,
        errors: list[Any] | None = None,
        action: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = list(errors) if errors is not None else []
        self.action = action
        self.status_code = status_code

    @classmethod
    def from_errors(
        cls,
        errors: list[Any],
        *,
        action: str | None = None,
        status_code: int | None = None,
    ) -> "LinodeAPIError":
        """Build an error whose message lists every error descriptor."""
        described = "; ".join(_describe(error) for error in errors)
        prefix = f"{action} failed" if action else "API request failed"
        return cls(
            f"{prefix}: {described}",
            errors=errors,
            action=action,
            status_code=status_code,
        )


class LinodeConfigError(LinodeError):
    """Configuration error (missing API key, invalid settings)."""


class LinodeResponseError(LinodeError):
    """Response body is not a well-formed JSON envelope."""


class LinodeValidationError(LinodeError):
    """Validation error for request arguments."""


def _describe(error: Any) -> str:
    if isinstance(error, dict) and "ERRORMESSAGE" in error:
        code = error.get("ERRORCODE")
        message = error["ERRORMESSAGE"]
        return f"{code}: {message}" if code is not None else str(message)
    return str(error)
