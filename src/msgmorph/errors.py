"""Error model for the MsgMorph API.

Every failure raised by this package is a :class:`MsgMorphError` carrying a
stable :class:`ErrorCode`, the HTTP status (``0`` for failures that never
produced a response), a message, a remediation hint and optional details.

Usage:
    try:
        contact = await client.contacts.get("cnt_abc123")
    except MsgMorphError as err:
        if err.is_not_found:
            ...
        logger.warning(err.to_json())
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError


GENERIC_ERROR_MESSAGE = "An unexpected error occurred"
NETWORK_ERROR_MESSAGE = "Network request failed"


class ErrorCode(str, Enum):
    """Error codes returned by (or derived from) the MsgMorph API."""

    # Client errors
    INVALID_API_KEY = "INVALID_API_KEY"
    INVALID_ORGANIZATION_ID = "INVALID_ORGANIZATION_ID"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Authentication errors
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"

    # Resource errors
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    ALREADY_EXISTS = "ALREADY_EXISTS"

    # Server errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    # Network errors
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"

    def __str__(self) -> str:
        return self.value


ERROR_HINTS: dict[ErrorCode, str] = {
    ErrorCode.INVALID_API_KEY: "Invalid API key. Please check your MSGMORPH_API_KEY environment variable.",
    ErrorCode.INVALID_ORGANIZATION_ID: (
        "Invalid organization ID. Please check your MSGMORPH_ORGANIZATION_ID environment variable."
    ),
    ErrorCode.UNAUTHORIZED: "Authentication failed. Please verify your API key is correct and has not expired.",
    ErrorCode.FORBIDDEN: "Access denied. Your API key does not have permission to perform this action.",
    ErrorCode.NOT_FOUND: "The requested resource was not found.",
    ErrorCode.CONFLICT: "A conflict occurred. The resource may already exist or be in an invalid state.",
    ErrorCode.ALREADY_EXISTS: "This resource already exists. Use update instead of create.",
    ErrorCode.VALIDATION_ERROR: "Invalid request data. Please check the required fields.",
    ErrorCode.INTERNAL_ERROR: "An internal server error occurred. Please try again later.",
    ErrorCode.SERVICE_UNAVAILABLE: "The MsgMorph API is temporarily unavailable. Please try again later.",
    ErrorCode.NETWORK_ERROR: (
        "Network error. Please check your internet connection and that the API URL is correct."
    ),
    ErrorCode.TIMEOUT: "Request timed out. Please try again.",
}


def _coerce_code(code: ErrorCode | str) -> ErrorCode | str:
    """Return the matching ErrorCode, or the raw string for codes we don't know."""
    if isinstance(code, ErrorCode):
        return code
    try:
        return ErrorCode(code)
    except ValueError:
        return code


class MsgMorphError(Exception):
    """Error raised by every MsgMorph client operation.

    Attributes:
        message: Human-readable error message
        status: HTTP status code, or 0 when no response was received
        code: ErrorCode (or the server's raw code string if unrecognised)
        hint: Remediation hint for the code ("" when there is none)
        details: Extra diagnostic payload from the server, if any
    """

    def __init__(
        self,
        message: str,
        status: int,
        code: ErrorCode | str,
        hint: str = "",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = _coerce_code(code)
        self.hint = hint
        self.details = details

    def __str__(self) -> str:
        if self.hint and self.hint != self.message:
            return f"MsgMorphError [{self.code}]: {self.message} (Hint: {self.hint})"
        return f"MsgMorphError [{self.code}]: {self.message}"

    def __repr__(self) -> str:
        return (
            f"MsgMorphError(code={str(self.code)!r}, status={self.status}, "
            f"message={self.message!r})"
        )

    @property
    def is_not_found(self) -> bool:
        return self.code == ErrorCode.NOT_FOUND

    @property
    def is_unauthorized(self) -> bool:
        return self.code == ErrorCode.UNAUTHORIZED

    @property
    def is_validation_error(self) -> bool:
        return self.code == ErrorCode.VALIDATION_ERROR

    @property
    def is_server_error(self) -> bool:
        """True for INTERNAL_ERROR and SERVICE_UNAVAILABLE."""
        return self.code in (ErrorCode.INTERNAL_ERROR, ErrorCode.SERVICE_UNAVAILABLE)

    def to_dict(self) -> dict[str, Any]:
        """Structured form for logging. Empty hint/details are omitted."""
        data: dict[str, Any] = {
            "message": self.message,
            "status": self.status,
            "code": str(self.code),
        }
        if self.hint:
            data["hint"] = self.hint
        if self.details:
            data["details"] = self.details
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MsgMorphError":
        """Rebuild an error from :meth:`to_dict` output."""
        return cls(
            message=data.get("message", ""),
            status=data.get("status", 0),
            code=data.get("code", ""),
            hint=data.get("hint", ""),
            details=data.get("details"),
        )


def error_code_from_status(status: int) -> ErrorCode:
    """Map an HTTP status code to an ErrorCode. Defined for every status."""
    if status == 400:
        return ErrorCode.VALIDATION_ERROR
    if status == 401:
        return ErrorCode.UNAUTHORIZED
    if status == 403:
        return ErrorCode.FORBIDDEN
    if status == 404:
        return ErrorCode.NOT_FOUND
    if status == 409:
        return ErrorCode.CONFLICT
    if status == 503:
        return ErrorCode.SERVICE_UNAVAILABLE
    if status >= 500:
        return ErrorCode.INTERNAL_ERROR
    return ErrorCode.VALIDATION_ERROR


def new_error(
    message: str,
    status: int,
    code: ErrorCode | str,
    details: dict[str, Any] | None = None,
) -> MsgMorphError:
    """Create a MsgMorphError, filling in the hint for ``code``.

    An empty or generic message is replaced by the hint text when one exists.
    """
    code = _coerce_code(code)
    hint = ERROR_HINTS.get(code, "")
    if (not message or message == GENERIC_ERROR_MESSAGE) and hint:
        message = hint
    return MsgMorphError(message=message, status=status, code=code, hint=hint, details=details)


def new_network_error(exc: BaseException | None = None) -> MsgMorphError:
    """Create a NETWORK_ERROR for a request that never produced a response."""
    message = NETWORK_ERROR_MESSAGE
    if exc is not None:
        # httpx timeouts sometimes carry no text; the class name still says what happened.
        message = str(exc) or type(exc).__name__
    return new_error(message, 0, ErrorCode.NETWORK_ERROR)


def new_input_error(exc: ValidationError) -> MsgMorphError:
    """Convert a pydantic ValidationError on caller input into a MsgMorphError."""
    errors = exc.errors(include_url=False)
    missing = [".".join(str(part) for part in err["loc"]) for err in errors if err["type"] == "missing"]
    if missing:
        message = f"Missing required field(s): {', '.join(missing)}"
        code = ErrorCode.MISSING_REQUIRED_FIELD
    else:
        message = f"Invalid request data: {errors[0]['msg']}" if errors else ""
        code = ErrorCode.VALIDATION_ERROR
    return new_error(message, 0, code, {"errors": json.loads(exc.json(include_url=False))})


class _ErrorPayload(BaseModel):
    """Shape of an error body returned by the API."""

    message: str | None = None
    error: str | None = None
    code: str | None = None
    details: dict[str, Any] | None = None


def parse_error_response(body: bytes, status: int) -> MsgMorphError:
    """Build a MsgMorphError from an error response body."""
    try:
        payload = _ErrorPayload.model_validate_json(body) if body else None
    except ValidationError:
        payload = None
    if payload is None:
        return new_error(GENERIC_ERROR_MESSAGE, status, error_code_from_status(status))

    message = payload.message or payload.error or GENERIC_ERROR_MESSAGE
    code = payload.code or error_code_from_status(status)
    return new_error(message, status, code, payload.details)
