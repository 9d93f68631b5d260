"""
Error taxonomy for the availability proxy.

Every failure the caller can see maps to one of a few generic responses.
Only validation errors echo their own message; everything else is reduced to
a short summary so upstream credentials, raw upstream bodies and stack traces
never leave the server.
"""
from __future__ import annotations

from fastapi.responses import JSONResponse

# ---------------------------------------------------------------------------
# Constants: status codes and user-facing messages
# ---------------------------------------------------------------------------

STATUS_BAD_REQUEST = 400
STATUS_INTERNAL_ERROR = 500
STATUS_BAD_GATEWAY = 502

MSG_CONFIGURATION_ERROR = "Server configuration error."
MSG_UPSTREAM_ERROR = "Availability service request failed."
MSG_INTERNAL_ERROR = "An internal server error occurred."
MSG_INVALID_BODY = "Invalid request body."


class AvailabilityProxyError(Exception):
    """Base error for failures the proxy knows how to report."""

    status_code = STATUS_INTERNAL_ERROR
    public_message = MSG_INTERNAL_ERROR


class ConfigurationError(AvailabilityProxyError):
    """Raised when required upstream configuration is absent or malformed."""

    public_message = MSG_CONFIGURATION_ERROR


class ValidationError(AvailabilityProxyError):
    """Raised when the inbound query is missing a field or is malformed."""

    status_code = STATUS_BAD_REQUEST

    @property
    def public_message(self) -> str:
        return str(self) or MSG_INVALID_BODY


class UpstreamError(AvailabilityProxyError):
    """Raised when the booking service answers with a non-success status."""

    status_code = STATUS_BAD_GATEWAY
    public_message = MSG_UPSTREAM_ERROR

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.upstream_status = status_code
        self.upstream_body = body


class UpstreamConnectionError(UpstreamError):
    """Raised when the booking service cannot be reached at all."""

    status_code = STATUS_INTERNAL_ERROR
    public_message = MSG_INTERNAL_ERROR


class UpstreamResponseError(UpstreamError):
    """Raised when the booking service returns a body we cannot interpret."""

    status_code = STATUS_INTERNAL_ERROR
    public_message = MSG_INTERNAL_ERROR


def error_response(exc: Exception) -> JSONResponse:
    """
    Map an exception raised while resolving availability into a JSONResponse.
    Known errors use their own status and public message; anything else is a generic 500.
    """
    if isinstance(exc, AvailabilityProxyError):
        return JSONResponse({"error": exc.public_message}, status_code=exc.status_code)
    return JSONResponse({"error": MSG_INTERNAL_ERROR}, status_code=STATUS_INTERNAL_ERROR)
