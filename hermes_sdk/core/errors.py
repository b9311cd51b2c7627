# hermes_sdk/core/errors.py
from typing import Any, Dict, List, Optional

import httpx


class HermesError(Exception):
    """Base class for every error raised by the SDK."""
    pass


class ConfigError(HermesError):
    """Invalid or incomplete configuration, raised at construction time."""
    pass


class MissingCredentialError(ConfigError):
    def __init__(self, field: str, environment: str):
        super().__init__(f"Missing eBay credential '{field}' for {environment} environment")
        self.field = field
        self.environment = environment


class AuthError(HermesError):
    """OAuth token exchange failed."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransportError(HermesError):
    """Network failure that survived the retry budget."""

    def __init__(self, message: str, attempts: int):
        super().__init__(f"{message} (after {attempts} attempt{'s' if attempts != 1 else ''})")
        self.attempts = attempts


class DecodeError(HermesError):
    """The call succeeded but its body did not match the expected schema."""

    def __init__(self, message: str, status_code: int, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ApiError(HermesError):
    """Non-2xx response from an eBay REST endpoint."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(f"eBay API error {status_code}" + (f" [{code}]" if code else "") + f": {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.errors = errors or []

    @classmethod
    def from_response(cls, resp: httpx.Response) -> "ApiError":
        """
        Build the matching ApiError subclass from an eBay error response.
        eBay reports failures as {"errors": [{"errorId": ..., "message": ..., "longMessage": ...}]}.
        """
        errors: List[Dict[str, Any]] = []
        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and isinstance(payload.get("errors"), list):
            errors = [e for e in payload["errors"] if isinstance(e, dict)]

        code = None
        message = resp.text or resp.reason_phrase
        if errors:
            first = errors[0]
            if first.get("errorId") is not None:
                code = str(first["errorId"])
            message = first.get("longMessage") or first.get("message") or message

        error_cls = _STATUS_ERRORS.get(resp.status_code)
        if error_cls is None:
            error_cls = ServerError if resp.status_code >= 500 else ApiError
        return error_cls(resp.status_code, message, code=code, errors=errors)


class BadRequestError(ApiError):
    pass


class UnauthorizedError(ApiError):
    pass


class ForbiddenError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class ConflictError(ApiError):
    pass


class RateLimitError(ApiError):
    pass


class ServerError(ApiError):
    pass


_STATUS_ERRORS = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}
