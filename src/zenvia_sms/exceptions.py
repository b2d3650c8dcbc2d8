"""Exception classes for Zenvia SMS SDK"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Tag identifying which branch of the taxonomy an error belongs to"""
    AUTHORIZATION_MISSING = "AUTHORIZATION_MISSING"
    HTTP_CLIENT = "HTTP_CLIENT"
    HTTP_SERVER = "HTTP_SERVER"
    HTTP_UNEXPECTED = "HTTP_UNEXPECTED"
    UNEXPECTED_RESPONSE = "UNEXPECTED_RESPONSE"
    INVALID_ENTITY = "INVALID_ENTITY"
    NETWORK = "NETWORK"
    CONFIG = "CONFIG"
    VALIDATION = "VALIDATION"
    UNKNOWN = "UNKNOWN"


class ZenviaSmsError(Exception):
    """
    Base exception for Zenvia SMS errors

    All errors in the SDK extend from this class.
    Subclasses set ``kind`` so callers can dispatch on a single tag
    instead of an isinstance chain.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "kind": self.kind.value,
            "code": self.code,
            "status_code": self.status_code,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_kind(self, kind: ErrorKind) -> bool:
        """Check if error belongs to a kind"""
        return self.kind == kind

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class AuthorizationMissingError(ZenviaSmsError):
    """
    Raised before any network call when no authorization key is configured
    """

    kind = ErrorKind.AUTHORIZATION_MISSING

    def __init__(
        self,
        message: str = (
            "API authorization key is not configured; "
            "set it directly or build it from username and password"
        ),
    ) -> None:
        super().__init__(message, code="AUTH_MISSING")


class HttpSmsError(ZenviaSmsError):
    """
    The API answered with a non-200 status

    Always carries the status code and the parsed error body (``None``
    when the body was empty or not a JSON object).
    """

    kind = ErrorKind.HTTP_UNEXPECTED

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Optional[Dict[str, Any]] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            code=code or f"HTTP_{status_code}",
            status_code=status_code,
            details={"body": body} if body is not None else None,
        )
        self.body = body


class ClientRequestError(HttpSmsError):
    """4xx response: the request was rejected by the API"""
    kind = ErrorKind.HTTP_CLIENT


class BadRequestError(ClientRequestError):
    """400 Bad Request"""


class AuthenticationError(ClientRequestError):
    """401 Unauthorized"""


class ForbiddenError(ClientRequestError):
    """403 Forbidden"""


class NotFoundError(ClientRequestError):
    """404 Not Found"""


class RateLimitError(ClientRequestError):
    """429 Too Many Requests"""


class ServerError(HttpSmsError):
    """5xx response: the API failed to process the request"""
    kind = ErrorKind.HTTP_SERVER


class UnexpectedHttpStatusError(HttpSmsError):
    """Any status outside 200, 4xx and 5xx"""
    kind = ErrorKind.HTTP_UNEXPECTED


class UnexpectedApiResponseError(ZenviaSmsError):
    """
    A 200 status was returned but the body was absent, unparseable,
    or did not contain the expected envelope
    """

    kind = ErrorKind.UNEXPECTED_RESPONSE

    def __init__(
        self,
        message: str = "Unexpected response from Zenvia API",
        body: Optional[Any] = None,
        envelope_key: Optional[str] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message,
            code="UNEXPECTED_RESPONSE",
            cause=cause,
            details={"envelope_key": envelope_key} if envelope_key else None,
        )
        self.body = body
        self.envelope_key = envelope_key


class InvalidEntityError(ZenviaSmsError):
    """
    The request could not be sent

    Raised when serialization or transmission fails. ``request`` is the
    original request object; ``cause`` holds the underlying fault, so a
    :class:`NetworkError` there means the network, not the payload, failed.
    """

    kind = ErrorKind.INVALID_ENTITY

    def __init__(
        self,
        request: Any,
        message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        if message is None:
            message = "Could not send request"
            if cause is not None:
                message = f"{message}: {cause}"
        super().__init__(message, code="INVALID_ENTITY", cause=cause)
        self.request = request

    @property
    def is_network_fault(self) -> bool:
        """True when the request failed at the transport level"""
        return isinstance(self.cause, NetworkError)


class NetworkError(ZenviaSmsError):
    """
    Network error for HTTP transport layer failures
    """

    kind = ErrorKind.NETWORK

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        network_code: str = "NET10",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message, code=network_code, status_code=status_code, cause=cause
        )
        self.network_code = network_code

    @classmethod
    def timeout(
        cls, message: str = "Request timed out", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create a timeout error"""
        return cls(message, status_code=408, network_code="NET01", cause=cause)

    @classmethod
    def connection_refused(
        cls, message: str = "Connection refused", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create a connection refused error"""
        return cls(message, network_code="NET02", cause=cause)

    @classmethod
    def ssl_error(
        cls, message: str = "SSL/TLS error", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create an SSL error"""
        return cls(message, network_code="NET04", cause=cause)


class ConfigError(ZenviaSmsError):
    """Configuration error"""

    kind = ErrorKind.CONFIG

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class ValidationError(ZenviaSmsError):
    """Validation error"""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field
