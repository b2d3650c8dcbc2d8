"""
HTTP status to exception mapping
"""

from typing import Any, Dict, Optional, Type

from zenvia_sms.exceptions import (
    AuthenticationError,
    BadRequestError,
    ClientRequestError,
    ForbiddenError,
    HttpSmsError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnexpectedHttpStatusError,
)


STATUS_EXCEPTIONS: Dict[int, Type[HttpSmsError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def exception_class_for(status_code: int) -> Type[HttpSmsError]:
    """Pick the exception type for a non-200 status"""
    if status_code in STATUS_EXCEPTIONS:
        return STATUS_EXCEPTIONS[status_code]
    if 400 <= status_code < 500:
        return ClientRequestError
    if 500 <= status_code < 600:
        return ServerError
    return UnexpectedHttpStatusError


def extract_error_message(body: Optional[Dict[str, Any]]) -> Optional[str]:
    """Find a human-readable message in an error body, if it has one"""
    if not isinstance(body, dict):
        return None

    message = body.get("message")
    if isinstance(message, str) and message:
        return message

    nested = body.get("exception")
    if isinstance(nested, dict):
        message = nested.get("message")
        if isinstance(message, str) and message:
            return message

    error = body.get("error")
    if isinstance(error, str) and error:
        return error

    return None


def build_http_exception(
    status_code: int, body: Optional[Dict[str, Any]] = None
) -> HttpSmsError:
    """
    Build the exception for a non-200 response

    Never raises; unknown statuses map to UnexpectedHttpStatusError.

    Args:
        status_code: HTTP status returned by the API
        body: Parsed error body, or None

    Returns:
        Exception instance carrying the status and body
    """
    if not isinstance(body, dict):
        body = None
    exc_cls = exception_class_for(status_code)
    message = extract_error_message(body) or f"HTTP {status_code}"
    return exc_cls(message, status_code=status_code, body=body)
