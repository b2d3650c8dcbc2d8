"""
HTTP transport layer for the Zenvia SMS API
Executes a single authenticated JSON POST per call and maps
non-200 responses to typed exceptions
"""

import time
import uuid
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

import requests

from zenvia_sms.client.error_mapper import build_http_exception
from zenvia_sms.config.zenvia_config import ZenviaSmsConfig
from zenvia_sms.exceptions import AuthorizationMissingError, NetworkError


# Type variable for generic response
T = TypeVar("T")

# Logger for this module
logger = logging.getLogger(__name__)


@dataclass
class HttpResponse(Generic[T]):
    """HTTP response wrapper"""
    data: T
    status: int
    headers: Dict[str, str]
    duration: int  # milliseconds
    request_id: str
    request_body: Optional[Any] = None
    response_text: Optional[str] = None


@dataclass
class HttpExchange:
    """Record of one request/response round trip, for debugging"""
    timestamp: str
    request_id: str
    method: str
    url: str
    headers: Dict[str, str]
    request_body: Optional[Any] = None
    status: Optional[int] = None
    response_body: Optional[Any] = None
    response_text: Optional[str] = None
    duration: int = 0
    success: bool = False
    error: Optional[str] = None


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "password",
]


# Observer called once per call with the exchange record
ExchangeCallback = Callable[[HttpExchange], None]

# Factory creating the session scoped to a single call
SessionFactory = Callable[[], requests.Session]


class HttpClient:
    """
    HTTP Client for the Zenvia SMS API

    Every call opens its own session, sends exactly one POST and closes
    the session on every exit path. There are no retries.

    Example:
        >>> config = ZenviaSmsConfig(authorization_key="dXNlcjpwYXNz")
        >>> client = HttpClient(config)
        >>> response = client.post_json(url, {"sendSmsRequest": {...}})
        >>> print(response.data)
    """

    def __init__(
        self,
        config: ZenviaSmsConfig,
        session_factory: Optional[SessionFactory] = None,
    ) -> None:
        """
        Create a new HTTP client instance

        Args:
            config: Client configuration
            session_factory: Callable returning a fresh requests.Session
        """
        self.config = config
        self._session_factory: SessionFactory = session_factory or requests.Session
        self._exchange_callback: Optional[ExchangeCallback] = None

    def set_exchange_callback(self, callback: Optional[ExchangeCallback]) -> None:
        """Set (or clear with None) the exchange observer"""
        self._exchange_callback = callback

    def _generate_request_id(self) -> str:
        """Generate unique request ID for traceability"""
        timestamp = hex(int(time.time() * 1000))[2:]
        unique_id = uuid.uuid4().hex[:8]
        return f"zenvia-{timestamp}-{unique_id}"

    def _redact_sensitive_data(self, obj: Any) -> Any:
        """Redact sensitive data from object for logging"""
        if isinstance(obj, list):
            return [self._redact_sensitive_data(item) for item in obj]

        if isinstance(obj, dict):
            redacted = {}
            for key, value in obj.items():
                lower_key = str(key).lower()
                if any(field in lower_key for field in SENSITIVE_FIELDS):
                    redacted[key] = "[REDACTED]"
                elif isinstance(value, (dict, list)):
                    redacted[key] = self._redact_sensitive_data(value)
                else:
                    redacted[key] = value
            return redacted

        return obj

    def _check_authorization(self) -> str:
        """Return the authorization key or raise if it is not configured"""
        key = self.config.authorization_key
        if not key:
            raise AuthorizationMissingError()
        return key

    def _build_headers(self, authorization_key: str) -> Dict[str, str]:
        return {
            "Authorization": f"Basic {authorization_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _normalize_error(self, error: requests.exceptions.RequestException) -> NetworkError:
        """Turn a requests transport error into a NetworkError"""
        if isinstance(error, requests.exceptions.Timeout):
            return NetworkError.timeout(cause=error)

        if isinstance(error, requests.exceptions.SSLError):
            return NetworkError.ssl_error(f"SSL/TLS error: {error}", cause=error)

        if isinstance(error, requests.exceptions.ConnectionError):
            return NetworkError.connection_refused(
                f"Connection error: {error}", cause=error
            )

        return NetworkError(f"Request error: {error}", cause=error)

    @staticmethod
    def _parse_body(response: requests.Response) -> Optional[Dict[str, Any]]:
        """
        Parse the response body as a JSON object

        Empty, malformed or non-object bodies give None.
        """
        if not response.content:
            return None
        try:
            data = response.json()
        except ValueError:
            logger.debug("Response body is not valid JSON")
            return None
        return data if isinstance(data, dict) else None

    @staticmethod
    def _release(resource: Any, name: str) -> None:
        """Close a session or response; failures here do not change the outcome"""
        if resource is None:
            return
        try:
            resource.close()
        except Exception as e:
            logger.debug(f"Ignoring error while closing {name}: {e}")

    def _notify(self, exchange: HttpExchange) -> None:
        """Hand the exchange to the observer, if one is set"""
        if self._exchange_callback is None:
            return
        try:
            self._exchange_callback(exchange)
        except Exception:
            logger.exception("Exchange callback failed")

    def post_json(
        self, url: str, payload: Optional[Dict[str, Any]] = None
    ) -> HttpResponse[Optional[Dict[str, Any]]]:
        """
        Perform one authenticated JSON POST

        Args:
            url: Fully-qualified operation URL
            payload: JSON envelope to send as the body (no body when None)

        Returns:
            HTTP response wrapper whose data is the parsed JSON object,
            or None when the body was empty or unparseable

        Raises:
            AuthorizationMissingError: If no authorization key is configured
            HttpSmsError: If the API answers with a non-200 status
            NetworkError: If the request could not be transmitted
        """
        authorization_key = self._check_authorization()

        request_id = self._generate_request_id()
        headers = self._build_headers(authorization_key)
        start_time = time.time()

        exchange = HttpExchange(
            timestamp=datetime.now(timezone.utc).isoformat(),
            request_id=request_id,
            method="POST",
            url=url,
            headers=self._redact_sensitive_data(headers),
            request_body=payload,
        )

        logger.debug(f"POST {url} [{request_id}]")
        if self.config.enable_debug_log:
            logger.debug(
                f"Request body [{request_id}]: "
                f"{self._redact_sensitive_data(payload)}"
            )

        session: Optional[requests.Session] = None
        response: Optional[requests.Response] = None
        try:
            session = self._session_factory()
            request = requests.Request(
                method="POST",
                url=url,
                headers=headers,
                json=payload,
            )

            try:
                # Encoding errors surface here as InvalidJSONError
                prepared = session.prepare_request(request)
                response = session.send(
                    prepared,
                    timeout=self.config.get_timeout_seconds(),
                )
                # Read the whole body before the session is released
                content = response.content
            except requests.exceptions.RequestException as e:
                raise self._normalize_error(e) from e

            data = self._parse_body(response)
            text = content.decode("utf-8", errors="replace") if content else ""
            duration = int((time.time() - start_time) * 1000)

            exchange.status = response.status_code
            exchange.response_body = data
            exchange.response_text = text
            exchange.duration = duration

            logger.debug(
                f"Response {response.status_code} from {url} "
                f"[{request_id}] in {duration}ms"
            )
            if self.config.enable_debug_log:
                logger.debug(
                    f"Response body [{request_id}]: "
                    f"{self._redact_sensitive_data(data) if data is not None else text}"
                )

            if response.status_code != 200:
                logger.warning(
                    f"Zenvia API returned HTTP {response.status_code} "
                    f"for {url} [{request_id}]"
                )
                raise build_http_exception(response.status_code, data)

            exchange.success = True
            return HttpResponse(
                data=data,
                status=response.status_code,
                headers=dict(response.headers),
                duration=duration,
                request_id=request_id,
                request_body=payload,
                response_text=text,
            )
        except Exception as e:
            exchange.error = str(e)
            exchange.duration = int((time.time() - start_time) * 1000)
            raise
        finally:
            self._release(response, "response")
            self._release(session, "session")
            self._notify(exchange)

    @property
    def endpoint(self) -> str:
        """Get configured endpoint"""
        return self.config.endpoint
