"""
Zenvia SMS API client
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from zenvia_sms.client import urls
from zenvia_sms.client.http_client import (
    ExchangeCallback,
    HttpClient,
    SessionFactory,
)
from zenvia_sms.config.config_loader import ConfigLoader
from zenvia_sms.config.zenvia_config import DEFAULT_ENDPOINT, ZenviaSmsConfig
from zenvia_sms.exceptions import InvalidEntityError, NetworkError
from zenvia_sms.models import codec
from zenvia_sms.models.sms import (
    CancelSmsResponse,
    GetSmsStatusResponse,
    ReceivedResponse,
    SendSmsMultiRequest,
    SendSmsMultiResponse,
    SendSmsRequest,
    SendSmsResponse,
)
from zenvia_sms.utils.auth import encode_basic_credentials
from zenvia_sms.utils.debug import DebugRecorder


R = TypeVar("R", bound=BaseModel)

logger = logging.getLogger(__name__)


class ZenviaSmsClient:
    """
    HTTP client for Zenvia's SMS API

    Each operation performs one POST and returns the typed response.

    Raises (from every operation):
        AuthorizationMissingError: No authorization key configured;
            nothing is sent
        HttpSmsError: Non-200 response (subclass chosen by status)
        UnexpectedApiResponseError: 200 response without the expected body
        InvalidEntityError: The request could not be serialized or sent

    Example:
        >>> client = ZenviaSmsClient.from_credentials("user", "pass")
        >>> response = client.send_single_sms(
        ...     SendSmsRequest(to="5511999999999", msg="Hello")
        ... )
        >>> print(response.status_code)
    """

    VERSION = "0.1.0"

    def __init__(
        self,
        authorization_key: Optional[str] = None,
        endpoint: str = DEFAULT_ENDPOINT,
        config: Optional[ZenviaSmsConfig] = None,
        session_factory: Optional[SessionFactory] = None,
        debug: bool = False,
    ) -> None:
        """
        Args:
            authorization_key: Base64 ``username:password`` credential
            endpoint: Base URI of the API
            config: Full configuration; overrides the two arguments above
            session_factory: Callable returning a fresh requests.Session
            debug: Record the last exchange in ``self.debug_recorder``
        """
        if config is None:
            config = ZenviaSmsConfig(
                authorization_key=authorization_key, endpoint=endpoint
            )
        self.config = config
        self._http = HttpClient(config, session_factory=session_factory)
        self.debug_recorder: Optional[DebugRecorder] = None
        if debug:
            self.debug_recorder = DebugRecorder()
            self._http.set_exchange_callback(self.debug_recorder)

    @classmethod
    def from_credentials(
        cls, username: str, password: str, **kwargs: Any
    ) -> "ZenviaSmsClient":
        """Create a client whose key is built from account credentials"""
        return cls(
            authorization_key=encode_basic_credentials(username, password),
            **kwargs,
        )

    @classmethod
    def from_config(
        cls,
        file: Optional[Union[str, Path]] = None,
        env: bool = True,
        config: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> "ZenviaSmsClient":
        """Create a client from file, environment and dict configuration"""
        resolved = ConfigLoader().load(file=file, env=env, config=config)
        return cls(config=resolved, **kwargs)

    # Configuration

    @property
    def endpoint(self) -> str:
        """Zenvia API endpoint"""
        return self.config.endpoint

    @endpoint.setter
    def endpoint(self, endpoint: str) -> None:
        self.set_endpoint(endpoint)

    def set_endpoint(self, endpoint: str) -> None:
        """
        Args:
            endpoint: Zenvia API endpoint (default is DEFAULT_ENDPOINT)
        """
        self.config.endpoint = endpoint

    @property
    def authorization_key(self) -> Optional[str]:
        """Basic authorization key"""
        return self.config.authorization_key

    @authorization_key.setter
    def authorization_key(self, key: str) -> None:
        self.set_authorization_key(key)

    def set_authorization_key(self, key: str) -> None:
        """
        Args:
            key: Base64 ``username:password`` key required for authentication

        Raises:
            ValueError: If key is None
        """
        if key is None:
            raise ValueError("Illegal authorization key: None")
        self.config.authorization_key = key

    def set_exchange_callback(self, callback: Optional[ExchangeCallback]) -> None:
        """Observe every request/response round trip (None to stop)"""
        self._http.set_exchange_callback(callback)

    # URLs

    def send_sms_url(self) -> str:
        return urls.send_sms_url(self.endpoint)

    def send_sms_multiple_url(self) -> str:
        return urls.send_sms_multiple_url(self.endpoint)

    def get_sms_status_url(self, sms_id: str) -> str:
        return urls.get_sms_status_url(self.endpoint, sms_id)

    def list_received_sms_url(self) -> str:
        return urls.list_received_sms_url(self.endpoint)

    def search_received_sms_url(self, start_date: str, end_date: str) -> str:
        return urls.search_received_sms_url(self.endpoint, start_date, end_date)

    def cancel_sms_url(self, sms_id: str) -> str:
        return urls.cancel_sms_url(self.endpoint, sms_id)

    # Execution

    def _execute(
        self,
        url: str,
        response_key: str,
        response_cls: Type[R],
        request: Optional[BaseModel] = None,
        request_key: Optional[str] = None,
    ) -> R:
        """Send one request and decode its response envelope"""
        payload: Optional[Dict[str, Any]] = None
        if request_key is not None:
            try:
                payload = codec.wrap_request(request_key, request)
            except (TypeError, ValueError) as e:
                raise InvalidEntityError(request, cause=e) from e

        try:
            response = self._http.post_json(url, payload)
        except NetworkError as e:
            logger.warning(f"Could not send request to {url}: {e}")
            raise InvalidEntityError(request, cause=e) from e

        return codec.unwrap_response(response.data, response_key, response_cls)

    # Operations

    def send_single_sms(self, request: SendSmsRequest) -> SendSmsResponse:
        """
        Send a single SMS

        Args:
            request: Message to send

        Returns:
            Send status of the message
        """
        return self._execute(
            self.send_sms_url(),
            codec.SEND_SMS_RESPONSE,
            SendSmsResponse,
            request=request,
            request_key=codec.SEND_SMS_REQUEST,
        )

    def send_multiple_sms(self, request: SendSmsMultiRequest) -> SendSmsMultiResponse:
        """
        Send several SMS in one call

        Args:
            request: Messages to send, optionally under one aggregate ID

        Returns:
            One send status per message
        """
        return self._execute(
            self.send_sms_multiple_url(),
            codec.SEND_SMS_MULTI_RESPONSE,
            SendSmsMultiResponse,
            request=request,
            request_key=codec.SEND_SMS_MULTI_REQUEST,
        )

    def get_sms_status(self, sms_id: str) -> GetSmsStatusResponse:
        """Get the delivery status of a message sent with the given ID"""
        return self._execute(
            self.get_sms_status_url(sms_id),
            codec.GET_SMS_STATUS_RESPONSE,
            GetSmsStatusResponse,
        )

    def list_received_sms(self) -> ReceivedResponse:
        """List received messages not yet fetched"""
        return self._execute(
            self.list_received_sms_url(),
            codec.RECEIVED_RESPONSE,
            ReceivedResponse,
        )

    def search_received_sms(self, start_date: str, end_date: str) -> ReceivedResponse:
        """
        Search received messages in a period

        Args:
            start_date: Period start, e.g. ``2024-01-01T00:00:00``
            end_date: Period end, same format

        Dates are not validated locally.
        """
        return self._execute(
            self.search_received_sms_url(start_date, end_date),
            codec.RECEIVED_RESPONSE,
            ReceivedResponse,
        )

    def cancel_sms(self, sms_id: str) -> CancelSmsResponse:
        """Cancel a scheduled message"""
        return self._execute(
            self.cancel_sms_url(sms_id),
            codec.CANCEL_SMS_RESPONSE,
            CancelSmsResponse,
        )

    def debug(self) -> str:
        """
        Describe the client and, when debug recording is on, the last exchange
        """
        text = f"Endpoint: {self.endpoint}\n"
        text += "Authorization key: "
        text += "[SET]\n" if self.authorization_key else "[NOT SET]\n"
        if self.debug_recorder is not None:
            text += self.debug_recorder.debug()
        return text

    def close(self) -> None:
        """Nothing to release; sessions are scoped to each call"""

    def __enter__(self) -> "ZenviaSmsClient":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()
