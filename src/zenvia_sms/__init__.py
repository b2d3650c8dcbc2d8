"""
Zenvia SMS SDK for Python

Main entry point for the SDK
"""

from zenvia_sms.client import ZenviaSmsClient
from zenvia_sms.exceptions import (
    ZenviaSmsError,
    ErrorKind,
    AuthorizationMissingError,
    HttpSmsError,
    ClientRequestError,
    BadRequestError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnexpectedHttpStatusError,
    UnexpectedApiResponseError,
    InvalidEntityError,
    NetworkError,
    ConfigError,
    ValidationError,
)

# HTTP Client
from zenvia_sms.client import (
    HttpClient,
    HttpResponse,
    HttpExchange,
    build_http_exception,
)

# Configuration
from zenvia_sms.config import (
    ZenviaSmsConfig,
    ConfigLoader,
    ConfigValidator,
    DEFAULT_ENDPOINT,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Models
from zenvia_sms.models import (
    CallbackOption,
    SendSmsRequest,
    SendSmsMultiRequest,
    SendSmsResponse,
    SendSmsMultiResponse,
    GetSmsStatusResponse,
    ReceivedMessage,
    ReceivedResponse,
    CancelSmsResponse,
)

from zenvia_sms.utils import DebugRecorder, encode_basic_credentials

__version__ = "0.1.0"

__all__ = [
    # Client
    "ZenviaSmsClient",
    # HTTP Client
    "HttpClient",
    "HttpResponse",
    "HttpExchange",
    "build_http_exception",
    # Exceptions
    "ZenviaSmsError",
    "ErrorKind",
    "AuthorizationMissingError",
    "HttpSmsError",
    "ClientRequestError",
    "BadRequestError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "UnexpectedHttpStatusError",
    "UnexpectedApiResponseError",
    "InvalidEntityError",
    "NetworkError",
    "ConfigError",
    "ValidationError",
    # Configuration
    "ZenviaSmsConfig",
    "ConfigLoader",
    "ConfigValidator",
    "DEFAULT_ENDPOINT",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Models
    "CallbackOption",
    "SendSmsRequest",
    "SendSmsMultiRequest",
    "SendSmsResponse",
    "SendSmsMultiResponse",
    "GetSmsStatusResponse",
    "ReceivedMessage",
    "ReceivedResponse",
    "CancelSmsResponse",
    # Utilities
    "DebugRecorder",
    "encode_basic_credentials",
]
