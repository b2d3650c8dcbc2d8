"""
Zenvia SMS Configuration Types and Schema
Type-safe configuration objects for the Zenvia SMS SDK
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


# Production endpoint of the Zenvia SMS REST API
DEFAULT_ENDPOINT = "https://api-rest.zenvia360.com.br/services"


class ConfigDefaults:
    """Default configuration values"""
    ENDPOINT = DEFAULT_ENDPOINT
    TIMEOUT = None
    ENABLE_DEBUG_LOG = False


# Environment variable mapping
ENV_VAR_MAPPING = {
    "ZENVIA_AUTHORIZATION_KEY": "authorization_key",
    "ZENVIA_USERNAME": "username",
    "ZENVIA_PASSWORD": "password",
    "ZENVIA_ENDPOINT": "endpoint",
    "ZENVIA_TIMEOUT": "timeout",
    "ZENVIA_ENABLE_DEBUG_LOG": "enable_debug_log",
}


class ZenviaSmsConfig(BaseModel):
    """
    Client configuration

    ``authorization_key`` is the base64 ``username:password`` credential
    sent as HTTP Basic authorization. It may be left unset here; calls
    made without it fail with ``AuthorizationMissingError``.
    """

    authorization_key: Optional[str] = Field(
        default=None,
        description="Base64 encoded Basic authorization credential"
    )
    endpoint: str = Field(
        default=ConfigDefaults.ENDPOINT,
        description="Base URI of the Zenvia SMS API",
        min_length=1
    )
    timeout: Optional[int] = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Request timeout in milliseconds (transport default when unset)",
        ge=1,
        le=300000
    )
    enable_debug_log: bool = Field(
        default=ConfigDefaults.ENABLE_DEBUG_LOG,
        description="Log redacted request and response bodies at DEBUG level"
    )

    model_config = {
        "str_strip_whitespace": True,
        "validate_assignment": True,
    }

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate endpoint is a valid URL"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must be a valid HTTP/HTTPS URL")
        return v

    def get_timeout_seconds(self) -> Optional[float]:
        """Timeout in seconds as expected by requests, or None"""
        if self.timeout is None:
            return None
        return self.timeout / 1000.0
