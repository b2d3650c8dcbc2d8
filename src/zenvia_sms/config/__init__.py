"""
Configuration module
"""

from zenvia_sms.config.zenvia_config import (
    ZenviaSmsConfig,
    DEFAULT_ENDPOINT,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from zenvia_sms.config.config_loader import ConfigLoader
from zenvia_sms.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "ZenviaSmsConfig",
    "DEFAULT_ENDPOINT",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
