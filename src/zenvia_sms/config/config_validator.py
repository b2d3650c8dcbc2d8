"""
Configuration Validator
Validates Zenvia SMS configuration with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Validates a raw configuration dictionary before it is resolved.

    A missing authorization key is not reported: the client may be
    configured first and given credentials later.
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_credentials(config)
        self._validate_endpoint(config)
        self._validate_timeout(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValidationError: If configuration is invalid
        """
        from zenvia_sms.exceptions import ValidationError

        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ValidationError(
                f"Configuration validation failed: {error_messages}",
                field=result.errors[0].field,
            )

    def _validate_credentials(self, config: Dict[str, Any]) -> None:
        """Validate authorization key and username/password pair"""
        key = config.get("authorization_key")
        if key is not None:
            if not isinstance(key, str) or key.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field="authorization_key",
                    message="authorization_key cannot be empty",
                    value="[REDACTED]"
                ))

        username = config.get("username")
        password = config.get("password")
        if (username is None) != (password is None):
            missing = "password" if password is None else "username"
            self._errors.append(ValidationErrorDetail(
                field=missing,
                message="username and password must be given together"
            ))

    def _validate_endpoint(self, config: Dict[str, Any]) -> None:
        """Validate endpoint format"""
        endpoint = config.get("endpoint")
        if endpoint is None:
            return
        if not isinstance(endpoint, str) or not endpoint.startswith(
            ("http://", "https://")
        ):
            self._errors.append(ValidationErrorDetail(
                field="endpoint",
                message="endpoint must be a valid HTTP/HTTPS URL",
                value=endpoint
            ))

    def _validate_timeout(self, config: Dict[str, Any]) -> None:
        """Validate numeric ranges"""
        timeout = config.get("timeout")
        if timeout is None:
            return
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message="timeout must be a positive integer (milliseconds)",
                value=timeout
            ))
        elif timeout > 300000:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message="timeout should not exceed 300000ms (5 minutes)",
                value=timeout
            ))
