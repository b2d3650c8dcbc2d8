"""
Exception Unit Tests
"""

import requests

from zenvia_sms.exceptions import (
    AuthorizationMissingError,
    ErrorKind,
    InvalidEntityError,
    NetworkError,
    UnexpectedApiResponseError,
    ZenviaSmsError,
)


class TestErrorKinds:
    """Every failure surfaces as one tagged ZenviaSmsError"""

    def test_authorization_missing(self):
        error = AuthorizationMissingError()
        assert isinstance(error, ZenviaSmsError)
        assert error.is_kind(ErrorKind.AUTHORIZATION_MISSING)
        assert error.has_code("AUTH_MISSING")

    def test_unexpected_response(self):
        error = UnexpectedApiResponseError(envelope_key="sendSmsResponse")
        assert error.kind == ErrorKind.UNEXPECTED_RESPONSE
        assert error.details == {"envelope_key": "sendSmsResponse"}

    def test_invalid_entity_message(self):
        request = {"to": "1"}
        cause = NetworkError.connection_refused()
        error = InvalidEntityError(request, cause=cause)
        assert error.request is request
        assert str(error) == "Could not send request: Connection refused"
        assert error.is_network_fault is True

    def test_invalid_entity_without_cause(self):
        error = InvalidEntityError(None)
        assert str(error) == "Could not send request"
        assert error.is_network_fault is False

    def test_network_error_factories(self):
        cause = requests.exceptions.ReadTimeout("slow")
        error = NetworkError.timeout(cause=cause)
        assert error.status_code == 408
        assert error.network_code == "NET01"
        assert error.cause is cause
        assert NetworkError.ssl_error().network_code == "NET04"

    def test_to_dict(self):
        data = AuthorizationMissingError().to_dict()
        assert data["name"] == "AuthorizationMissingError"
        assert data["kind"] == "AUTHORIZATION_MISSING"
        assert data["status_code"] is None
