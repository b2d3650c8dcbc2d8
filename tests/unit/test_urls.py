"""
URL Builder Unit Tests
"""

import pytest

from zenvia_sms.client import urls
from zenvia_sms.config import DEFAULT_ENDPOINT


class TestUrlBuilders:
    """Tests for operation URL builders"""

    @pytest.fixture
    def endpoint(self) -> str:
        return "https://api.example.com/services"

    def test_send_sms_url(self, endpoint: str):
        """Should append /send-sms"""
        assert urls.send_sms_url(endpoint) == "https://api.example.com/services/send-sms"

    def test_send_sms_multiple_url(self, endpoint: str):
        """Should append /send-sms-multiple"""
        assert (
            urls.send_sms_multiple_url(endpoint)
            == "https://api.example.com/services/send-sms-multiple"
        )

    def test_get_sms_status_url(self, endpoint: str):
        """Should append the message ID to /get-sms-status"""
        assert (
            urls.get_sms_status_url(endpoint, "abc-1")
            == "https://api.example.com/services/get-sms-status/abc-1"
        )

    def test_list_received_sms_url(self, endpoint: str):
        """Should append /received/list"""
        assert (
            urls.list_received_sms_url(endpoint)
            == "https://api.example.com/services/received/list"
        )

    def test_search_received_sms_url(self, endpoint: str):
        """Should append both dates to /received/search"""
        assert (
            urls.search_received_sms_url(endpoint, "2024-01-01T00:00:00", "2024-01-31T23:59:59")
            == "https://api.example.com/services/received/search/"
            "2024-01-01T00:00:00/2024-01-31T23:59:59"
        )

    def test_cancel_sms_url(self, endpoint: str):
        """Should append the message ID to /cancel-sms"""
        assert (
            urls.cancel_sms_url(endpoint, "42")
            == "https://api.example.com/services/cancel-sms/42"
        )

    def test_builders_are_deterministic(self, endpoint: str):
        """Same inputs should always give the same URL"""
        assert urls.get_sms_status_url(endpoint, "1") == urls.get_sms_status_url(endpoint, "1")
        assert urls.search_received_sms_url(endpoint, "a", "b") == urls.search_received_sms_url(
            endpoint, "a", "b"
        )

    def test_parameters_are_not_validated(self, endpoint: str):
        """Malformed dates should be concatenated as given"""
        assert urls.search_received_sms_url(endpoint, "not-a-date", "") == (
            "https://api.example.com/services/received/search/not-a-date/"
        )

    def test_default_endpoint(self):
        """Should build against the production endpoint"""
        assert urls.send_sms_url(DEFAULT_ENDPOINT) == (
            "https://api-rest.zenvia360.com.br/services/send-sms"
        )
