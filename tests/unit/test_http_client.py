"""
HTTP Client Unit Tests
"""

import json
import logging

import pytest
import requests

from zenvia_sms.client.http_client import HttpClient, HttpExchange
from zenvia_sms.config import ZenviaSmsConfig
from zenvia_sms.exceptions import (
    AuthorizationMissingError,
    BadRequestError,
    HttpSmsError,
    NetworkError,
    ServerError,
)

URL = "https://api.example.com/services/send-sms"


class TestHttpClient:
    """Tests for HttpClient.post_json"""

    @pytest.fixture
    def config(self, auth_key: str) -> ZenviaSmsConfig:
        return ZenviaSmsConfig(
            authorization_key=auth_key,
            endpoint="https://api.example.com/services",
        )

    @pytest.fixture
    def client(self, config: ZenviaSmsConfig, transport) -> HttpClient:
        return HttpClient(config, session_factory=transport)

    def test_missing_authorization_makes_no_call(self, transport):
        """Should fail before opening a session when no key is set"""
        client = HttpClient(ZenviaSmsConfig(), session_factory=transport)
        with pytest.raises(AuthorizationMissingError):
            client.post_json(URL, {"sendSmsRequest": {}})
        assert transport.calls == 0
        assert transport.sessions == []

    def test_empty_authorization_makes_no_call(self, transport):
        client = HttpClient(
            ZenviaSmsConfig(authorization_key=""), session_factory=transport
        )
        with pytest.raises(AuthorizationMissingError):
            client.post_json(URL, {})
        assert transport.calls == 0

    def test_headers(self, client: HttpClient, transport, auth_key: str):
        """Should send Basic authorization and JSON headers"""
        transport.respond(200, {"ok": True})
        client.post_json(URL, {"sendSmsRequest": {"to": "1"}})

        sent = transport.last_request
        assert sent.method == "POST"
        assert sent.url == URL
        assert sent.headers["Authorization"] == f"Basic {auth_key}"
        assert sent.headers["Content-Type"] == "application/json"
        assert sent.headers["Accept"] == "application/json"

    def test_body_is_json_envelope(self, client: HttpClient, transport):
        """Should serialize the envelope as UTF-8 JSON"""
        transport.respond(200, {"ok": True})
        payload = {"sendSmsRequest": {"msg": "Olá, São Paulo"}}
        client.post_json(URL, payload)

        body = transport.last_request.body
        assert isinstance(body, bytes)
        assert json.loads(body.decode("utf-8")) == payload

    def test_no_payload_sends_no_body(self, client: HttpClient, transport):
        transport.respond(200, {"ok": True})
        client.post_json(URL)
        assert transport.last_request.body is None

    def test_exactly_one_call(self, client: HttpClient, transport):
        """Should not retry on server errors"""
        transport.respond(503, {"message": "down"})
        with pytest.raises(ServerError):
            client.post_json(URL, {})
        assert transport.calls == 1

    def test_success_returns_parsed_body(self, client: HttpClient, transport):
        transport.respond(200, {"sendSmsResponse": {"id": "1"}})
        response = client.post_json(URL, {"sendSmsRequest": {}})
        assert response.status == 200
        assert response.data == {"sendSmsResponse": {"id": "1"}}
        assert response.request_body == {"sendSmsRequest": {}}
        assert response.request_id.startswith("zenvia-")

    @pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", b"\"text\""])
    def test_unparseable_body_gives_none(self, client: HttpClient, transport, body: bytes):
        """Should degrade empty, malformed or non-object bodies to None"""
        transport.respond(200, body)
        response = client.post_json(URL, {})
        assert response.data is None

    def test_non_200_raises_mapped_error(self, client: HttpClient, transport):
        transport.respond(400, {"message": "bad request"})
        with pytest.raises(BadRequestError) as exc_info:
            client.post_json(URL, {})
        assert exc_info.value.status_code == 400
        assert exc_info.value.body == {"message": "bad request"}

    def test_non_200_with_empty_body(self, client: HttpClient, transport):
        transport.respond(500, b"")
        with pytest.raises(ServerError) as exc_info:
            client.post_json(URL, {})
        assert exc_info.value.body is None

    def test_timeout_not_set_by_default(self, client: HttpClient, transport):
        """Should leave the timeout to the transport"""
        transport.respond(200, {})
        client.post_json(URL, {})
        assert transport.sessions[-1].send_kwargs[-1]["timeout"] is None

    def test_configured_timeout(self, auth_key: str, transport):
        config = ZenviaSmsConfig(authorization_key=auth_key, timeout=2500)
        transport.respond(200, {})
        HttpClient(config, session_factory=transport).post_json(URL, {})
        assert transport.sessions[-1].send_kwargs[-1]["timeout"] == 2.5

    @pytest.mark.parametrize("status", [200, 404])
    def test_session_closed_after_response(self, client: HttpClient, transport, status: int):
        """Should release the session on success and mapped errors"""
        transport.respond(status, {})
        if status == 200:
            client.post_json(URL, {})
        else:
            with pytest.raises(HttpSmsError):
                client.post_json(URL, {})
        assert transport.sessions[-1].closed is True

    def test_session_closed_after_transport_fault(self, client: HttpClient, transport):
        transport.fail(requests.exceptions.ConnectionError("refused"))
        with pytest.raises(NetworkError):
            client.post_json(URL, {})
        assert transport.sessions[-1].closed is True

    @pytest.mark.parametrize(
        "error, network_code",
        [
            (requests.exceptions.ConnectTimeout("slow"), "NET01"),
            (requests.exceptions.ReadTimeout("slow"), "NET01"),
            (requests.exceptions.SSLError("bad cert"), "NET04"),
            (requests.exceptions.ConnectionError("refused"), "NET02"),
            (requests.exceptions.ChunkedEncodingError("broken"), "NET10"),
        ],
    )
    def test_transport_faults_become_network_errors(
        self, client: HttpClient, transport, error: Exception, network_code: str
    ):
        transport.fail(error)
        with pytest.raises(NetworkError) as exc_info:
            client.post_json(URL, {})
        assert exc_info.value.network_code == network_code
        assert exc_info.value.cause is error

    def test_unserializable_payload(self, client: HttpClient, transport):
        """Should report encoding failures as transport-level errors"""
        transport.respond(200, {})
        with pytest.raises(NetworkError):
            client.post_json(URL, {"sendSmsRequest": {"value": float("nan")}})
        assert transport.calls == 0

    def test_close_errors_are_ignored(self, client: HttpClient, transport, monkeypatch):
        """Should not let a failing close change the outcome"""
        transport.respond(200, {"ok": True})

        def broken_close(self):
            raise OSError("socket already closed")

        monkeypatch.setattr(requests.Session, "close", broken_close)
        response = client.post_json(URL, {})
        assert response.data == {"ok": True}


class TestExchangeCallback:
    """Tests for the exchange observer"""

    @pytest.fixture
    def client(self, auth_key: str, transport) -> HttpClient:
        config = ZenviaSmsConfig(authorization_key=auth_key)
        return HttpClient(config, session_factory=transport)

    def test_callback_receives_exchange(self, client: HttpClient, transport):
        exchanges = []
        client.set_exchange_callback(exchanges.append)
        transport.respond(200, {"sendSmsResponse": {"id": "1"}})

        client.post_json(URL, {"sendSmsRequest": {"to": "1"}})

        assert len(exchanges) == 1
        exchange = exchanges[0]
        assert isinstance(exchange, HttpExchange)
        assert exchange.success is True
        assert exchange.status == 200
        assert exchange.request_body == {"sendSmsRequest": {"to": "1"}}
        assert exchange.response_body == {"sendSmsResponse": {"id": "1"}}

    def test_authorization_is_redacted(self, client: HttpClient, transport):
        exchanges = []
        client.set_exchange_callback(exchanges.append)
        transport.respond(200, {})
        client.post_json(URL, {})
        assert exchanges[0].headers["Authorization"] == "[REDACTED]"

    def test_callback_on_error(self, client: HttpClient, transport):
        exchanges = []
        client.set_exchange_callback(exchanges.append)
        transport.respond(400, {"message": "bad request"})

        with pytest.raises(BadRequestError):
            client.post_json(URL, {})

        assert exchanges[0].success is False
        assert exchanges[0].status == 400
        assert exchanges[0].error == "bad request"

    def test_failing_callback_does_not_change_outcome(
        self, client: HttpClient, transport, caplog
    ):
        def broken(exchange):
            raise RuntimeError("observer bug")

        client.set_exchange_callback(broken)
        transport.respond(200, {"ok": True})
        with caplog.at_level(logging.ERROR):
            response = client.post_json(URL, {})
        assert response.data == {"ok": True}
        assert "Exchange callback failed" in caplog.text

    def test_debug_log_includes_redacted_body(self, auth_key: str, transport, caplog):
        config = ZenviaSmsConfig(authorization_key=auth_key, enable_debug_log=True)
        client = HttpClient(config, session_factory=transport)
        transport.respond(200, {"ok": True})
        with caplog.at_level(logging.DEBUG, logger="zenvia_sms.client.http_client"):
            client.post_json(URL, {"sendSmsRequest": {"password": "x", "to": "1"}})
        assert "[REDACTED]" in caplog.text
        assert "'to': '1'" in caplog.text
