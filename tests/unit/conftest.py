"""
Shared fixtures: a call-counting stub transport in place of the network
"""

import json
from typing import Any, List, Optional, Union

import pytest
import requests


def make_response(
    status: int,
    body: Union[str, bytes, dict, None] = None,
    headers: Optional[dict] = None,
) -> requests.Response:
    """Build a requests.Response carrying an in-memory body"""
    response = requests.Response()
    response.status_code = status
    if isinstance(body, dict):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response._content = body or b""
    response._content_consumed = True
    response.headers.update(headers or {"Content-Type": "application/json"})
    return response


class StubSession(requests.Session):
    """
    Session whose send() returns a canned response or raises a canned error

    Records every prepared request and whether close() was called.
    """

    def __init__(
        self,
        response: Optional[requests.Response] = None,
        error: Optional[Exception] = None,
    ) -> None:
        super().__init__()
        self.response = response
        self.error = error
        self.sent: List[requests.PreparedRequest] = []
        self.send_kwargs: List[dict] = []
        self.closed = False

    def send(self, request, **kwargs: Any) -> requests.Response:
        self.sent.append(request)
        self.send_kwargs.append(kwargs)
        if self.error is not None:
            raise self.error
        self.response.request = request
        self.response.url = request.url
        return self.response

    def close(self) -> None:
        self.closed = True
        super().close()


class StubTransport:
    """Session factory handing out StubSessions and counting calls"""

    def __init__(self) -> None:
        self.response: Optional[requests.Response] = None
        self.error: Optional[Exception] = None
        self.sessions: List[StubSession] = []

    def respond(self, status: int, body: Union[str, bytes, dict, None] = None) -> None:
        self.response = make_response(status, body)
        self.error = None

    def fail(self, error: Exception) -> None:
        self.error = error

    def __call__(self) -> StubSession:
        session = StubSession(self.response, self.error)
        self.sessions.append(session)
        return session

    @property
    def calls(self) -> int:
        return sum(len(s.sent) for s in self.sessions)

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.sessions[-1].sent[-1]


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def auth_key() -> str:
    # base64 of "user:secret"
    return "dXNlcjpzZWNyZXQ="
