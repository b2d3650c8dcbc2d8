"""Debug helpers"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from zenvia_sms.client.http_client import HttpExchange


class DebugRecorder:
    """
    Exchange observer keeping the most recent round trips

    Register it with ``ZenviaSmsClient.set_exchange_callback`` (or pass
    ``debug=True`` to the client). It is overwritten on every call and is
    not safe to read while another call on the same client is in flight.

    Example:
        >>> recorder = DebugRecorder()
        >>> client.set_exchange_callback(recorder)
        >>> client.send_single_sms(request)
        >>> print(recorder.debug())
    """

    def __init__(self, history_size: int = 1) -> None:
        if history_size < 1:
            raise ValueError("history_size must be at least 1")
        self.history_size = history_size
        self.history: List["HttpExchange"] = []

    def __call__(self, exchange: "HttpExchange") -> None:
        self.history.append(exchange)
        del self.history[:-self.history_size]

    @property
    def last(self) -> Optional["HttpExchange"]:
        return self.history[-1] if self.history else None

    @property
    def request_body(self):
        return self.last.request_body if self.last else None

    @property
    def response_body(self):
        return self.last.response_body if self.last else None

    def clear(self) -> None:
        self.history.clear()

    def debug(self) -> str:
        """Render the last exchange as text: URL, request and response bodies"""
        exchange = self.last
        if exchange is None:
            return "No request recorded\n"

        lines = [f"Endpoint: {exchange.method} {exchange.url}"]
        if exchange.request_body is not None:
            lines.append(f"Request body: {exchange.request_body}")
        if exchange.status is not None:
            lines.append(f"Status: {exchange.status}")
        if exchange.response_body is not None:
            lines.append(f"Response body: {exchange.response_body}")
        elif exchange.response_text:
            lines.append(f"Response body: {exchange.response_text}")
        if exchange.error:
            lines.append(f"Error: {exchange.error}")
        return "\n".join(lines) + "\n"
