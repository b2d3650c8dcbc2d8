"""
HTTP Client module for Zenvia SMS SDK
"""

from zenvia_sms.client.zenvia_client import ZenviaSmsClient
from zenvia_sms.client.http_client import (
    HttpClient,
    HttpResponse,
    HttpExchange,
    ExchangeCallback,
    SessionFactory,
)
from zenvia_sms.client.error_mapper import build_http_exception

__all__ = [
    "ZenviaSmsClient",
    "HttpClient",
    "HttpResponse",
    "HttpExchange",
    "ExchangeCallback",
    "SessionFactory",
    "build_http_exception",
]
