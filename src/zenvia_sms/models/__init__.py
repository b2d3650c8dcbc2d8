"""Models module initialization"""

from zenvia_sms.models.sms import (
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
from zenvia_sms.models.codec import wrap_request, unwrap_response

__all__ = [
    "CallbackOption",
    "SendSmsRequest",
    "SendSmsMultiRequest",
    "SendSmsResponse",
    "SendSmsMultiResponse",
    "GetSmsStatusResponse",
    "ReceivedMessage",
    "ReceivedResponse",
    "CancelSmsResponse",
    "wrap_request",
    "unwrap_response",
]
