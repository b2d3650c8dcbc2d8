"""SMS request and response models"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CallbackOption(str, Enum):
    """Which delivery callbacks Zenvia posts back for a message"""
    NONE = "NONE"
    FINAL = "FINAL"
    ALL = "ALL"


class ZenviaModel(BaseModel):
    """Base model mapping snake_case attributes to the API's camelCase keys"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class StatusFields(ZenviaModel):
    """Status and detail codes shared by most responses"""

    status_code: Optional[str] = Field(None, description="Status code")
    status_description: Optional[str] = Field(None, description="Status description")
    detail_code: Optional[str] = Field(None, description="Detail code")
    detail_description: Optional[str] = Field(None, description="Detail description")


class SendSmsRequest(ZenviaModel):
    """Single SMS request"""

    from_: Optional[str] = Field(None, alias="from", description="Sender shown to the recipient")
    to: Optional[str] = Field(None, description="Recipient phone number")
    schedule: Optional[str] = Field(None, description="Scheduled send date/time (ISO 8601)")
    msg: Optional[str] = Field(None, description="Message text")
    callback_option: Optional[CallbackOption] = Field(None, description="Callback option")
    id: Optional[str] = Field(None, description="Client-side message ID")
    aggregate_id: Optional[int] = Field(None, description="Aggregation ID for reporting")
    flash_sms: Optional[bool] = Field(None, description="Send as flash SMS")


class SendSmsMultiRequest(ZenviaModel):
    """Bulk SMS request"""

    aggregate_id: Optional[int] = Field(None, description="Aggregation ID for reporting")
    send_sms_request_list: List[SendSmsRequest] = Field(
        default_factory=list, description="Messages to send"
    )


class SendSmsResponse(StatusFields):
    """Single SMS response"""

    id: Optional[str] = Field(None, description="Message ID")


class SendSmsMultiResponse(ZenviaModel):
    """Bulk SMS response"""

    send_sms_response_list: List[SendSmsResponse] = Field(
        default_factory=list, description="One response per message sent"
    )


class GetSmsStatusResponse(StatusFields):
    """Delivery status of a sent message"""

    id: Optional[str] = Field(None, description="Message ID")
    received: Optional[str] = Field(None, description="Delivery date/time")
    shortcode: Optional[str] = Field(None, description="Short code used")
    mobile_operator_name: Optional[str] = Field(None, description="Recipient operator")


class ReceivedMessage(ZenviaModel):
    """Message received from a mobile"""

    id: Optional[int] = Field(None, description="Received message ID")
    date_received: Optional[str] = Field(None, description="Date/time received")
    mobile: Optional[str] = Field(None, description="Sender phone number")
    body: Optional[str] = Field(None, description="Message text")
    shortcode: Optional[str] = Field(None, description="Short code the message was sent to")
    mobile_operator_name: Optional[str] = Field(None, description="Sender operator")
    mt_id: Optional[str] = Field(None, description="ID of the message this replies to")


class ReceivedResponse(StatusFields):
    """Received messages listing"""

    received_messages: List[ReceivedMessage] = Field(
        default_factory=list, description="Received messages"
    )


class CancelSmsResponse(StatusFields):
    """Result of cancelling a scheduled message"""
