"""
Envelope codec
Wraps typed requests in the API's named JSON envelope and unwraps
typed responses from it
"""

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from zenvia_sms.exceptions import UnexpectedApiResponseError


M = TypeVar("M", bound=BaseModel)


# Request envelope keys
SEND_SMS_REQUEST = "sendSmsRequest"
SEND_SMS_MULTI_REQUEST = "sendSmsMultiRequest"

# Response envelope keys
SEND_SMS_RESPONSE = "sendSmsResponse"
SEND_SMS_MULTI_RESPONSE = "sendSmsMultiResponse"
GET_SMS_STATUS_RESPONSE = "getSmsStatusResp"
RECEIVED_RESPONSE = "receivedResponse"
CANCEL_SMS_RESPONSE = "cancelSmsResp"


def encode(model: Optional[BaseModel]) -> Any:
    """Convert a model into a JSON tree using the API's field names"""
    if model is None:
        return None
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode(tree: Any, model_cls: Type[M]) -> M:
    """Build a typed model from a JSON tree"""
    return model_cls.model_validate(tree)


def wrap_request(envelope_key: str, request: Optional[BaseModel]) -> Dict[str, Any]:
    """
    Wrap a typed request in its envelope

    No validation happens here; incomplete requests are sent as-is
    and rejected by the API.

    Example:
        >>> wrap_request("sendSmsRequest", SendSmsRequest(to="5511999999999"))
        {'sendSmsRequest': {'to': '5511999999999'}}
    """
    return {envelope_key: encode(request)}


def unwrap_response(
    body: Optional[Dict[str, Any]], envelope_key: str, model_cls: Type[M]
) -> M:
    """
    Extract and decode the envelope of a successful response

    Args:
        body: Parsed response body (None when empty or unparseable)
        envelope_key: Top-level key holding the response
        model_cls: Model to decode into

    Raises:
        UnexpectedApiResponseError: If the body or envelope is missing or
            does not match the model
    """
    if body is None:
        raise UnexpectedApiResponseError(
            "Empty or unparseable response body", envelope_key=envelope_key
        )

    tree = body.get(envelope_key)
    if not isinstance(tree, dict):
        raise UnexpectedApiResponseError(
            f"Response does not contain '{envelope_key}'",
            body=body,
            envelope_key=envelope_key,
        )

    try:
        return decode(tree, model_cls)
    except PydanticValidationError as e:
        raise UnexpectedApiResponseError(
            f"Could not decode '{envelope_key}': {e.error_count()} invalid field(s)",
            body=body,
            envelope_key=envelope_key,
            cause=e,
        ) from e
