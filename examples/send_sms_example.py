"""
Usage Examples for Zenvia SMS SDK
Demonstrates configuring the client, sending messages and handling errors
"""

import logging

from zenvia_sms import (
    AuthorizationMissingError,
    CallbackOption,
    ClientRequestError,
    ConfigValidator,
    InvalidEntityError,
    SendSmsMultiRequest,
    SendSmsRequest,
    ServerError,
    UnexpectedApiResponseError,
    ZenviaSmsClient,
)


# =============================================================================
# Example 1: Client from Credentials
# =============================================================================

def credentials_client_example() -> ZenviaSmsClient:
    """Build the Basic key from the username and password sent by Zenvia"""
    return ZenviaSmsClient.from_credentials(
        "your-username",
        "your-password",
        debug=True,  # keep the last request/response for inspection
    )


# =============================================================================
# Example 2: Client from Environment Variables
# =============================================================================

def env_client_example() -> ZenviaSmsClient:
    """
    Load configuration from environment variables

    Set these environment variables before running:

    export ZENVIA_USERNAME="your-username"
    export ZENVIA_PASSWORD="your-password"
    export ZENVIA_TIMEOUT="30000"
    export ZENVIA_ENABLE_DEBUG_LOG="true"
    """
    return ZenviaSmsClient.from_config(env=True)


# =============================================================================
# Example 3: Sending a Single SMS
# =============================================================================

def send_single_sms_example(client: ZenviaSmsClient) -> None:
    """Send one message and handle each failure kind"""
    request = SendSmsRequest(
        from_="Acme",
        to="5511999999999",
        msg="Your verification code is 1234",
        callback_option=CallbackOption.FINAL,
        id="order-1001",
    )

    try:
        response = client.send_single_sms(request)
        print(f"Sent: {response.status_code} {response.detail_description}")
    except AuthorizationMissingError:
        print("Configure credentials first")
    except ClientRequestError as e:
        print(f"Rejected ({e.status_code}): {e} {e.body}")
    except ServerError as e:
        print(f"Zenvia failed ({e.status_code}); retry later")
    except UnexpectedApiResponseError as e:
        print(f"Unexpected response: {e}")
    except InvalidEntityError as e:
        reason = "network" if e.is_network_fault else "payload"
        print(f"Could not send ({reason}): {e}")

    if client.debug_recorder is not None:
        print(client.debug())


# =============================================================================
# Example 4: Bulk Send, Status and Received Messages
# =============================================================================

def other_operations_example(client: ZenviaSmsClient) -> None:
    """Bulk send, then check status, inbox and cancel a scheduled message"""
    bulk = SendSmsMultiRequest(
        aggregate_id=1111,
        send_sms_request_list=[
            SendSmsRequest(to="5511999999999", msg="Hello", id="bulk-1"),
            SendSmsRequest(
                to="5511888888888",
                msg="Reminder",
                id="bulk-2",
                schedule="2030-01-01T09:00:00",
            ),
        ],
    )
    for item in client.send_multiple_sms(bulk).send_sms_response_list:
        print(f"  {item.status_code} {item.detail_description}")

    status = client.get_sms_status("bulk-1")
    print(f"bulk-1: {status.status_description} via {status.mobile_operator_name}")

    for message in client.list_received_sms().received_messages:
        print(f"  {message.mobile}: {message.body}")

    period = client.search_received_sms("2024-01-01T00:00:00", "2024-01-31T23:59:59")
    print(f"{len(period.received_messages)} messages in January")

    cancelled = client.cancel_sms("bulk-2")
    print(f"bulk-2 cancel: {cancelled.status_description}")


# =============================================================================
# Example 5: Configuration Validation
# =============================================================================

def validation_example() -> None:
    """Validate configuration before use"""
    validator = ConfigValidator()

    result = validator.validate({
        "username": "only-username",
        "endpoint": "api-rest.zenvia360.com.br",
    })

    if not result.valid:
        print("Configuration validation failed:")
        for error in result.errors:
            print(f"  - {error.field}: {error.message}")


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    print("=== Zenvia SMS Examples ===\n")

    print("5. Configuration Validation:")
    validation_example()
    print()

    print("3. Send Single SMS (placeholder credentials):")
    send_single_sms_example(credentials_client_example())
