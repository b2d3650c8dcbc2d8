"""
Operation URLs
Each builder appends a fixed suffix to the configured endpoint.
Path parameters are not validated; malformed values are rejected by the API.
"""


def send_sms_url(endpoint: str) -> str:
    """[POST] ENDPOINT/send-sms"""
    return endpoint + "/send-sms"


def send_sms_multiple_url(endpoint: str) -> str:
    """[POST] ENDPOINT/send-sms-multiple"""
    return endpoint + "/send-sms-multiple"


def get_sms_status_url(endpoint: str, sms_id: str) -> str:
    """[POST] ENDPOINT/get-sms-status/{sms_id}"""
    return endpoint + "/get-sms-status/" + str(sms_id)


def list_received_sms_url(endpoint: str) -> str:
    """[POST] ENDPOINT/received/list"""
    return endpoint + "/received/list"


def search_received_sms_url(endpoint: str, start_date: str, end_date: str) -> str:
    """[POST] ENDPOINT/received/search/{start_date}/{end_date}"""
    return endpoint + "/received/search/" + str(start_date) + "/" + str(end_date)


def cancel_sms_url(endpoint: str, sms_id: str) -> str:
    """[POST] ENDPOINT/cancel-sms/{sms_id}"""
    return endpoint + "/cancel-sms/" + str(sms_id)
