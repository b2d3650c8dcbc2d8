"""Credential helpers"""

import base64


def encode_basic_credentials(username: str, password: str) -> str:
    """
    Build the Basic authorization key from Zenvia account credentials

    Args:
        username: Account username sent by Zenvia
        password: Account password sent by Zenvia

    Returns:
        base64 of ``username:password``
    """
    if not username:
        raise ValueError("username cannot be empty")
    if password is None:
        raise ValueError("password cannot be None")
    raw = f"{username}:{password}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")
