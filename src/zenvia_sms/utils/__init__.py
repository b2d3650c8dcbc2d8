"""Utilities module initialization"""

from zenvia_sms.utils.auth import encode_basic_credentials
from zenvia_sms.utils.debug import DebugRecorder

__all__ = ["encode_basic_credentials", "DebugRecorder"]
