"""
Entry store exceptions
Raised by the store client and the entry service, mapped to HTTP errors by the API layer
"""

from typing import Optional


class EntryStoreError(Exception):
    """Base class for key/value entry failures"""


class StoreUnavailable(EntryStoreError):
    """The key/value store could not be reached, failed the command, or timed out"""

    def __init__(self, operation: str, reason: Optional[str] = None):
        self.operation = operation
        self.reason = reason
        message = f"Key-value store unavailable during {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class KeyNotFound(EntryStoreError):
    """No value is stored under the requested key"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No entry stored under key '{key}'")


class MalformedValue(EntryStoreError):
    """The stored value is not a JSON document"""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Value stored under key '{key}' is not valid JSON: {reason}")


__all__ = [
    "EntryStoreError",
    "StoreUnavailable",
    "KeyNotFound",
    "MalformedValue",
]
