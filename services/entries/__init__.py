"""
Entry Services Module
Handles reading and writing JSON entries in the key/value store
"""

from .entry_service import EntryService, capture_payload
from .exceptions import EntryStoreError, StoreUnavailable, KeyNotFound, MalformedValue

__all__ = [
    "EntryService",
    "capture_payload",
    "EntryStoreError",
    "StoreUnavailable",
    "KeyNotFound",
    "MalformedValue",
]
