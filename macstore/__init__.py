"""Persistent pod-to-MAC reservation store for CNI bridge networks."""

from macstore.errors import InvalidMacError, InvalidRecordKeyError, MacStoreError
from macstore.store import MacStore

__all__ = [
    "MacStore",
    "MacStoreError",
    "InvalidMacError",
    "InvalidRecordKeyError",
]
