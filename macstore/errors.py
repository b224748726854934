"""Exceptions raised by the MAC store.

Filesystem failures are not wrapped: OSError propagates unchanged.
"""


class MacStoreError(Exception):
    """Base class for store errors that are not filesystem failures."""


class InvalidMacError(MacStoreError, ValueError):
    """A stored or supplied hardware address could not be parsed."""


class InvalidRecordKeyError(MacStoreError, ValueError):
    """A key component would break the record filename grammar."""
