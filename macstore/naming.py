"""Record filename grammar.

A reservation is stored as an empty file whose name carries the whole
record:

    mac_<mac>_<namespace>_<name>

Pod names and namespaces containing "_" cannot be represented; the
grammar has no escaping.
"""

from __future__ import annotations

from dataclasses import dataclass

from macstore.config import settings
from macstore.errors import InvalidRecordKeyError

RECORD_PREFIX = "mac"
RECORD_SEPARATOR = "_"

# prefix, mac, namespace, name
RECORD_SEGMENTS = 4


@dataclass(frozen=True)
class PodRecord:
    """A (mac, namespace, name) binding decoded from a record filename."""

    mac: str
    namespace: str
    name: str

    @property
    def filename(self) -> str:
        return encode_record_name(self.mac, self.namespace, self.name)

    @property
    def is_record(self) -> bool:
        return self != NOT_A_RECORD


NOT_A_RECORD = PodRecord(mac="", namespace="", name="")


def encode_record_name(mac: str, namespace: str, name: str) -> str:
    """Build the record filename for a pod.

    Without both a MAC and a namespace there is no record key, and the
    bare pod name is returned instead.
    """
    if mac and namespace:
        return RECORD_SEPARATOR.join((RECORD_PREFIX, mac, namespace, name))
    return name


def decode_record_name(filename: str) -> PodRecord:
    """Split a record filename into its parts.

    Never raises. Names that do not have exactly four segments decode to
    NOT_A_RECORD.
    """
    parts = filename.split(RECORD_SEPARATOR)
    if len(parts) != RECORD_SEGMENTS:
        return NOT_A_RECORD
    return PodRecord(mac=parts[1], namespace=parts[2], name=parts[3])


def validate_record_key(mac: str, namespace: str, name: str) -> None:
    """Reject key parts that would desynchronize the filename grammar.

    A record needs a MAC and a namespace; without them the encoded name
    is the bare pod name, which no lookup can find.
    """
    for label, value in (("mac", mac), ("namespace", namespace)):
        if not value:
            raise InvalidRecordKeyError(f"pod {label} is required to store a record")
    if not settings.reject_separator_in_keys:
        return
    for label, value in (("mac", mac), ("namespace", namespace), ("name", name)):
        if RECORD_SEPARATOR in value:
            raise InvalidRecordKeyError(
                f"pod {label} {value!r} contains {RECORD_SEPARATOR!r}, "
                f"which cannot be stored in a record filename"
            )
