"""Pod MAC reservation logic.

A pod keeps the MAC recorded for its (namespace, name) across container
restarts. When a record exists for a MAC under some other identity, the
claiming pod takes it over by renaming the record rather than adding a
second one, so each MAC and each pod has at most one record.

Callers must hold the directory lock around every method here.
"""

from __future__ import annotations

import logging
import os

from macstore.config import settings
from macstore.finder import GlobRecordFinder, RecordFinder
from macstore.mac import parse_mac
from macstore.naming import decode_record_name, encode_record_name, validate_record_key
from macstore.paths import record_path

logger = logging.getLogger(__name__)


class ReservationEngine:
    """Reads and writes pod records in one network directory."""

    def __init__(
        self,
        directory: str | os.PathLike,
        finder: RecordFinder | None = None,
        record_mode: int | None = None,
    ):
        self.directory = os.fspath(directory)
        self.finder = finder if finder is not None else GlobRecordFinder(self.directory)
        self.record_mode = settings.record_mode if record_mode is None else record_mode

    def has_reserved_mac(self, namespace: str, name: str) -> str | None:
        """Return the MAC already reserved for a pod, or None.

        Raises InvalidMacError if the stored address cannot be parsed.
        """
        if not name:
            return None

        filename = self.finder.find("", namespace, name)
        if not filename:
            return None

        record = decode_record_name(filename)
        if record.namespace != namespace or record.name != name:
            return None

        mac = parse_mac(record.mac)
        logger.debug(f"Found reserved MAC {mac} for pod {namespace}/{name}")
        return mac

    def reserve_pod_info(
        self,
        mac: str,
        namespace: str,
        name: str,
        mac_already_exists: bool,
    ) -> bool:
        """Record that a pod owns a MAC.

        Does nothing when the caller already knows the MAC or the pod has
        no name. Otherwise renames an existing record for the MAC to the
        pod's identity, or creates a new empty record.

        Filesystem errors propagate and are not retried.
        """
        if mac_already_exists or not name:
            return True

        validate_record_key(mac, namespace, name)
        target = record_path(self.directory, encode_record_name(mac, namespace, name))

        existing = self.finder.find(mac, "", "")
        if existing:
            os.rename(record_path(self.directory, existing), target)
            logger.info(f"Reattached MAC {mac} from {existing} to pod {namespace}/{name}")
            return True

        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.record_mode)
        os.close(fd)
        logger.info(f"Reserved MAC {mac} for pod {namespace}/{name}")
        return True
