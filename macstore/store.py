"""Disk-backed store mapping pods to their reserved MAC addresses.

One directory per network holds one empty file per reservation, named
mac_<mac>_<namespace>_<name>. All access to a directory is serialized by
a single cross-process lock, so concurrent plugin invocations against the
same network see a consistent view.

Usage:
    store = MacStore.new("mynet")
    found, mac = store.get_container_mac("default", "web-0")
    if not found:
        mac = allocate_mac()
        store.save_container_mac(mac, "default", "web-0", mac_already_exists=False)
"""

from __future__ import annotations

import logging
import os

from macstore.config import settings
from macstore.finder import RecordFinder
from macstore.lock import DirectoryLock
from macstore.paths import ensure_directory
from macstore.reservation import ReservationEngine

logger = logging.getLogger(__name__)


class MacStore:
    """Pod MAC reservations for one network.

    Filesystem failures (directory creation, locking, create, rename,
    listing) are raised as OSError. A missing reservation is not an error.
    """

    def __init__(
        self,
        network: str,
        data_dir: str | os.PathLike = "",
        *,
        lock: DirectoryLock | None = None,
        finder: RecordFinder | None = None,
    ):
        root = os.fspath(data_dir) if data_dir else ""
        # Path("") renders as "."
        if root in ("", "."):
            root = settings.data_dir
        self._directory = ensure_directory(os.path.join(root, network), settings.dir_mode)
        self._lock = lock if lock is not None else DirectoryLock(self._directory)
        self._engine = ReservationEngine(self._directory, finder=finder)
        logger.debug(f"Opened MAC store at {self._directory}")

    @classmethod
    def new(cls, network: str, data_dir: str | os.PathLike = "") -> MacStore:
        return cls(network, data_dir)

    @property
    def directory(self) -> str:
        return os.fspath(self._directory)

    def get_container_mac(self, namespace: str, name: str) -> tuple[bool, str]:
        """Look up the MAC reserved for a pod.

        Returns (False, "") when the pod has no reservation yet, which is
        the normal case on a pod's first request.
        """
        with self._lock.held():
            mac = self._engine.has_reserved_mac(namespace, name)
        if mac is None:
            return False, ""
        return True, mac

    def save_container_mac(
        self,
        mac: str,
        namespace: str,
        name: str,
        mac_already_exists: bool,
    ) -> None:
        """Reserve a MAC for a pod.

        A no-op when mac_already_exists is set or name is empty.
        """
        with self._lock.held():
            self._engine.reserve_pod_info(mac, namespace, name, mac_already_exists)

    def claim_container_mac(self, mac: str, namespace: str, name: str) -> str:
        """Return the pod's reserved MAC, reserving mac if it has none.

        Lookup and reservation happen under one lock hold, so concurrent
        claims for the same pod agree on a single MAC.
        """
        with self._lock.held():
            reserved = self._engine.has_reserved_mac(namespace, name)
            if reserved is not None:
                return reserved
            self._engine.reserve_pod_info(mac, namespace, name, False)
        return mac
