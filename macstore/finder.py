"""Record lookup over the store directory.

The directory listing is the only index: records are located by globbing
their filenames. Lookups are only meaningful while the directory lock is
held.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol

from macstore.naming import RECORD_PREFIX, RECORD_SEGMENTS, RECORD_SEPARATOR
from macstore.paths import escape_glob_part, match_names

logger = logging.getLogger(__name__)


class RecordFinder(Protocol):
    """Locates the single record file matching a partial key."""

    def find(self, mac: str, namespace: str, name: str) -> str:
        """Return the matching record filename, or "" if there is none."""
        ...


def record_pattern(mac: str, namespace: str, name: str) -> str | None:
    """Build the escaped filename pattern for a partial key.

    A MAC selects its record whoever owns it; otherwise namespace and name
    together select the pod's record. Returns None when neither is given.
    """
    sep = RECORD_SEPARATOR
    if mac:
        return f"{RECORD_PREFIX}{sep}{escape_glob_part(mac)}{sep}*"
    if namespace and name:
        return (
            f"{RECORD_PREFIX}{sep}*{sep}"
            f"{escape_glob_part(namespace)}{sep}{escape_glob_part(name)}"
        )
    return None


class GlobRecordFinder:
    """RecordFinder that globs the filenames in a directory."""

    def __init__(self, directory: str | os.PathLike):
        self.directory = os.fspath(directory)

    def find(self, mac: str, namespace: str, name: str) -> str:
        pattern = record_pattern(mac, namespace, name)
        if pattern is None:
            return ""

        matches = match_names(self.directory, pattern)
        if len(matches) != 1:
            if len(matches) > 1:
                logger.warning(
                    f"Ambiguous record match for {pattern} in {self.directory}: "
                    f"{', '.join(matches)}"
                )
            return ""

        filename = matches[0]
        # "*" can swallow separators, so recheck the segment count
        if filename.count(RECORD_SEPARATOR) != RECORD_SEGMENTS - 1:
            logger.debug(f"Ignoring malformed record name {filename}")
            return ""
        return filename
