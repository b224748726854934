"""Hardware address parsing.

Accepts the IEEE 802 MAC-48, EUI-48, EUI-64 and 20-octet IP over
InfiniBand forms, written with colons, hyphens or dotted quads:

    00:00:5e:00:53:01
    00-00-5e-00-53-01
    0000.5e00.5301
    02:00:5e:10:00:00:00:01

and renders them back as lower-case, colon-separated octets.
"""

from __future__ import annotations

import re

from macstore.errors import InvalidMacError

# Valid address lengths in octets: EUI-48, EUI-64, IPoIB
_VALID_OCTET_COUNTS = (6, 8, 20)

_SEPARATED_RE = re.compile(r"^[0-9a-fA-F]{2}(?:([:-])[0-9a-fA-F]{2})+$")
_DOTTED_RE = re.compile(r"^[0-9a-fA-F]{4}(?:\.[0-9a-fA-F]{4})+$")


def parse_mac_octets(value: str) -> bytes:
    """Parse a textual hardware address into its raw octets.

    Raises InvalidMacError if the text is not a supported address form.
    """
    text = (value or "").strip()
    octets: bytes | None = None

    match = _SEPARATED_RE.match(text)
    if match:
        sep = match.group(1)
        parts = text.split(sep)
        # Mixed separators ("aa:bb-cc...") split into 4+ char groups
        if all(len(p) == 2 for p in parts):
            octets = bytes(int(p, 16) for p in parts)
    elif _DOTTED_RE.match(text):
        octets = bytes.fromhex(text.replace(".", ""))

    if octets is None or len(octets) not in _VALID_OCTET_COUNTS:
        raise InvalidMacError(f"invalid MAC address: {value!r}")
    return octets


def format_mac(octets: bytes) -> str:
    """Render raw octets as lower-case colon-separated hex."""
    return ":".join(f"{b:02x}" for b in octets)


def parse_mac(value: str) -> str:
    """Parse a hardware address and return its canonical text form."""
    return format_mac(parse_mac_octets(value))
