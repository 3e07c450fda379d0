from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import List, Union

MAC_LENGTH = 6
MAC_REPETITIONS = 16
SYNC_STREAM = b"\xff" * MAC_LENGTH
MAGIC_PACKET_LENGTH = len(SYNC_STREAM) + MAC_LENGTH * MAC_REPETITIONS

_DELIMITER_RE = re.compile(r"[:.-]")

_HEX_DIGITS = frozenset(string.hexdigits)


class MacAddressError(ValueError):
    pass


class MalformedAddress(MacAddressError):
    def __init__(self, address: str, groups: int) -> None:
        super().__init__(f"Malformed MAC address {address!r}: expected {MAC_LENGTH} groups, got {groups}")
        self.address = address
        self.groups = groups


class InvalidOctet(MacAddressError):
    def __init__(self, address: str, index: int, group: str) -> None:
        super().__init__(f"Invalid octet {group!r} at group {index} of MAC address {address!r}")
        self.address = address
        self.index = index
        self.group = group


@dataclass(frozen=True)
class MacAddress:
    octets: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.octets, (bytes, bytearray)):
            raise TypeError(f"MacAddress octets must be bytes, not {type(self.octets).__name__}")
        # copy so a caller's bytearray cannot change the address afterwards
        object.__setattr__(self, "octets", bytes(self.octets))
        if len(self.octets) != MAC_LENGTH:
            raise MalformedAddress(self.octets.hex(":"), len(self.octets))

    def __bytes__(self) -> bytes:
        return self.octets

    def __str__(self) -> str:
        return self.octets.hex(":")


def _split_groups(mac: str) -> List[str]:
    if _DELIMITER_RE.search(mac):
        return _DELIMITER_RE.split(mac)
    if len(mac) == MAC_LENGTH * 2:
        return [mac[i:i + 2] for i in range(0, len(mac), 2)]
    return [mac] if mac else []


def parse_mac(mac: str) -> MacAddress:
    """Parse a MAC address written as six hex pairs.

    Pairs may be separated by ``:``, ``-`` or ``.`` (freely mixed),
    or written back to back as twelve hex digits. Case is ignored.

    Raises MalformedAddress when the address does not have six groups and
    InvalidOctet when a group is not exactly two hex digits.
    """
    groups = _split_groups(mac)
    if len(groups) != MAC_LENGTH:
        raise MalformedAddress(mac, len(groups))

    octets = bytearray()
    for index, group in enumerate(groups):
        # int(..., 16) alone would let through signs, whitespace and underscores
        if len(group) != 2 or not _HEX_DIGITS.issuperset(group):
            raise InvalidOctet(mac, index, group)
        octets.append(int(group, 16))
    return MacAddress(bytes(octets))


def create_magic_packet(mac: Union[str, MacAddress]) -> bytes:
    """Build the 102-byte Wake-on-LAN payload for ``mac``.

    The payload is six 0xFF bytes followed by the MAC repeated sixteen times.
    """
    address = mac if isinstance(mac, MacAddress) else parse_mac(mac)
    return SYNC_STREAM + bytes(address) * MAC_REPETITIONS
