from .magic import (
    MAC_LENGTH,
    MAC_REPETITIONS,
    MAGIC_PACKET_LENGTH,
    SYNC_STREAM,
    InvalidOctet,
    MacAddress,
    MacAddressError,
    MalformedAddress,
    create_magic_packet,
    parse_mac,
)

__all__ = [
    "MAC_LENGTH",
    "MAC_REPETITIONS",
    "MAGIC_PACKET_LENGTH",
    "SYNC_STREAM",
    "InvalidOctet",
    "MacAddress",
    "MacAddressError",
    "MalformedAddress",
    "create_magic_packet",
    "parse_mac",
]
