# src/nemid/domain/network.py
"""
Network Types - Network Discriminator Extraction

A protocol version field is a 64-bit value whose second-lowest-order byte
selects the network a message or account belongs to. This module names the
known networks and maps raw bytes and network names to them.

Files that USE this module:
- nemid.shared.validators (validate_network_name)
- nemid.config.settings (default network from configuration)
- nemid.app (network, network-name and version commands)
- tests.test_network (unit tests)

Files that this module USES:
- None (pure domain layer)
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Dict, Optional

logger = logging.getLogger(__name__)

UINT64_MASK = 0xFFFFFFFFFFFFFFFF


class NetworkType(IntEnum):
    """Network discriminator byte values."""
    MAIN_NET = 104
    TEST_NET = 152
    MIJIN = 96
    MIJIN_TEST = 144
    NOT_SUPPORTED_NET = 0

    def __str__(self) -> str:
        return str(int(self))


# Byte 0 is absent from the table on purpose: it falls through to
# NOT_SUPPORTED_NET together with every unmapped byte.
_NETWORK_BY_BYTE: Dict[int, NetworkType] = {
    104: NetworkType.MAIN_NET,
    152: NetworkType.TEST_NET,
    96: NetworkType.MIJIN,
    144: NetworkType.MIJIN_TEST,
}

_NETWORK_BY_NAME: Dict[str, NetworkType] = {
    "MIJIN": NetworkType.MIJIN,
    "MIJIN_TEST": NetworkType.MIJIN_TEST,
    "TEST_NET": NetworkType.TEST_NET,
    "MAIN_NET": NetworkType.MAIN_NET,
}


def network_type_from_byte(value: int) -> NetworkType:
    """
    Map a raw discriminator byte to its network.

    Args:
        value: Discriminator byte (0-255)

    Returns:
        Matching NetworkType, or NOT_SUPPORTED_NET for any unmapped value
    """
    network = _NETWORK_BY_BYTE.get(value)
    if network is None:
        logger.debug("Unmapped network byte %d, using NOT_SUPPORTED_NET", value)
        return NetworkType.NOT_SUPPORTED_NET
    return network


def extract_network_type(version: int) -> NetworkType:
    """
    Extract the network type from a packed version value.

    The version is read as 8 little-endian bytes; byte index 1 is the
    network discriminator. Values outside the unsigned 64-bit range are
    reduced to their low 64 bits first.

    Args:
        version: Packed version field as received from the wire

    Returns:
        NetworkType selected by byte index 1
    """
    raw = (version & UINT64_MASK).to_bytes(8, "little")
    return network_type_from_byte(raw[1])


def network_type_from_string(name: Optional[str]) -> NetworkType:
    """
    Resolve a network name such as "MIJIN_TEST" (case-insensitive).

    Returns NOT_SUPPORTED_NET for any other string, including None.
    """
    if not name:
        return NetworkType.NOT_SUPPORTED_NET
    return _NETWORK_BY_NAME.get(name.upper(), NetworkType.NOT_SUPPORTED_NET)


def version_for_network(network_type: NetworkType, tx_version: int) -> int:
    """
    Pack a network type and a transaction version into a version field.

    Args:
        network_type: Network the transaction targets
        tx_version: Transaction schema version (0-255)

    Returns:
        Version value whose byte index 1 is the network byte

    Raises:
        ValueError: If tx_version does not fit in one byte
    """
    if not 0 <= tx_version <= 0xFF:
        raise ValueError(f"tx_version must be between 0 and 255, got {tx_version}")
    return (int(network_type) << 8) + tx_version
