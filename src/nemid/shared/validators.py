# src/nemid/shared/validators.py
"""
Input Validation Utilities - Mosaic Name and Network Name Checks

This module validates raw user-supplied names before any identifier
derivation is attempted, and checks configuration values that name a
network or a log level.

Files that USE this module:
- nemid.application.mosaic_ids (validate_mosaic_name before derivation)
- nemid.config.settings (validate_network_name, validate_log_level)

Files that this module USES:
- nemid.domain.errors (InvalidMosaicNameError)
- nemid.domain.network (network_type_from_string)
"""
from __future__ import annotations

from typing import Optional, Tuple

from nemid.domain.errors import InvalidMosaicNameError
from nemid.domain.network import NetworkType, network_type_from_string

MOSAIC_NAME_SEPARATOR = ":"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_mosaic_name(name: Optional[str]) -> Tuple[str, str]:
    """
    Validate a mosaic full name and split it into its two segments.

    The check is structural only: the name must be non-empty, must not
    contain " {" and must split on ':' into exactly two parts. Empty
    segments are accepted here.

    Args:
        name: Full mosaic name, e.g. "nem:xem"

    Returns:
        (namespace_name, mosaic_name) tuple

    Raises:
        InvalidMosaicNameError: If the name is structurally invalid
    """
    if not name:
        raise InvalidMosaicNameError("mosaic name must not be empty")

    if " {" in name:
        raise InvalidMosaicNameError(f"mosaic name contains an illegal sequence: {name!r}")

    parts = name.split(MOSAIC_NAME_SEPARATOR)
    if len(parts) != 2:
        raise InvalidMosaicNameError(
            f"mosaic name must have exactly two ':'-separated parts, got {len(parts)}: {name!r}"
        )

    return parts[0], parts[1]


def validate_network_name(name: str) -> bool:
    """
    Check that a network name maps to a supported network.

    Args:
        name: Network name such as "MIJIN_TEST" (case-insensitive)

    Returns:
        True if the name selects a supported network, False otherwise
    """
    return network_type_from_string(name) is not NetworkType.NOT_SUPPORTED_NET


def validate_log_level(level: str) -> bool:
    """Return True if ``level`` names a standard logging level."""
    if not level:
        return False
    return level.upper() in LOG_LEVELS
