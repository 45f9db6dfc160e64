# src/nemid/domain/models.py
"""
Domain Models - Mosaic Identity Value Objects

This module contains the immutable value objects of the identity layer:
- Mosaic and namespace identifiers (64-bit unsigned quantities)
- Mosaics (an identifier paired with a non-zero amount)
- Mosaic properties and descriptors
- Supply change direction

Every constructor validates its inputs and raises a DomainError subclass on
failure; a constructed object is never partially valid.

Files that USE this module:
- nemid.application.mosaic_ids (wraps derived ids, builds XEM mosaics)
- nemid.app (prints ids and mosaics)
- tests.* (tests use domain models directly)

Files that this module USES:
- nemid.domain.errors (NilMosaicIdError, NilNamespaceIdError, NilMosaicAmountError)
- nemid.shared.strings (struct_to_string for __str__)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import IntEnum  # Integer-valued enumerations
from typing import Any, Optional  # Type hints for opaque and optional values

from nemid.domain.errors import NilMosaicAmountError, NilMosaicIdError, NilNamespaceIdError
from nemid.shared.strings import struct_to_string

UINT64_MASK = 0xFFFFFFFFFFFFFFFF
HEX_WIDTH = 16


def _check_uint64(kind: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} must be an int, got {type(value).__name__}")
    if not 0 <= value <= UINT64_MASK:
        raise ValueError(f"{kind} must be an unsigned 64-bit value, got {value}")


def _to_hex(value: int) -> str:
    return format(value, f"0{HEX_WIDTH}X")


def _parse_hex(text: str) -> int:
    digits = text[2:] if text[:2].lower() == "0x" else text
    if not digits or len(digits) > HEX_WIDTH:
        raise ValueError(f"expected up to {HEX_WIDTH} hex digits, got {text!r}")
    return int(digits, 16)


@dataclass(frozen=True)
class MosaicId:
    """
    Canonical 64-bit unsigned identifier of a mosaic.

    Attributes:
        value: Underlying integer value
    """
    value: int

    def __post_init__(self) -> None:
        if self.value is None:
            raise NilMosaicIdError("mosaic id must not be None")
        _check_uint64("mosaic id", self.value)

    @classmethod
    def from_hex(cls, text: str) -> "MosaicId":
        """Parse the canonical hex form produced by to_hex (optional 0x prefix)."""
        return cls(_parse_hex(text))

    def to_hex(self) -> str:
        """Return the 16-digit, zero-padded, uppercase hex form."""
        return _to_hex(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class NamespaceId:
    """
    Identifier of the namespace a mosaic lives under.

    Attributes:
        value: Underlying integer value
    """
    value: int

    def __post_init__(self) -> None:
        if self.value is None:
            raise NilNamespaceIdError("namespace id must not be None")
        _check_uint64("namespace id", self.value)

    @classmethod
    def from_hex(cls, text: str) -> "NamespaceId":
        return cls(_parse_hex(text))

    def to_hex(self) -> str:
        return _to_hex(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Mosaic:
    """
    A quantity of a specific mosaic.

    Attributes:
        mosaic_id: Identifier of the mosaic
        amount: Amount in the mosaic's smallest unit; zero is rejected
    """
    mosaic_id: MosaicId
    amount: int

    def __post_init__(self) -> None:
        if self.mosaic_id is None:
            raise NilMosaicIdError("mosaic id must not be None")
        if not isinstance(self.mosaic_id, MosaicId):
            raise TypeError(f"mosaic_id must be a MosaicId, got {type(self.mosaic_id).__name__}")
        # Negative amounts are not rejected here
        if self.amount is None or self.amount == 0:
            raise NilMosaicAmountError("mosaic amount must be present and non-zero")

    def __str__(self) -> str:
        return struct_to_string(
            "Mosaic",
            [
                ("MosaicId", self.mosaic_id),
                ("Amount", self.amount),
            ],
        )


@dataclass(frozen=True)
class MosaicProperties:
    """
    Governance flags of a mosaic.

    Range checks on divisibility and duration belong to the transaction
    builders that consume these properties.

    Attributes:
        supply_mutable: Whether the supply can change after creation
        transferable: Whether holders may transfer the mosaic
        levy_mutable: Whether the levy can change after creation
        divisibility: Number of decimal places of the smallest unit
        duration: Lifetime in blocks as defined by the protocol (0 = unlimited)
    """
    supply_mutable: bool
    transferable: bool
    levy_mutable: bool
    divisibility: int
    duration: int

    def __str__(self) -> str:
        return struct_to_string(
            "MosaicProperties",
            [
                ("SupplyMutable", self.supply_mutable),
                ("Transferable", self.transferable),
                ("LevyMutable", self.levy_mutable),
                ("Divisibility", self.divisibility),
                ("Duration", self.duration),
            ],
        )


@dataclass(frozen=True)
class MosaicInfo:
    """
    Metadata snapshot of a mosaic as known by the network.

    ``namespace`` and ``owner`` are references owned by other subsystems
    and are only stored and printed.
    """
    mosaic_id: MosaicId
    full_name: str
    active: bool
    index: int
    meta_id: str
    namespace: Any
    supply: int
    height: int
    owner: Any
    properties: Optional[MosaicProperties]

    @property
    def short_name(self) -> str:
        """Mosaic part of "namespace:mosaic", or "" when full_name is malformed."""
        parts = self.full_name.split(":")
        if len(parts) != 2:
            return ""
        return parts[1]

    def __str__(self) -> str:
        return struct_to_string(
            "MosaicInfo",
            [
                ("MosaicId", self.mosaic_id),
                ("FullName", self.full_name),
                ("Active", self.active),
                ("Index", self.index),
                ("MetaId", self.meta_id),
                ("Namespace", self.namespace),
                ("Supply", self.supply),
                ("Height", self.height),
                ("Owner", self.owner),
                ("Properties", self.properties),
            ],
        )


@dataclass(frozen=True)
class MosaicName:
    """Binds a mosaic id to its name and parent namespace."""
    mosaic_id: MosaicId
    name: str
    parent_id: NamespaceId

    def __str__(self) -> str:
        return struct_to_string(
            "MosaicName",
            [
                ("MosaicId", self.mosaic_id),
                ("Name", self.name),
                ("ParentId", self.parent_id),
            ],
        )


class MosaicSupplyType(IntEnum):
    """Direction of a mosaic supply change."""
    DECREASE = 0
    INCREASE = 1

    def __str__(self) -> str:
        return str(int(self))
