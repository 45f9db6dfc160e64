# src/nemid/__init__.py
"""
nemid - Mosaic Identity and Network Classification

Value objects and helpers for naming and identifying mosaics on a
NEM-style blockchain, and for reading the network discriminator out of a
packed protocol version field.
"""

from nemid.domain import (
    DomainError,
    InvalidMosaicNameError,
    Mosaic,
    MosaicId,
    MosaicInfo,
    MosaicName,
    MosaicProperties,
    MosaicSupplyType,
    NamespaceId,
    NetworkType,
    NilMosaicAmountError,
    NilMosaicIdError,
    NilNamespaceIdError,
    extract_network_type,
    network_type_from_string,
    version_for_network,
)
from nemid.application import MosaicIdCodec, mosaic_id_from_full_name, xem, xem_relative

__version__ = "0.1.0"

__all__ = [
    "Mosaic",
    "MosaicId",
    "MosaicIdCodec",
    "MosaicInfo",
    "MosaicName",
    "MosaicProperties",
    "MosaicSupplyType",
    "NamespaceId",
    "NetworkType",
    "extract_network_type",
    "network_type_from_string",
    "version_for_network",
    "mosaic_id_from_full_name",
    "xem",
    "xem_relative",
    "DomainError",
    "InvalidMosaicNameError",
    "NilMosaicAmountError",
    "NilMosaicIdError",
    "NilNamespaceIdError",
]
