# src/nemid/domain/__init__.py
"""
Domain Layer - Identity Value Objects

This package contains the mosaic identity models, the network discriminator
and the domain errors. No dependencies on infrastructure or external systems.
"""

from nemid.domain.errors import (
    DomainError,
    InvalidMosaicNameError,
    NilMosaicAmountError,
    NilMosaicIdError,
    NilNamespaceIdError,
)
from nemid.domain.models import (
    Mosaic,
    MosaicId,
    MosaicInfo,
    MosaicName,
    MosaicProperties,
    MosaicSupplyType,
    NamespaceId,
)
from nemid.domain.network import (
    NetworkType,
    extract_network_type,
    network_type_from_byte,
    network_type_from_string,
    version_for_network,
)

__all__ = [
    "Mosaic",
    "MosaicId",
    "MosaicInfo",
    "MosaicName",
    "MosaicProperties",
    "MosaicSupplyType",
    "NamespaceId",
    "NetworkType",
    "extract_network_type",
    "network_type_from_byte",
    "network_type_from_string",
    "version_for_network",
    "DomainError",
    "InvalidMosaicNameError",
    "NilMosaicAmountError",
    "NilMosaicIdError",
    "NilNamespaceIdError",
]
