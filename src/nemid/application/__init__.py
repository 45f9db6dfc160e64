# src/nemid/application/__init__.py
"""
Application Layer - Identity Services

This package wires domain validation to identifier derivation.
"""

from nemid.application.mosaic_ids import (
    XEM_DIVISIBILITY,
    XEM_MOSAIC_ID,
    MosaicIdCodec,
    default_codec,
    mosaic_id_from_full_name,
    xem,
    xem_relative,
)

__all__ = [
    "MosaicIdCodec",
    "default_codec",
    "mosaic_id_from_full_name",
    "xem",
    "xem_relative",
    "XEM_MOSAIC_ID",
    "XEM_DIVISIBILITY",
]
