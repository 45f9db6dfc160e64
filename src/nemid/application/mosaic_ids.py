# src/nemid/application/mosaic_ids.py
"""
Mosaic Id Service - Name to Identifier Derivation

This module turns human-readable "namespace:mosaic" names into canonical
mosaic identifiers. Names are validated first; the hash itself is delegated
to an injected IdGenerator so tests and other subsystems can substitute
their own derivation.

Files that USE this module:
- nemid.app (mosaic-id and xem commands)
- tests.test_mosaic_ids (unit tests)

Files that this module USES:
- nemid.shared.validators (validate_mosaic_name)
- nemid.domain.models (MosaicId, NamespaceId, Mosaic)
- nemid.adapters.namespace (IdGenerator, Sha3IdGenerator)
"""

from __future__ import annotations

import logging
from typing import Optional

from nemid.adapters.namespace.base import IdGenerator
from nemid.adapters.namespace.sha3 import Sha3IdGenerator
from nemid.domain.models import Mosaic, MosaicId, NamespaceId
from nemid.shared.validators import validate_mosaic_name

logger = logging.getLogger(__name__)

XEM_FULL_NAME = "nem:xem"
XEM_DIVISIBILITY = 6


class MosaicIdCodec:
    """Validates names and derives ids through an IdGenerator."""

    def __init__(self, generator: IdGenerator):
        self.generator = generator

    def from_full_name(self, name: str) -> MosaicId:
        """
        Derive the mosaic id of a full name such as "nem:xem".

        Args:
            name: Full mosaic name, "namespace:mosaic"

        Returns:
            MosaicId produced by the generator

        Raises:
            InvalidMosaicNameError: If the name is structurally invalid
        """
        namespace_name, mosaic_name = validate_mosaic_name(name)
        mosaic_id = MosaicId(self.generator.generate_mosaic_id(namespace_name, mosaic_name))
        logger.debug("Mosaic %s -> %s", name, mosaic_id.to_hex())
        return mosaic_id

    def namespace_id_from_name(self, name: str) -> NamespaceId:
        """Derive the id of the deepest level of a dotted namespace name."""
        return NamespaceId(self.generator.generate_namespace_id(name))


default_codec = MosaicIdCodec(Sha3IdGenerator())


def mosaic_id_from_full_name(name: str, generator: Optional[IdGenerator] = None) -> MosaicId:
    """
    Derive a mosaic id from its full name.

    Uses the default SHA3 codec unless a generator is supplied.
    """
    codec = default_codec if generator is None else MosaicIdCodec(generator)
    return codec.from_full_name(name)


XEM_MOSAIC_ID = default_codec.from_full_name(XEM_FULL_NAME)


def xem(amount: int) -> Mosaic:
    """Return a XEM mosaic of ``amount`` micro-units."""
    return Mosaic(XEM_MOSAIC_ID, amount)


def xem_relative(amount: int) -> Mosaic:
    """Return a XEM mosaic of ``amount`` whole XEM."""
    return xem(amount * 10 ** XEM_DIVISIBILITY)
