# src/nemid/adapters/namespace/sha3.py
"""
SHA3 Id Generator - Default Namespace and Mosaic Id Derivation

Derives 64-bit identifiers from names with SHA3-256. Each namespace level
is hashed together with its parent's id, and a mosaic id is derived from
the mosaic name and the id of its deepest namespace level:

    id(name, parent) = LE64(SHA3-256(LE64(parent) || UTF-8(name))[0:8])

The root parent id is 0. No name grammar is enforced, so derivation is
total for any pair of strings.

Files that USE this module:
- nemid.application.mosaic_ids (default generator of the default codec)
- tests.test_sha3_generator (unit tests)

Files that this module USES:
- nemid.adapters.namespace.base (IdGenerator interface)
"""
from __future__ import annotations

import hashlib  # SHA3-256 digest
import logging
from typing import List

from nemid.adapters.namespace.base import IdGenerator

logger = logging.getLogger(__name__)

NAMESPACE_SEPARATOR = "."
ROOT_PARENT_ID = 0
UINT64_MASK = 0xFFFFFFFFFFFFFFFF


class Sha3IdGenerator(IdGenerator):
    """Stateless SHA3-256 based IdGenerator."""

    @staticmethod
    def generate_id(name: str, parent_id: int) -> int:
        """
        Derive the id of ``name`` below ``parent_id``.

        Args:
            name: Single name level (no separators are interpreted)
            parent_id: Id of the parent level, 0 for a root level

        Returns:
            Unsigned 64-bit id
        """
        digest = hashlib.sha3_256()
        digest.update((parent_id & UINT64_MASK).to_bytes(8, "little"))
        digest.update(name.encode("utf-8"))
        return int.from_bytes(digest.digest()[:8], "little")

    def generate_namespace_path(self, namespace_name: str) -> List[int]:
        path: List[int] = []
        parent_id = ROOT_PARENT_ID
        for part in namespace_name.split(NAMESPACE_SEPARATOR):
            parent_id = self.generate_id(part, parent_id)
            path.append(parent_id)
        return path

    def generate_mosaic_id(self, namespace_name: str, mosaic_name: str) -> int:
        namespace_id = self.generate_namespace_id(namespace_name)
        mosaic_id = self.generate_id(mosaic_name, namespace_id)
        logger.debug("Derived mosaic id %016X for %s:%s", mosaic_id, namespace_name, mosaic_name)
        return mosaic_id
