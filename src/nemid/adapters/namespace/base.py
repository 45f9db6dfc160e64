# src/nemid/adapters/namespace/base.py
"""
Base Id Generator Interface for Namespace and Mosaic Identifiers

This module defines the abstract base class for identifier derivation.
Implementations must be pure: the same names always yield the same id, no
state is kept between calls, and calls are safe from any thread.

Files that USE this module:
- nemid.adapters.namespace.sha3 (Sha3IdGenerator implements IdGenerator)
- nemid.application.mosaic_ids (MosaicIdCodec depends on IdGenerator)
- tests.test_mosaic_ids (stub generators)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod
from typing import List


class IdGenerator(ABC):
    @abstractmethod
    def generate_namespace_path(self, namespace_name: str) -> List[int]:
        """Return the ids of every level of a dotted namespace name, root first."""
        raise NotImplementedError

    @abstractmethod
    def generate_mosaic_id(self, namespace_name: str, mosaic_name: str) -> int:
        """Return the 64-bit id of ``mosaic_name`` under ``namespace_name``."""
        raise NotImplementedError

    def generate_namespace_id(self, namespace_name: str) -> int:
        """Return the id of the deepest level of ``namespace_name``."""
        return self.generate_namespace_path(namespace_name)[-1]
