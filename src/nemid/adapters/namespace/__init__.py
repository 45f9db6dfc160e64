# src/nemid/adapters/namespace/__init__.py
"""
Namespace Adapters - Identifier Derivation

This package contains the id generators that map namespace and mosaic
names to 64-bit identifiers. All generators implement the IdGenerator
interface.
"""

from nemid.adapters.namespace.base import IdGenerator
from nemid.adapters.namespace.sha3 import Sha3IdGenerator

__all__ = [
    "IdGenerator",
    "Sha3IdGenerator",
]
