# src/nemid/shared/strings.py
"""
Struct Strings - Field-by-field Dumps of Value Objects

Every value object in the domain renders itself as
``Name [Field1: value1, Field2: value2]`` so log lines and CLI output stay
stable and comparable.

Files that USE this module:
- nemid.domain.models (__str__ of every value object)

Files that this module USES:
- None (pure utility functions)
"""
from __future__ import annotations

from typing import Any, Iterable, Tuple


def struct_to_string(name: str, fields: Iterable[Tuple[str, Any]]) -> str:
    """
    Render a named structure and its fields in declaration order.

    Args:
        name: Structure name printed before the field list
        fields: (field name, value) pairs; values are rendered with str()

    Returns:
        Single-line dump, e.g. ``Mosaic [MosaicId: 1, Amount: 10]``
    """
    body = ", ".join(f"{field}: {value}" for field, value in fields)
    return f"{name} [{body}]"
