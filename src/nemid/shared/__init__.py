# src/nemid/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Struct string rendering
- Logging configuration
"""

from nemid.shared.strings import struct_to_string
from nemid.shared.validators import (
    validate_log_level,
    validate_mosaic_name,
    validate_network_name,
)

__all__ = [
    "struct_to_string",
    "validate_mosaic_name",
    "validate_network_name",
    "validate_log_level",
]
