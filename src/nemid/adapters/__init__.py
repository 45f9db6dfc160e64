# src/nemid/adapters/__init__.py
"""
Adapters Layer - External Collaborators

This package contains adapters for collaborators the identity layer
delegates to:
- Namespace (identifier derivation)
"""

__all__ = []
