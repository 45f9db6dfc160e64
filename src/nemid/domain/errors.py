# src/nemid/domain/errors.py
"""
Domain Errors - Identity and Validation Exceptions

This module defines domain-specific exceptions raised when a mosaic name,
identifier or amount violates the rules of the identity layer. All of them
are caller input errors: none is transient and none should be retried.

Files that USE this module:
- nemid.domain.models (value object constructors raise these)
- nemid.shared.validators (mosaic name validation)
- nemid.application.mosaic_ids (name to id derivation)
- nemid.app (CLI reports DomainError to the user)

Files that this module USES:
- None (pure domain layer)
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidMosaicNameError(DomainError):
    """Raised when a mosaic full name fails structural checks (e.g. no ':' separator)."""
    pass


class NilMosaicIdError(DomainError):
    """Raised when a required mosaic id is absent."""
    pass


class NilNamespaceIdError(DomainError):
    """Raised when a required namespace id is absent."""
    pass


class NilMosaicAmountError(DomainError):
    """Raised when a mosaic amount is absent or zero."""
    pass
