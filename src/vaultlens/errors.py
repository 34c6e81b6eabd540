"""Exception hierarchy for vaultlens."""

from __future__ import annotations


class VaultlensError(Exception):
    """Base exception for all vaultlens errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(VaultlensError):
    """Configuration validation or resolution failed."""


class InputError(VaultlensError, ValueError):
    """A helper received an argument it cannot work with."""


class BatchShapeError(VaultlensError):
    """A batched call response does not have the expected shape.

    This points at an ABI or configuration mismatch upstream, so it is
    raised instead of being folded into per-call ``errors``.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        reference: str | None = None,
        method_name: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.reference = reference
        self.method_name = method_name
