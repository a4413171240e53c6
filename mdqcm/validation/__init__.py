"""Validation and derivation of parsed questions."""

from mdqcm.validation.finalizer import finalize

__all__ = ["finalize"]
