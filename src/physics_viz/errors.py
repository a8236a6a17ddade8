# MIT License (see LICENSE)
"""
Error taxonomy for the numeric core.

- DomainError: an input breaks a hard mathematical precondition
  (|beta| >= 1, barrier width <= 0, mass <= 0, zero total inverse mass).
  Always raised to the caller so the UI can reject the configuration.
- DegenerateInputWarning: the input is valid but numerically unstable
  (sample point on top of a charge, zero approach velocity). The function
  emits the warning, falls back to a safe default and keeps going.

Logically inert input (zero charge, zero-amplitude source) is neither: it
simply contributes nothing.
"""
from __future__ import annotations


class DomainError(ValueError):
    """Input violates a hard precondition of the formula being evaluated."""


class DegenerateInputWarning(RuntimeWarning):
    """Input is valid but unstable; a safe default was substituted."""
