"""
core/exceptions.py

Framework-level failure types.

Two failure kinds are surfaced to callers:
- ValueError: an argument or attribute value is invalid (empty strings,
  out-of-range numbers, missing required references).
- InvalidOperationError: the requested relationship change would break a
  structural invariant (duplicate membership, multiplicity floor, foreign
  ownership, missing qualified key, self-management).
"""


class InvalidOperationError(Exception):
    """Raised when an association change would violate a structural invariant."""


__all__ = ["InvalidOperationError"]
