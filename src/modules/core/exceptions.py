"""Shared domain exception bases.

Module-specific exceptions (``CategoryNotFound``, ``InvalidProduct`` ...)
extend these so the API layer can map whole families to one status code.
"""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Caller-supplied data violates a validation or uniqueness rule."""


class IllegalState(RuntimeError):
    """The store is missing data the service requires to operate.

    Raised when a sentinel category is absent.  This is an operational
    fault, not a caller error, so views let it surface as HTTP 500.
    """
