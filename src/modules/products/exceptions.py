"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import InvalidArgument


class ProductNotFound(Exception):
    """The requested product does not exist or has been soft-deleted."""


class InvalidProduct(InvalidArgument):
    """A required product field is missing."""
