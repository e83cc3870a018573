"""Category domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import InvalidArgument


class CategoryNotFound(Exception):
    """The requested category does not exist or is a reserved sentinel."""


class InvalidCategory(InvalidArgument):
    """Required category data (id or title) is missing or blank."""


class CategoryAlreadyExists(InvalidArgument):
    """Another category already uses the same title (case-insensitive)."""


class ReservedCategory(InvalidArgument):
    """Attempt to remove the ``Deleted`` or ``No Category`` sentinel."""
