"""Sentinel category titles.

Both rows are seed data (see ``manage.py seed_catalog``); services look
them up but never create them.
"""

from __future__ import annotations

DELETED_CATEGORY_TITLE = "Deleted"
NO_CATEGORY_TITLE = "No Category"

# Compared against ``title.strip().lower()``.
RESERVED_CATEGORY_TITLES = frozenset(
    {DELETED_CATEGORY_TITLE.lower(), NO_CATEGORY_TITLE.lower()}
)


def is_reserved_title(title: str) -> bool:
    return title.strip().lower() in RESERVED_CATEGORY_TITLES
