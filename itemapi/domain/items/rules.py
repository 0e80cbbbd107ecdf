"""
Validation rule sets for the items bounded context.
"""

import re
from typing import Optional

from itemapi.domain.validation import Check, FieldRule

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
CATEGORY_MAX_LENGTH = 50

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

# Largest value a signed 64-bit SQL integer can bind
MAX_ID = 2**63 - 1
# Keeps the row offset (page - 1) * limit within MAX_ID
MAX_PAGE = MAX_ID // MAX_LIMIT

FILTERABLE_FIELDS = ("name", "category")

_ID_PATTERN = re.compile(r"^\d{1,%d}$" % len(str(MAX_ID)))

ITEM_RULES = (
    FieldRule("name", Check.REQUIRED),
    FieldRule("name", Check.STRING),
    FieldRule("name", Check.MAX_LENGTH, NAME_MAX_LENGTH),
    FieldRule("description", Check.STRING),
    FieldRule("description", Check.MAX_LENGTH, DESCRIPTION_MAX_LENGTH),
    FieldRule("category", Check.STRING),
    FieldRule("category", Check.MAX_LENGTH, CATEGORY_MAX_LENGTH),
)

PAGINATION_RULES = (
    FieldRule("page", Check.INTEGER),
    FieldRule("page", Check.MIN_VALUE, 1),
    FieldRule("page", Check.MAX_VALUE, MAX_PAGE),
    FieldRule("limit", Check.INTEGER),
    FieldRule("limit", Check.MIN_VALUE, 1),
    FieldRule("limit", Check.MAX_VALUE, MAX_LIMIT),
)


def parse_item_id(raw: object) -> Optional[int]:
    """Return the positive integer ID in ``raw``, or None if it is not one.

    IDs above MAX_ID cannot name a stored item and count as malformed.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if 0 < raw <= MAX_ID else None
    if isinstance(raw, str) and _ID_PATTERN.match(raw):
        value = int(raw)
        return value if 0 < value <= MAX_ID else None
    return None
