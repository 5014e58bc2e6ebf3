"""
Soundshelf Pagination
Page slicing and pagination metadata
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata for a list response"""
    page: int
    limit: int
    total: int
    total_pages: int


def paginate(items: Sequence[T], page: int, limit: int) -> Tuple[T, ...]:
    """
    Slice one page out of an ordered sequence.

    Returns items[(page-1)*limit : (page-1)*limit + limit]. Non-positive values
    are not rejected and follow plain slice semantics.
    """
    offset = (page - 1) * limit
    return tuple(items[offset:offset + limit])


def total_pages(total: int, limit: int) -> int:
    """ceil(total / limit); 0 when limit is not positive"""
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def page_info(total: int, page: int, limit: int) -> PageInfo:
    """Build metadata; total must be the filtered, unpaginated count"""
    return PageInfo(page=page, limit=limit, total=total, total_pages=total_pages(total, limit))


def parse_int_text(value: Optional[str]) -> Optional[int]:
    """
    Strict integer parsing for request text.

    Only an optional sign followed by ASCII digits is accepted, so forms int()
    would otherwise take ("1_0", "١٢") do not resolve to a number.
    """
    if value is None:
        return None
    text = value.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


def parse_int_param(value: Optional[str], default: int) -> int:
    """
    Permissive integer query parameter parsing.

    Missing or non-numeric values fall back to the default; signs pass through.
    """
    parsed = parse_int_text(value)
    return default if parsed is None else parsed
