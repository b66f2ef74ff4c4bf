"""Request Parameters: path id decoding and offset/limit paging.

Invariants:
    - A path id must be ASCII digits with an optional leading minus, else
      InvalidRequestError naming the entity
    - start < 0 or missing -> offset 0
    - count < 1 or missing -> default_page_size; count > max_page_size -> max_page_size
"""

import re
from dataclasses import dataclass

from fastapi import Query

from catalog.config import get_settings
from catalog.core.errors import InvalidRequestError


_RECORD_ID = re.compile(r"-?[0-9]+")
# INTEGER primary key range
_MAX_RECORD_ID = 2**31 - 1


@dataclass(frozen=True)
class Page:
    offset: int
    limit: int


def parse_record_id(raw: str, resource_type: str) -> int:
    """Decode a path segment into a primary key."""
    if not _RECORD_ID.fullmatch(raw) or abs(int(raw)) > _MAX_RECORD_ID:
        raise InvalidRequestError(
            f"Invalid {resource_type.lower()} ID", field="id",
        )
    return int(raw)


def resolve_page(
    start: int | None,
    count: int | None,
    default_size: int,
    max_size: int,
) -> Page:
    offset = start if start is not None and start > 0 else 0
    if count is None or count < 1:
        limit = default_size
    else:
        limit = min(count, max_size)
    return Page(offset=offset, limit=limit)


def page_params(
    start: int | None = Query(None, description="Rows to skip"),
    count: int | None = Query(None, description="Rows to return"),
) -> Page:
    """FastAPI dependency: ?start=&count= -> Page."""
    settings = get_settings()
    return resolve_page(
        start, count, settings.default_page_size, settings.max_page_size,
    )
