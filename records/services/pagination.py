"""
Page/limit handling shared by every list and search endpoint.

Query parameters are forgiving: a missing, non-numeric or out-of-range
``page``/``limit`` falls back to the defaults instead of failing the
request.  Asking for a page past the end yields an empty slice.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _to_int(raw: Any) -> int | None:
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class PageParams:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_query(cls, query_params: Mapping[str, Any]) -> PageParams:
        page = _to_int(query_params.get('page'))
        if page is None or page < 1:
            page = DEFAULT_PAGE
        limit = _to_int(query_params.get('limit'))
        if limit is None or limit < 1:
            limit = DEFAULT_LIMIT
        elif limit > MAX_LIMIT:
            limit = MAX_LIMIT
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total_items: int
    total_pages: int

    @property
    def current_page(self) -> int:
        return self.page

    @property
    def items_per_page(self) -> int:
        return self.limit

    def as_dict(self) -> dict[str, int]:
        return {
            'page': self.page,
            'limit': self.limit,
            'total_items': self.total_items,
            'total_pages': self.total_pages,
            'current_page': self.current_page,
            'items_per_page': self.items_per_page,
        }

    def envelope(self) -> dict[str, int]:
        """Shape used in the ``pagination`` key of list responses."""
        return {
            'total_items': self.total_items,
            'total_pages': self.total_pages,
            'current_page': self.current_page,
            'limit': self.limit,
        }


def describe(params: PageParams, total_items: int) -> Pagination:
    total_pages = math.ceil(total_items / params.limit) if total_items else 0
    return Pagination(
        page=params.page,
        limit=params.limit,
        total_items=total_items,
        total_pages=total_pages,
    )


def paginate(queryset, params: PageParams) -> tuple[Pagination, list]:
    """Count ``queryset`` then fetch one page of it.

    The queryset must already be ordered so pages are stable.
    """
    pagination = describe(params, queryset.count())
    if params.offset >= pagination.total_items:
        return pagination, []
    return pagination, list(queryset[params.offset:params.offset + params.limit])
