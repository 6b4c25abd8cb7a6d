"""
Search predicate builder.

Each resource declares the query parameters it understands as a tuple
of filter objects.  :func:`build_predicate` turns the present, non-empty
ones into a single ``Q`` joined with AND.  Values that cannot be parsed
for integer or date filters are dropped from the predicate and logged;
they never fail the request.
"""
from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Iterable, Mapping

from django.db.models import Q

logger = logging.getLogger(__name__)

DATE_FORMAT = '%Y-%m-%d'
# strptime alone would also take 2024-1-5
DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


class Filter:
    """Maps one query parameter onto one model lookup."""
    lookup = 'exact'

    def __init__(self, param: str, field: str | None = None):
        self.param = param
        self.field = field or param

    def parse(self, raw: str) -> Any:
        return raw

    def to_q(self, raw: str) -> Q | None:
        value = self.parse(raw)
        if value is None:
            return None
        return Q(**{f'{self.field}__{self.lookup}': value})


class Contains(Filter):
    """Case-insensitive substring match for free text."""
    lookup = 'icontains'


class Exact(Filter):
    lookup = 'exact'


class IntegerExact(Filter):
    """Exact match on an identifier; non-numeric input is ignored."""

    def parse(self, raw: str) -> int | None:
        try:
            return int(raw)
        except ValueError:
            logger.warning("ignoring non-numeric value %r for filter %s", raw, self.param)
            return None


class DateFrom(Filter):
    """Inclusive lower bound on a date column, ``YYYY-MM-DD``."""
    lookup = 'gte'

    def parse(self, raw: str) -> date | None:
        try:
            if not DATE_RE.match(raw):
                raise ValueError(raw)
            return datetime.strptime(raw, DATE_FORMAT).date()
        except ValueError:
            logger.warning("ignoring unparsable date %r for filter %s", raw, self.param)
            return None


class DateTo(DateFrom):
    lookup = 'lte'


def date_range(field: str, *, prefix_min: str = 'min_', prefix_max: str = 'max_') -> tuple[Filter, Filter]:
    return DateFrom(f'{prefix_min}{field}', field), DateTo(f'{prefix_max}{field}', field)


def build_predicate(filters: Iterable[Filter], query_params: Mapping[str, Any]) -> Q:
    predicate = Q()
    for f in filters:
        raw = query_params.get(f.param)
        if raw is None:
            continue
        raw = str(raw).strip()
        if not raw:
            continue
        q = f.to_q(raw)
        if q is not None:
            predicate &= q
    return predicate
