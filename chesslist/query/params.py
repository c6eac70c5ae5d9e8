from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional, Tuple

from chesslist.core.config import settings
from chesslist.core.exceptions import DecodeError, ValidationError
from chesslist.query.cursor import Cursor, decode_cursor


class SortColumn(str, Enum):
    START_DATE = "start_date"
    CREATED_AT = "created_at"
    NAME = "name"

    def parse(self, raw: str) -> Any:
        """Converts a cursor value back into this column's type."""
        if self is SortColumn.START_DATE:
            return date.fromisoformat(raw)
        if self is SortColumn.CREATED_AT:
            return datetime.fromisoformat(raw)
        return raw


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class DateFilter(str, Enum):
    UPCOMING = "upcoming"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    PAST = "past"


class Rating(str, Enum):
    FIDE = "fide"
    MCF = "mcf"
    UNRATED = "unrated"


RATING_VALUES = frozenset(rating.value for rating in Rating)


def format_sort_value(value: Any) -> str:
    """Stringifies a row's sort column value for a cursor."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class QueryRequest:
    search: Optional[str] = None
    formats: Tuple[str, ...] = ()
    states: Tuple[str, ...] = ()
    ratings: FrozenSet[Rating] = field(default_factory=frozenset)
    date_filter: Optional[DateFilter] = None
    sort: SortColumn = SortColumn.START_DATE
    order: SortOrder = SortOrder.ASC
    cursor: Optional[Cursor] = None
    cursor_value: Any = None  # cursor.value converted to the sort column's type
    limit: int = 20

    @property
    def ascending(self) -> bool:
        return self.order is SortOrder.ASC


def _choices(enum_cls) -> str:
    return ", ".join(member.value for member in enum_cls)


def _split_list(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _get(params: Mapping[str, str], name: str) -> Optional[str]:
    # An empty query-string value is the same as leaving the parameter out
    value = params.get(name)
    return value if value else None


def parse_query_params(
    params: Mapping[str, str],
    default_limit: int = settings.DEFAULT_PAGE_SIZE,
    max_limit: int = settings.MAX_PAGE_SIZE,
) -> QueryRequest:
    """
    Validates raw listing query parameters and returns a typed QueryRequest.

    Checks run in a fixed order (sort, order, date, limit, cursor) and the
    first failure raises ValidationError (DecodeError for the cursor).
    Limits above ``max_limit`` are clamped rather than rejected. Unknown
    rating values are ignored.
    """
    # sort, order and limit reject an empty value instead of falling back to the default
    raw_sort = params.get("sort", SortColumn.START_DATE.value)
    try:
        sort = SortColumn(raw_sort)
    except ValueError:
        raise ValidationError(f"Invalid sort value. Must be one of: {_choices(SortColumn)}")

    raw_order = params.get("order", SortOrder.ASC.value)
    try:
        order = SortOrder(raw_order)
    except ValueError:
        raise ValidationError(f"Invalid order value. Must be one of: {_choices(SortOrder)}")

    date_filter = None
    raw_date = _get(params, "date")
    if raw_date is not None:
        try:
            date_filter = DateFilter(raw_date)
        except ValueError:
            raise ValidationError(f"Invalid date value. Must be one of: {_choices(DateFilter)}")

    limit = default_limit
    raw_limit = params.get("limit")
    if raw_limit is not None:
        # Digits only: int() alone would also take "+5", " 5 " and "1_0"
        if not (raw_limit.isascii() and raw_limit.isdigit()) or int(raw_limit) < 1:
            raise ValidationError("Invalid limit value. Must be a positive integer.")
        limit = min(int(raw_limit), max_limit)

    cursor = None
    cursor_value = None
    raw_cursor = _get(params, "cursor")
    if raw_cursor is not None:
        cursor = decode_cursor(raw_cursor)
        try:
            cursor_value = sort.parse(cursor.value)
        except ValueError:
            raise DecodeError()

    ratings = frozenset(
        Rating(item.lower())
        for item in _split_list(_get(params, "rating"))
        if item.lower() in RATING_VALUES
    )

    return QueryRequest(
        search=_get(params, "search"),
        formats=tuple(item.lower() for item in _split_list(_get(params, "format"))),
        states=_split_list(_get(params, "state")),
        ratings=ratings,
        date_filter=date_filter,
        sort=sort,
        order=order,
        cursor=cursor,
        cursor_value=cursor_value,
        limit=limit,
    )
