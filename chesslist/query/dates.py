import calendar
from datetime import date, timedelta
from typing import List, Optional

from chesslist.query.params import DateFilter
from chesslist.query.predicates import Predicate, Range, RangeOp

WEEK = timedelta(days=7)


def add_one_month(day: date) -> date:
    """
    Same day-of-month in the following month. A day that does not exist
    there rolls over into the month after, so 2026-01-31 becomes 2026-03-03.
    """
    year, month = (day.year + 1, 1) if day.month == 12 else (day.year, day.month + 1)
    days_in_month = calendar.monthrange(year, month)[1]
    if day.day <= days_in_month:
        return date(year, month, day.day)
    return date(year, month, days_in_month) + timedelta(days=day.day - days_in_month)


def resolve_date_window(date_filter: Optional[DateFilter], today: date) -> List[Predicate]:
    """
    Returns the start/end date bounds for a named date filter relative to
    ``today``. No filter yields no bounds at all.
    """
    if date_filter is None:
        return []
    if date_filter is DateFilter.UPCOMING:
        return [Range("start_date", RangeOp.GTE, today)]
    if date_filter is DateFilter.THIS_WEEK:
        return [
            Range("start_date", RangeOp.GTE, today),
            Range("start_date", RangeOp.LTE, today + WEEK),
        ]
    if date_filter is DateFilter.THIS_MONTH:
        return [
            Range("start_date", RangeOp.GTE, today),
            Range("start_date", RangeOp.LTE, add_one_month(today)),
        ]
    if date_filter is DateFilter.PAST:
        return [Range("end_date", RangeOp.LT, today)]
    raise ValueError(f"Unsupported date filter: {date_filter}")
