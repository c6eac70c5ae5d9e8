import copy
import operator
from typing import Any, Dict, Iterable, List, Optional

from chesslist.core.exceptions import StoreError
from chesslist.query.predicates import And, Contains, Equals, In, Or, Predicate, Range, RangeOp
from chesslist.store.base import RecordStore, Row, StoreQuery

_RANGE_OPERATORS = {
    RangeOp.GT: operator.gt,
    RangeOp.GTE: operator.ge,
    RangeOp.LT: operator.lt,
    RangeOp.LTE: operator.le,
}

_MISSING = object()


def _resolve(row: Row, field: str) -> Any:
    # "format.type" reads the "type" key of the JSON-ish "format" column
    head, _, rest = field.partition(".")
    value = row.get(head, _MISSING)
    if value is _MISSING:
        raise StoreError(f"column {field} does not exist")
    if rest:
        return value.get(rest) if isinstance(value, dict) else None
    return value


def matches(row: Row, predicate: Predicate) -> bool:
    """Evaluates a predicate against a single row."""
    if isinstance(predicate, Equals):
        return _resolve(row, predicate.field) == predicate.value
    if isinstance(predicate, In):
        return _resolve(row, predicate.field) in predicate.values
    if isinstance(predicate, Contains):
        value = _resolve(row, predicate.field)
        return value is not None and predicate.text.casefold() in str(value).casefold()
    if isinstance(predicate, Range):
        value = _resolve(row, predicate.field)
        if value is None:
            return False
        try:
            return _RANGE_OPERATORS[predicate.op](value, predicate.value)
        except TypeError as exc:
            raise StoreError(f"cannot compare {predicate.field}: {exc}")
    if isinstance(predicate, And):
        return all(matches(row, clause) for clause in predicate.clauses)
    if isinstance(predicate, Or):
        return any(matches(row, clause) for clause in predicate.clauses)
    raise StoreError(f"unsupported predicate: {predicate!r}")


class MemoryStore(RecordStore):
    """
    Keeps each table as a list of dicts. Meant for tests and local demos;
    it implements the same query surface as the SQL backend.
    """

    def __init__(self, tables: Optional[Dict[str, Iterable[Row]]] = None):
        self.tables: Dict[str, List[Row]] = {}
        for name, rows in (tables or {}).items():
            self.tables[name] = [dict(row) for row in rows]
        self.queries: List[StoreQuery] = []

    def add(self, table: str, *rows: Row) -> None:
        self.tables.setdefault(table, []).extend(dict(row) for row in rows)

    def _table(self, name: str) -> List[Row]:
        if name not in self.tables:
            raise StoreError(f'relation "{name}" does not exist')
        return self.tables[name]

    def fetch(self, query: StoreQuery) -> List[Row]:
        self.queries.append(query)
        rows = [row for row in self._table(query.table) if all(matches(row, p) for p in query.where)]

        # Stable sorts applied from the least significant key up
        for order in reversed(query.order_by):
            try:
                rows.sort(key=lambda row, col=order.column: _resolve(row, col), reverse=not order.ascending)
            except TypeError as exc:
                raise StoreError(f"cannot order by {order.column}: {exc}")

        if query.limit is not None:
            rows = rows[: query.limit]

        result = []
        for row in rows:
            projected = {column: copy.deepcopy(_resolve(row, column)) for column in query.columns}
            for join in query.joins:
                projected[join.name] = self._join_one(join, row.get(join.foreign_key))
            result.append(projected)
        return result

    def _join_one(self, join, key) -> Optional[Row]:
        if key is None:
            return None
        for related in self._table(join.table):
            if related.get("id") == key:
                return {column: copy.deepcopy(_resolve(related, column)) for column in join.columns}
        return None
