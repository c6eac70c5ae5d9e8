from typing import List

from sqlalchemy import Table, and_, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chesslist.core.database import Base
from chesslist.core.exceptions import StoreError
from chesslist.query.predicates import And, Contains, Equals, In, Or, Predicate, Range, RangeOp
from chesslist.store.base import RecordStore, Row, StoreQuery

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escapes LIKE wildcards so user text only ever matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class SqlStore(RecordStore):
    """Record store backed by the SQLAlchemy tables registered on ``Base``."""

    def __init__(self, db: Session):
        self.db = db

    def _table(self, name: str) -> Table:
        try:
            return Base.metadata.tables[name]
        except KeyError:
            raise StoreError(f'relation "{name}" does not exist')

    def _column(self, table: Table, field: str):
        name, _, key = field.partition(".")
        if name not in table.c:
            raise StoreError(f"column {table.name}.{name} does not exist")
        column = table.c[name]
        if key:
            # JSON sub-field, compared as text
            return column[key].as_string()
        return column

    def compile(self, table: Table, predicate: Predicate):
        """Translates a predicate tree into a SQLAlchemy boolean expression."""
        if isinstance(predicate, Equals):
            return self._column(table, predicate.field) == predicate.value
        if isinstance(predicate, In):
            return self._column(table, predicate.field).in_(predicate.values)
        if isinstance(predicate, Contains):
            pattern = f"%{escape_like(predicate.text)}%"
            return self._column(table, predicate.field).ilike(pattern, escape=LIKE_ESCAPE)
        if isinstance(predicate, Range):
            column = self._column(table, predicate.field)
            if predicate.op is RangeOp.GT:
                return column > predicate.value
            if predicate.op is RangeOp.GTE:
                return column >= predicate.value
            if predicate.op is RangeOp.LT:
                return column < predicate.value
            return column <= predicate.value
        if isinstance(predicate, And):
            return and_(*(self.compile(table, clause) for clause in predicate.clauses))
        if isinstance(predicate, Or):
            return or_(*(self.compile(table, clause) for clause in predicate.clauses))
        raise StoreError(f"unsupported predicate: {predicate!r}")

    def fetch(self, query: StoreQuery) -> List[Row]:
        table = self._table(query.table)
        selected = [self._column(table, column).label(column) for column in query.columns]
        from_clause = table

        joined = []
        for join in query.joins:
            related = self._table(join.table).alias(join.name)
            from_clause = from_clause.outerjoin(related, related.c.id == self._column(table, join.foreign_key))
            columns = ("id",) + tuple(column for column in join.columns if column != "id")
            for column in columns:
                if column not in related.c:
                    raise StoreError(f"column {join.table}.{column} does not exist")
                selected.append(related.c[column].label(f"{join.name}__{column}"))
            joined.append(join)

        stmt = select(*selected).select_from(from_clause)
        for predicate in query.where:
            stmt = stmt.where(self.compile(table, predicate))
        for order in query.order_by:
            column = self._column(table, order.column)
            stmt = stmt.order_by(column.asc() if order.ascending else column.desc())
        if query.limit is not None:
            stmt = stmt.limit(query.limit)

        try:
            records = self.db.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            message = str(getattr(exc, "orig", None) or exc)
            raise StoreError(message)

        rows = []
        for record in records:
            row = {column: record[column] for column in query.columns}
            for join in joined:
                if record[f"{join.name}__id"] is None:
                    row[join.name] = None
                else:
                    row[join.name] = {column: record[f"{join.name}__{column}"] for column in join.columns}
            rows.append(row)
        return rows
