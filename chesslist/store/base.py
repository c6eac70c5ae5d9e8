from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from chesslist.query.predicates import Predicate


@dataclass(frozen=True)
class Join:
    """
    A to-one relation pulled into each result row under ``name``.
    The related row is looked up by ``related_table.id == row[foreign_key]``
    and comes back as a dict of ``columns``, or None when there is no match.
    """

    name: str
    table: str
    foreign_key: str
    columns: Tuple[str, ...]


@dataclass(frozen=True)
class OrderBy:
    column: str
    ascending: bool = True


@dataclass(frozen=True)
class StoreQuery:
    table: str
    columns: Tuple[str, ...]
    where: Tuple[Predicate, ...] = ()
    joins: Tuple[Join, ...] = ()
    order_by: Tuple[OrderBy, ...] = ()
    limit: Optional[int] = None


Row = Dict[str, Any]


class RecordStore(ABC):
    """Read access to tournament data. Backends raise StoreError on failure."""

    @abstractmethod
    def fetch(self, query: StoreQuery) -> List[Row]:
        """Runs ``query`` and returns the projected rows in order."""
