from collections import Counter
from typing import Dict, Sequence

from loguru import logger

from chesslist.query.predicates import Equals, In
from chesslist.store.base import RecordStore, StoreQuery

CONFIRMED = "confirmed"


class ParticipantService:
    def __init__(self, store: RecordStore):
        self.store = store

    def count_confirmed(self, tournament_ids: Sequence[str]) -> Dict[str, int]:
        """
        Counts confirmed registrations per tournament id. Tournaments without
        any are left out of the mapping; callers read them as 0.
        No query is issued for an empty id list.
        """
        if not tournament_ids:
            return {}

        rows = self.store.fetch(
            StoreQuery(
                table="registrations",
                columns=("tournament_id",),
                where=(In("tournament_id", tuple(tournament_ids)), Equals("status", CONFIRMED)),
            )
        )
        counts = Counter(row["tournament_id"] for row in rows)
        logger.debug(f"Counted {sum(counts.values())} confirmed registrations across {len(tournament_ids)} tournaments")
        return dict(counts)
