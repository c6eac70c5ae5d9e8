from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from loguru import logger

from chesslist.query.cursor import encode_cursor
from chesslist.query.dates import resolve_date_window
from chesslist.query.filters import compile_filters
from chesslist.query.params import QueryRequest, format_sort_value
from chesslist.query.predicates import And, Equals, Or, Predicate, Range, RangeOp
from chesslist.schemas.tournament_schemas import ORGANIZER_RELATION, TournamentPage, shape_tournament
from chesslist.services.participant_service import ParticipantService
from chesslist.store.base import Join, OrderBy, RecordStore, Row, StoreQuery

TOURNAMENT_COLUMNS = (
    "id",
    "name",
    "venue_name",
    "venue_state",
    "start_date",
    "end_date",
    "registration_deadline",
    "format",
    "time_control",
    "is_fide_rated",
    "is_mcf_rated",
    "entry_fees",
    "max_participants",
    "poster_url",
    "status",
    "created_at",
)

ORGANIZER_JOIN = Join(
    name=ORGANIZER_RELATION,
    table="organizer_profiles",
    foreign_key="organizer_id",
    columns=("id", "organization_name", "links"),
)


@dataclass
class RawPage:
    rows: List[Row]
    has_more: bool
    next_cursor: Optional[str]


def seek_predicate(request: QueryRequest) -> Optional[Predicate]:
    """
    Keyset boundary after the cursor row: rows strictly past (sort value, id)
    in the requested direction. Ties on the sort column fall back to the id.
    """
    if request.cursor is None:
        return None
    op = RangeOp.GT if request.ascending else RangeOp.LT
    column = request.sort.value
    return Or(
        (
            Range(column, op, request.cursor_value),
            And((Equals(column, request.cursor_value), Range("id", op, request.cursor.id))),
        )
    )


class TournamentService:
    def __init__(self, store: RecordStore, participant_service: Optional[ParticipantService] = None):
        self.store = store
        self.participant_service = participant_service or ParticipantService(store)

    def build_query(self, request: QueryRequest, today: date) -> StoreQuery:
        where = compile_filters(request) + resolve_date_window(request.date_filter, today)
        seek = seek_predicate(request)
        if seek is not None:
            where.append(seek)

        return StoreQuery(
            table="tournaments",
            columns=TOURNAMENT_COLUMNS,
            joins=(ORGANIZER_JOIN,),
            where=tuple(where),
            order_by=(
                OrderBy(request.sort.value, request.ascending),
                OrderBy("id", request.ascending),
            ),
            # One extra row tells us whether another page exists
            limit=request.limit + 1,
        )

    def fetch_page(self, request: QueryRequest, today: date) -> RawPage:
        rows = self.store.fetch(self.build_query(request, today))
        has_more = len(rows) > request.limit
        rows = rows[: request.limit]

        next_cursor = None
        if has_more and rows:
            last = rows[-1]
            next_cursor = encode_cursor(format_sort_value(last[request.sort.value]), last["id"])

        logger.debug(
            f"Fetched {len(rows)} tournaments (sort={request.sort.value} {request.order.value}, "
            f"limit={request.limit}, has_more={has_more})"
        )
        return RawPage(rows=rows, has_more=has_more, next_cursor=next_cursor)

    def list_tournaments(self, request: QueryRequest, today: date) -> TournamentPage:
        """
        Runs a listing request end to end: filtered keyset page, confirmed
        participant counts for that page, then the public response shape.
        """
        page = self.fetch_page(request, today)
        counts = self.participant_service.count_confirmed([row["id"] for row in page.rows])
        return TournamentPage(
            data=[shape_tournament(row, counts) for row in page.rows],
            has_more=page.has_more,
            next_cursor=page.next_cursor,
        )
