from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from chesslist.api.dependencies import get_record_store, get_today
from chesslist.query.params import parse_query_params
from chesslist.schemas.tournament_schemas import TournamentPage
from chesslist.services.tournament_service import TournamentService
from chesslist.store.base import RecordStore

router = APIRouter()

@router.get("", response_model=TournamentPage, summary="List published tournaments")
def list_tournaments_endpoint(
    request: Request,
    search: Optional[str] = Query(None, description="Case-insensitive match on name or venue"),
    format_: Optional[str] = Query(None, alias="format", description="Comma list of format types, e.g. rapid,blitz"),
    state: Optional[str] = Query(None, description="Comma list of venue states"),
    rating: Optional[str] = Query(None, description="Comma list of fide, mcf, unrated"),
    date_filter: Optional[str] = Query(None, alias="date", description="upcoming, this_week, this_month or past"),
    sort: Optional[str] = Query(None, description="start_date (default), created_at or name"),
    order: Optional[str] = Query(None, description="asc (default) or desc"),
    cursor: Optional[str] = Query(None, description="next_cursor from the previous page"),
    limit: Optional[str] = Query(None, description="Page size, default 20, at most 100"),
    store: RecordStore = Depends(get_record_store),
    today: date = Depends(get_today),
):
    """
    Lists published tournaments, filtered and sorted, one page at a time.

    Follow **next_cursor** to fetch the following page; it is null on the last page.
    Invalid parameters are answered with 400 and an `error` message.
    """
    query = parse_query_params(request.query_params)
    return TournamentService(store).list_tournaments(query, today)
