from typing import List

from chesslist.query.params import QueryRequest, Rating
from chesslist.query.predicates import Contains, Equals, In, Predicate, all_of, any_of

PUBLISHED = "published"

# Order in which rating clauses are OR'd together
_RATING_CLAUSES = (
    (Rating.FIDE, Equals("is_fide_rated", True)),
    (Rating.MCF, Equals("is_mcf_rated", True)),
    (Rating.UNRATED, all_of(Equals("is_fide_rated", False), Equals("is_mcf_rated", False))),
)


def compile_filters(request: QueryRequest) -> List[Predicate]:
    """
    Translates the filter dimensions of a request into a list of predicates
    to be AND'ed together. Only published tournaments are ever visible. A
    dimension with nothing requested contributes no predicate.
    """
    predicates: List[Predicate] = [Equals("status", PUBLISHED)]

    if request.search:
        predicates.append(any_of(Contains("name", request.search), Contains("venue_name", request.search)))

    if request.formats:
        predicates.append(any_of(*(Equals("format.type", fmt) for fmt in request.formats)))

    if request.states:
        predicates.append(In("venue_state", tuple(request.states)))

    rating_clauses = [clause for rating, clause in _RATING_CLAUSES if rating in request.ratings]
    if rating_clauses:
        predicates.append(any_of(*rating_clauses))

    return predicates
