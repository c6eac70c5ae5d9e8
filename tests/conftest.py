from datetime import date, datetime

import pytest

from chesslist.store.memory import MemoryStore

# Fixed "today" so date window assertions are deterministic
#   TODAY        2026-03-01
#   WEEK_END     2026-03-08  (today + 7 days)
#   MONTH_END    2026-04-01  (today + 1 month)
TODAY = date(2026, 3, 1)

ORGANIZER = {
    "id": "org-1",
    "organization_name": "KL Chess Association",
    "links": [{"url": "https://klchess.org", "label": "Website"}],
}


def tournament_row(**overrides):
    row = {
        "id": "tournament-1",
        "name": "KL Open Rapid 2026",
        "venue_name": "Kuala Lumpur Convention Centre",
        "venue_state": "W.P. Kuala Lumpur",
        "start_date": date(2026, 3, 15),
        "end_date": date(2026, 3, 16),
        "registration_deadline": datetime(2026, 3, 10, 23, 59, 59),
        "format": {"type": "rapid", "system": "swiss", "rounds": 7},
        "time_control": None,
        "is_fide_rated": True,
        "is_mcf_rated": False,
        "entry_fees": {"standard": {"amount_cents": 5000}, "additional": []},
        "max_participants": 120,
        "poster_url": None,
        "status": "published",
        "created_at": datetime(2026, 1, 1, 12, 0, 0),
        "organizer_id": "org-1",
    }
    row.update(overrides)
    return row


# Six diverse tournaments for filter tests (relative to TODAY = 2026-03-01)
#
#  id      start        state              rating      format     window
#  ------  -----------  -----------------  ----------  ---------  ---------------------------
#  t-wk-1  2026-03-03   W.P. Kuala Lumpur  FIDE        rapid      upcoming / this week / month
#  t-wk-2  2026-03-07   Selangor           MCF         blitz      upcoming / this week / month
#  t-mo-1  2026-03-15   Pulau Pinang       FIDE        classical  upcoming / this month
#  t-fu-1  2026-04-15   W.P. Kuala Lumpur  none        rapid      upcoming (beyond this month)
#  t-pa-1  2026-02-10   Johor              MCF         rapid      past
#  t-pa-2  2026-01-05   W.P. Kuala Lumpur  FIDE + MCF  blitz      past
DIVERSE_TOURNAMENTS = [
    tournament_row(
        id="t-wk-1", name="KL Rapid Open", start_date=date(2026, 3, 3), end_date=date(2026, 3, 3),
        venue_state="W.P. Kuala Lumpur", is_fide_rated=True, is_mcf_rated=False,
        format={"type": "rapid", "system": "swiss", "rounds": 7},
    ),
    tournament_row(
        id="t-wk-2", name="Selangor Blitz Championship", venue_name="Shah Alam Hall",
        start_date=date(2026, 3, 7), end_date=date(2026, 3, 7),
        venue_state="Selangor", is_fide_rated=False, is_mcf_rated=True,
        format={"type": "blitz", "system": "swiss", "rounds": 9},
    ),
    tournament_row(
        id="t-mo-1", name="Penang Chess Festival", venue_name="Georgetown Hotel",
        start_date=date(2026, 3, 15), end_date=date(2026, 3, 17),
        venue_state="Pulau Pinang", is_fide_rated=True, is_mcf_rated=False,
        format={"type": "classical", "system": "swiss", "rounds": 9},
    ),
    tournament_row(
        id="t-fu-1", name="KL April Rapid", start_date=date(2026, 4, 15), end_date=date(2026, 4, 16),
        venue_state="W.P. Kuala Lumpur", is_fide_rated=False, is_mcf_rated=False,
        format={"type": "rapid", "system": "swiss", "rounds": 7},
    ),
    tournament_row(
        id="t-pa-1", name="Johor Open Rapid", venue_name="Johor Bahru Civic Centre",
        start_date=date(2026, 2, 10), end_date=date(2026, 2, 20),
        venue_state="Johor", is_fide_rated=False, is_mcf_rated=True,
        format={"type": "rapid", "system": "swiss", "rounds": 7},
    ),
    tournament_row(
        id="t-pa-2", name="KL Blitz January", start_date=date(2026, 1, 5), end_date=date(2026, 1, 10),
        venue_state="W.P. Kuala Lumpur", is_fide_rated=True, is_mcf_rated=True,
        format={"type": "blitz", "system": "swiss", "rounds": 9},
    ),
]


def make_store(tournaments=(), registrations=(), organizers=(ORGANIZER,)):
    return MemoryStore(
        {
            "tournaments": tournaments,
            "registrations": registrations,
            "organizer_profiles": organizers,
        }
    )


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def diverse_store():
    return make_store(DIVERSE_TOURNAMENTS)
