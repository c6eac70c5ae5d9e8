from unittest.mock import MagicMock

from chesslist.query.predicates import Equals, In
from chesslist.services.participant_service import ParticipantService
from chesslist.store.base import RecordStore

from conftest import make_store


class TestParticipantService:

    def test_counts_confirmed_registrations_only(self):
        store = make_store(
            registrations=[
                {"id": "r1", "tournament_id": "t1", "status": "confirmed"},
                {"id": "r2", "tournament_id": "t1", "status": "confirmed"},
                {"id": "r3", "tournament_id": "t2", "status": "confirmed"},
                {"id": "r4", "tournament_id": "t2", "status": "pending"},
                {"id": "r5", "tournament_id": "t3", "status": "cancelled"},
                {"id": "r6", "tournament_id": "t9", "status": "confirmed"},
            ]
        )
        counts = ParticipantService(store).count_confirmed(["t1", "t2", "t3"])
        assert counts == {"t1": 2, "t2": 1}
        assert counts.get("t3", 0) == 0

    def test_query_shape(self):
        store = make_store()
        ParticipantService(store).count_confirmed(["t1", "t2"])
        (query,) = store.queries
        assert query.table == "registrations"
        assert query.columns == ("tournament_id",)
        assert query.where == (In("tournament_id", ("t1", "t2")), Equals("status", "confirmed"))

    def test_empty_ids_issue_no_query(self):
        store = MagicMock(spec=RecordStore)
        assert ParticipantService(store).count_confirmed([]) == {}
        store.fetch.assert_not_called()
