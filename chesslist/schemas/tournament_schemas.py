from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel

class OrganizerLink(BaseModel):
    url: str
    label: Optional[str] = None

class OrganizerRead(BaseModel):
    id: str
    organization_name: str
    links: List[OrganizerLink] = []

    class Config:
        from_attributes = True

class TournamentFormat(BaseModel):
    type: str
    system: Optional[str] = None
    rounds: Optional[int] = None

    class Config:
        extra = "allow"

class TimeControl(BaseModel):
    base_minutes: int
    increment_seconds: int = 0
    delay_seconds: int = 0

class StandardFee(BaseModel):
    amount_cents: int

class AdditionalFee(BaseModel):
    type: str
    amount_cents: int
    valid_until: Optional[str] = None
    age_min: Optional[int] = None
    age_max: Optional[int] = None

class EntryFees(BaseModel):
    standard: StandardFee
    additional: List[AdditionalFee] = []

class TournamentListItem(BaseModel):
    id: str
    name: str
    venue_name: str
    state: str
    start_date: date
    end_date: date
    registration_deadline: datetime
    format: TournamentFormat
    time_control: Optional[TimeControl] = None
    is_fide_rated: bool
    is_mcf_rated: bool
    entry_fees: EntryFees
    max_participants: int
    current_participants: int = 0
    poster_url: Optional[str] = None
    status: str
    organizer: Optional[OrganizerRead] = None

class TournamentPage(BaseModel):
    data: List[TournamentListItem]
    has_more: bool
    next_cursor: Optional[str] = None


ORGANIZER_RELATION = "organizer_profiles"


def normalize_organizer(raw: Any) -> Optional[Mapping[str, Any]]:
    """
    Joined organizer data may come back as a single mapping, a list holding
    one mapping, or nothing at all. Always returns a mapping or None.
    """
    if isinstance(raw, (list, tuple)):
        raw = raw[0] if raw else None
    return raw or None


def shape_tournament(row: Mapping[str, Any], participant_counts: Dict[str, int]) -> TournamentListItem:
    """Maps a raw joined tournament row onto the public listing shape."""
    organizer = normalize_organizer(row.get(ORGANIZER_RELATION))
    return TournamentListItem(
        id=row["id"],
        name=row["name"],
        venue_name=row["venue_name"],
        state=row["venue_state"],
        start_date=row["start_date"],
        end_date=row["end_date"],
        registration_deadline=row["registration_deadline"],
        format=row["format"],
        time_control=row.get("time_control"),
        is_fide_rated=row["is_fide_rated"],
        is_mcf_rated=row["is_mcf_rated"],
        entry_fees=row["entry_fees"],
        max_participants=row["max_participants"],
        current_participants=participant_counts.get(row["id"], 0),
        poster_url=row.get("poster_url"),
        status=row["status"],
        organizer=(
            OrganizerRead(
                id=organizer["id"],
                organization_name=organizer["organization_name"],
                links=organizer.get("links") or [],
            )
            if organizer
            else None
        ),
    )
