from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, JSON, String
from sqlalchemy.orm import relationship

from chesslist.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Tournament(Base):
    __tablename__ = "tournaments"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    venue_name = Column(String, nullable=False)
    venue_state = Column(String, nullable=False, index=True)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    registration_deadline = Column(DateTime(timezone=True), nullable=False)
    format = Column(JSON, nullable=False)  # {"type": "rapid", "system": "swiss", "rounds": 7}
    time_control = Column(JSON, nullable=True)
    is_fide_rated = Column(Boolean, nullable=False, default=False)
    is_mcf_rated = Column(Boolean, nullable=False, default=False)
    entry_fees = Column(JSON, nullable=False)  # amounts in cents
    max_participants = Column(Integer, nullable=False, default=0)
    poster_url = Column(String, nullable=True)
    status = Column(String, nullable=False, default="draft", index=True)  # draft, published, cancelled, completed
    created_at = Column(DateTime, nullable=False, default=_utcnow)
    organizer_id = Column(String, ForeignKey("organizer_profiles.id"), nullable=True)

    organizer = relationship("OrganizerProfile", back_populates="tournaments")
    registrations = relationship("Registration", back_populates="tournament")
