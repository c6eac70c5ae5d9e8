from sqlalchemy import Column, JSON, String
from sqlalchemy.orm import relationship

from chesslist.core.database import Base

class OrganizerProfile(Base):
    __tablename__ = "organizer_profiles"

    id = Column(String, primary_key=True, index=True)
    organization_name = Column(String, nullable=False)
    links = Column(JSON, nullable=False, default=list)  # [{"url": ..., "label": ...}]

    tournaments = relationship("Tournament", back_populates="organizer")
