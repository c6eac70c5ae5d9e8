from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from chesslist.core.database import Base

class Registration(Base):
    __tablename__ = "registrations"

    id = Column(String, primary_key=True, index=True)
    tournament_id = Column(String, ForeignKey("tournaments.id"), nullable=False, index=True)
    status = Column(String, nullable=False, default="pending")  # pending, confirmed, cancelled

    tournament = relationship("Tournament", back_populates="registrations")
