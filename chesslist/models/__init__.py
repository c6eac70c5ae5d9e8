from chesslist.core.database import Base, engine

# Import all models here to ensure they are registered with Base
from .organizer import OrganizerProfile
from .tournament import Tournament
from .registration import Registration


def init_db(bind=engine):
    """Create all tables. Schema migrations are owned by the write side."""
    Base.metadata.create_all(bind=bind)
