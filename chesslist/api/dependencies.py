from datetime import date, datetime, timezone

from fastapi import Depends
from sqlalchemy.orm import Session

from chesslist.core.database import SessionLocal
from chesslist.store.base import RecordStore
from chesslist.store.sql import SqlStore

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    return SqlStore(db)

def get_today() -> date:
    # Computed once per request; date windows never read the clock themselves
    return datetime.now(timezone.utc).date()
