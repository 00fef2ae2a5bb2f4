from sqlalchemy import Column, Integer, Date, DateTime
from sqlalchemy.sql import func
from app.db import Base


class PianoSession(Base):
    __tablename__ = "piano_sessions"

    id = Column(Integer, primary_key=True, index=True)

    date = Column(Date, nullable=False, index=True)
    minutes = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
