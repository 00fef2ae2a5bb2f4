from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _OrmRow(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PianoSessionRead(_OrmRow):
    id: int
    date: date
    minutes: int
    created_at: Optional[datetime] = None


class WeeklyAwardRead(_OrmRow):
    id: int
    week_start: date
    transaction_id: int
    created_at: Optional[datetime] = None


class TestRecordRead(_OrmRow):
    id: int
    date: date
    subject: str
    score: int
    max_score: int
    awarded: bool
    created_at: Optional[datetime] = None


class IncidentRead(_OrmRow):
    id: int
    date: date
    note: str
    created_at: Optional[datetime] = None


class TransactionRead(_OrmRow):
    id: int
    date: date
    type: str
    amount: int
    description: Optional[str] = None
    created_at: Optional[datetime] = None


class LedgerRead(BaseModel):
    """Everything the UI needs in one payload. Balance is derived, never stored."""

    model_config = ConfigDict(populate_by_name=True)

    balance: int
    piano_sessions: list[PianoSessionRead] = Field(alias="pianoSessions")
    weekly_awards: list[WeeklyAwardRead] = Field(alias="weeklyAwards")
    tests: list[TestRecordRead]
    incidents: list[IncidentRead]
    transactions: list[TransactionRead]
