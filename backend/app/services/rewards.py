"""Reward evaluation for the family ledger.

Every logged event goes through one of the functions below, which run a
single read-decide-write unit of work on the session they are given:

  - piano sessions pay PIANO_WEEKLY_REWARD once per Monday-Sunday week as
    soon as the week's minutes reach PIANO_WEEKLY_GOAL_MINUTES
  - test scores at or above TEST_AWARD_THRESHOLD_PCT pay TEST_REWARD
  - incidents always cost INCIDENT_PENALTY

The balance is never stored; it is the sum of the transactions table.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.constants import (
    INCIDENT_PENALTY,
    PIANO_WEEKLY_GOAL_MINUTES,
    PIANO_WEEKLY_REWARD,
    TEST_AWARD_THRESHOLD_PCT,
    TEST_REWARD,
    TX_INCIDENT,
    TX_PIANO,
    TX_TEST,
)
from app.core.errors import NotFound, StorageFailure, ValidationFailure
from app.core.time_utils import monday_of, round_half_up, week_bounds
from app.models.incident import Incident
from app.models.piano_session import PianoSession
from app.models.test_record import TestRecord
from app.models.transaction import Transaction
from app.models.weekly_award import WeeklyAward
from app.schemas.ledger import (
    IncidentRead,
    LedgerRead,
    PianoSessionRead,
    TestRecordRead,
    TransactionRead,
    WeeklyAwardRead,
)

logger = logging.getLogger(__name__)


@dataclass
class PianoOutcome:
    awarded: bool
    week_minutes: int


@dataclass
class ScoreOutcome:
    awarded: bool
    percentage: float


def _fail(db: Session, action: str) -> StorageFailure:
    db.rollback()
    logger.exception("Storage failure while trying to %s", action)
    return StorageFailure(f"Failed to {action}")


def _week_total(db: Session, day: date) -> int:
    start, end = week_bounds(day)
    total = (
        db.query(func.coalesce(func.sum(PianoSession.minutes), 0))
        .filter(PianoSession.date >= start)
        .filter(PianoSession.date <= end)
        .scalar()
    )
    return int(total or 0)


def week_minutes(db: Session, day: date) -> int:
    """Total piano minutes logged in the week containing `day`."""
    try:
        return _week_total(db, day)
    except SQLAlchemyError as e:
        raise _fail(db, "fetch week minutes") from e


def _award_week(db: Session, day: date, week_start: date, total: int) -> bool:
    """Insert the weekly piano reward and its marker.

    Runs in a savepoint: if another request already claimed `week_start`,
    the unique constraint on weekly_awards fires and nothing is kept.
    """
    try:
        with db.begin_nested():
            tx = Transaction(
                date=day,
                type=TX_PIANO,
                amount=PIANO_WEEKLY_REWARD,
                description=f"Weekly piano goal met! ({total} min)",
            )
            db.add(tx)
            db.flush()
            db.add(WeeklyAward(week_start=week_start, transaction_id=tx.id))
            db.flush()
    except IntegrityError:
        logger.warning("Week of %s was already awarded by another request", week_start)
        return False
    return True


def log_piano_session(db: Session, day: date, minutes: int) -> PianoOutcome:
    if minutes is None or minutes <= 0:
        raise ValidationFailure("minutes must be > 0")

    week_start = monday_of(day)
    try:
        db.add(PianoSession(date=day, minutes=minutes))
        db.flush()

        total = _week_total(db, day)
        already = (
            db.query(WeeklyAward.id)
            .filter(WeeklyAward.week_start == week_start)
            .first()
        )

        awarded = False
        if total >= PIANO_WEEKLY_GOAL_MINUTES and already is None:
            awarded = _award_week(db, day, week_start, total)

        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, "log piano session") from e

    if awarded:
        logger.info("Weekly piano goal met for week of %s (%s min)", week_start, total)
    else:
        logger.debug("Piano session logged, week of %s at %s min", week_start, total)
    return PianoOutcome(awarded=awarded, week_minutes=total)


def log_test(
    db: Session, day: date, subject: str, score: int, max_score: int
) -> ScoreOutcome:
    if not subject or not subject.strip():
        raise ValidationFailure("subject must not be empty")
    if score is None or score < 0:
        raise ValidationFailure("score must be >= 0")
    if max_score is None or max_score <= 0:
        raise ValidationFailure("max_score must be > 0")

    percentage = score / max_score * 100
    awarded = percentage >= TEST_AWARD_THRESHOLD_PCT

    try:
        db.add(
            TestRecord(
                date=day,
                subject=subject,
                score=score,
                max_score=max_score,
                awarded=awarded,
            )
        )
        if awarded:
            db.add(
                Transaction(
                    date=day,
                    type=TX_TEST,
                    amount=TEST_REWARD,
                    description=(
                        f"{subject} test: {score}/{max_score} "
                        f"({round_half_up(percentage)}%)"
                    ),
                )
            )
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, "log test") from e

    if awarded:
        logger.info("Test reward paid: %s %s/%s", subject, score, max_score)
    return ScoreOutcome(awarded=awarded, percentage=percentage)


def log_incident(db: Session, day: date, note: Optional[str] = None) -> None:
    note = note or ""
    try:
        db.add(Incident(date=day, note=note))
        db.add(
            Transaction(
                date=day,
                type=TX_INCIDENT,
                amount=-INCIDENT_PENALTY,
                description=f"Incident: {note}" if note else "Crying incident",
            )
        )
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, "log incident") from e

    logger.info("Incident penalty recorded on %s", day)


def delete_transaction(db: Session, transaction_id: int) -> None:
    """Delete a transaction; a piano reward also releases its week's award."""
    try:
        tx = db.query(Transaction).filter(Transaction.id == transaction_id).first()
        if tx is None:
            raise NotFound("Transaction not found")

        if tx.type == TX_PIANO and tx.amount > 0:
            week_start = monday_of(tx.date)
            db.query(WeeklyAward).filter(WeeklyAward.week_start == week_start).delete(
                synchronize_session=False
            )
            logger.info("Weekly piano award for %s reversed", week_start)

        db.delete(tx)
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, "delete transaction") from e


def _balance(db: Session) -> int:
    total = db.query(func.coalesce(func.sum(Transaction.amount), 0)).scalar()
    return int(total or 0)


def compute_balance(db: Session) -> int:
    try:
        return _balance(db)
    except SQLAlchemyError as e:
        raise _fail(db, "fetch balance") from e


def reset_ledger(db: Session) -> None:
    """Wipe all five tables. Awards go first, they reference transactions."""
    try:
        for model in (WeeklyAward, Transaction, PianoSession, TestRecord, Incident):
            db.query(model).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, "reset data") from e

    logger.info("Ledger reset")


def load_ledger(db: Session) -> LedgerRead:
    try:
        sessions = (
            db.query(PianoSession)
            .order_by(PianoSession.date.desc(), PianoSession.id.desc())
            .all()
        )
        awards = (
            db.query(WeeklyAward)
            .order_by(WeeklyAward.week_start.desc(), WeeklyAward.id.desc())
            .all()
        )
        tests = (
            db.query(TestRecord)
            .order_by(TestRecord.date.desc(), TestRecord.id.desc())
            .all()
        )
        incidents = (
            db.query(Incident)
            .order_by(Incident.date.desc(), Incident.id.desc())
            .all()
        )
        transactions = (
            db.query(Transaction)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .all()
        )
        balance = _balance(db)
    except SQLAlchemyError as e:
        raise _fail(db, "fetch data") from e

    return LedgerRead(
        balance=balance,
        piano_sessions=[PianoSessionRead.model_validate(r) for r in sessions],
        weekly_awards=[WeeklyAwardRead.model_validate(r) for r in awards],
        tests=[TestRecordRead.model_validate(r) for r in tests],
        incidents=[IncidentRead.model_validate(r) for r in incidents],
        transactions=[TransactionRead.model_validate(r) for r in transactions],
    )
