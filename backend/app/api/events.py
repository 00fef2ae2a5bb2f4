from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import StorageFailure, ValidationFailure
from app.db import get_db
from app.schemas.events import (
    IncidentCreate,
    PianoLogResult,
    PianoSessionCreate,
    SuccessResult,
    TestScoreCreate,
    TestScoreResult,
)
from app.services import rewards

router = APIRouter(prefix="/api", tags=["events"])


@router.post("/piano", response_model=PianoLogResult)
def log_piano(payload: PianoSessionCreate, db: Session = Depends(get_db)):
    """
    Log a practice session and check the weekly goal.

    weekMinutes is the week's running total including this session.
    """
    try:
        outcome = rewards.log_piano_session(db, payload.date, payload.minutes)
    except ValidationFailure as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StorageFailure:
        raise HTTPException(status_code=500, detail="Failed to log piano session")

    return PianoLogResult(awarded=outcome.awarded, week_minutes=outcome.week_minutes)


@router.post("/test", response_model=TestScoreResult)
def log_test(payload: TestScoreCreate, db: Session = Depends(get_db)):
    try:
        outcome = rewards.log_test(
            db, payload.date, payload.subject, payload.score, payload.max_score
        )
    except ValidationFailure as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StorageFailure:
        raise HTTPException(status_code=500, detail="Failed to log test")

    return TestScoreResult(awarded=outcome.awarded, percentage=outcome.percentage)


@router.post("/incident", response_model=SuccessResult)
def log_incident(payload: IncidentCreate, db: Session = Depends(get_db)):
    try:
        rewards.log_incident(db, payload.date, payload.note)
    except StorageFailure:
        raise HTTPException(status_code=500, detail="Failed to log incident")
    return SuccessResult()
