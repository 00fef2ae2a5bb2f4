from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import NotFound, StorageFailure
from app.db import get_db
from app.schemas.events import SuccessResult
from app.schemas.ledger import LedgerRead
from app.services import rewards

router = APIRouter(prefix="/api", tags=["ledger"])


@router.get("/data", response_model=LedgerRead)
def get_data(db: Session = Depends(get_db)):
    """
    Balance plus every table, newest first.

    This is what the UI polls after each action:
      GET /api/data
    """
    try:
        return rewards.load_ledger(db)
    except StorageFailure:
        raise HTTPException(status_code=500, detail="Failed to fetch data")


@router.delete("/transaction/{transaction_id}", response_model=SuccessResult)
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    try:
        rewards.delete_transaction(db, transaction_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Transaction not found")
    except StorageFailure:
        raise HTTPException(status_code=500, detail="Failed to delete transaction")
    return SuccessResult()


@router.post("/reset", response_model=SuccessResult)
def reset(db: Session = Depends(get_db)):
    try:
        rewards.reset_ledger(db)
    except StorageFailure:
        raise HTTPException(status_code=500, detail="Failed to reset data")
    return SuccessResult()
