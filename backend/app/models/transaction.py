from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.sql import func
from app.db import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)

    date = Column(Date, nullable=False, index=True)

    # piano, test, incident
    type = Column(String(20), nullable=False)

    # Signed, in cents. The balance is always SUM(amount), never stored.
    amount = Column(Integer, nullable=False)

    description = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
