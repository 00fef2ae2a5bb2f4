from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.db import Base


class WeeklyAward(Base):
    __tablename__ = "weekly_awards"

    id = Column(Integer, primary_key=True, index=True)

    # Monday of the credited week. The unique constraint is what stops two
    # requests crossing the goal at the same time from both paying out.
    week_start = Column(Date, unique=True, nullable=False)

    # The +50 piano transaction created together with this marker
    transaction_id = Column(
        Integer,
        ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
