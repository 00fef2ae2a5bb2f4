from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.sql import func
from app.db import Base


class Incident(Base):
    __tablename__ = "incidents"

    id = Column(Integer, primary_key=True, index=True)

    date = Column(Date, nullable=False, index=True)
    note = Column(String, nullable=False, default="")

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
