from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PianoSessionCreate(BaseModel):
    """Schema for logging a piano practice session."""

    date: date
    minutes: int = Field(gt=0)


class PianoLogResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    awarded: bool
    week_minutes: int = Field(alias="weekMinutes")


class TestScoreCreate(BaseModel):
    """Schema for logging a test score. maxScore arrives camelCased from the UI."""

    model_config = ConfigDict(populate_by_name=True)

    date: date
    subject: str = Field(min_length=1)
    score: int = Field(ge=0)
    max_score: int = Field(gt=0, alias="maxScore")

    @field_validator("subject")
    @classmethod
    def _subject_not_blank(cls, v: str) -> str:
        # stored as sent, only rejected when there is nothing but whitespace
        if not v.strip():
            raise ValueError("subject must not be blank")
        return v


class TestScoreResult(BaseModel):
    success: bool = True
    awarded: bool
    percentage: float


class IncidentCreate(BaseModel):
    date: date
    note: Optional[str] = None


class SuccessResult(BaseModel):
    success: bool = True
