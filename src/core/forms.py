"""
Rooted Together — Form drafts.

Structured input the UI hands to the view-models, plus the open/editing
state of the add-shift and log-meeting forms. Required-field checks happen
here, before anything reaches the session store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from src.core.errors import ValidationRejected
from src.data.models import DAYS_OF_WEEK, MEETING_TYPES, Attendance, Shift

logger = logging.getLogger(__name__)


class ShiftDraft(BaseModel):
    """Fields of a work shift being added or edited.

    JSON example:
    {
        "day": "Mon",
        "start_time": "09:00",
        "end_time": "17:00",
        "employer": "Main St. Cafe"
    }
    """
    day: str = "Mon"
    start_time: str = "09:00"   # HH:MM, not validated
    end_time: str = "17:00"     # HH:MM, not validated
    employer: str = ""

    @classmethod
    def from_shift(cls, shift: Shift) -> ShiftDraft:
        return cls(
            day=shift.day,
            start_time=shift.start_time,
            end_time=shift.end_time,
            employer=shift.employer,
        )

    def to_shift(self, shift_id: str) -> Shift:
        return Shift(
            id=shift_id,
            day=self.day,
            start_time=self.start_time,
            end_time=self.end_time,
            employer=self.employer,
        )


class MeetingDraft(BaseModel):
    """Fields of a meeting attendance record being logged or edited.

    JSON example:
    {
        "date": "2024-03-05",
        "type": "AA",
        "location": "Hope Group at Central",
        "time": "19:00"
    }
    """
    date: str = Field(default_factory=lambda: datetime.now(timezone.utc).date().isoformat())  # UTC day
    type: str = "AA"
    location: str = ""
    time: str = "19:00"

    @classmethod
    def from_attendance(cls, record: Attendance) -> MeetingDraft:
        return cls(
            date=record.date,
            type=record.type,
            location=record.location or "",
            time=record.time or "",
        )

    def to_attendance(self, record_id: str) -> Attendance:
        return Attendance(
            id=record_id,
            date=self.date,
            type=self.type,
            location=self.location,
            time=self.time,
        )


def validate_shift(draft: ShiftDraft) -> None:
    """Raise ValidationRejected if the shift cannot be saved.

    Days outside Mon..Sun are only logged unless STRICT_DAY_VALIDATION is on.
    """
    from src.config import settings

    if not draft.employer.strip():
        raise ValidationRejected("Employer is required.")
    if draft.day not in DAYS_OF_WEEK:
        if settings.STRICT_DAY_VALIDATION:
            raise ValidationRejected(f"Unknown day {draft.day!r}; expected one of {', '.join(DAYS_OF_WEEK)}.")
        logger.warning("Shift saved with non-standard day %r", draft.day)


def validate_meeting(draft: MeetingDraft) -> None:
    """Raise ValidationRejected if the meeting cannot be saved.

    Types outside MEETING_TYPES are kept as entered and logged.
    """
    if not draft.location.strip():
        raise ValidationRejected("Location is required.")
    if draft.type not in MEETING_TYPES:
        logger.warning("Meeting saved with non-standard type %r", draft.type)


@dataclass
class ShiftForm:
    is_open: bool = False
    editing_id: str | None = None
    draft: ShiftDraft = field(default_factory=ShiftDraft)


@dataclass
class MeetingForm:
    is_open: bool = False
    editing_id: str | None = None
    draft: MeetingDraft = field(default_factory=MeetingDraft)
