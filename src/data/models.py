"""
Rooted Together — Data Models.

Plain records for residents, the house manager, and everything a resident
owns (work schedule, goals, meeting attendance). Records are replaced whole,
never patched field by field, so every type here is a simple dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DAYS_OF_WEEK = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

MEETING_TYPES = ("AA", "NA", "Celebrate Recovery", "SMART Recovery", "Other")


class UserRole(Enum):
    RESIDENT = "RESIDENT"
    MANAGER = "MANAGER"


@dataclass
class Milestone:
    id: str
    text: str
    completed: bool = False


@dataclass
class Goal:
    """A recovery objective; milestones are fixed at creation and only toggled."""

    id: str
    title: str
    milestones: list[Milestone] = field(default_factory=list)


@dataclass
class Shift:
    id: str
    day: str            # "Mon".."Sun", stored as given
    start_time: str     # "HH:MM"
    end_time: str       # "HH:MM"
    employer: str


@dataclass
class WorkSchedule:
    shifts: list[Shift] = field(default_factory=list)  # insertion order


@dataclass
class Attendance:
    """A logged recovery meeting."""

    id: str
    date: str                   # ISO date YYYY-MM-DD
    type: str                   # usually one of MEETING_TYPES
    location: str | None = None
    time: str | None = None     # "HH:MM"


@dataclass
class User:
    """A resident or the house manager.

    ``attendance`` may be absent on older records; treat None as empty.
    """

    id: str
    name: str
    email: str
    role: UserRole
    password: str | None = None
    rent_due_this_week: float = 0
    total_paid: float = 0
    total_owed: float = 0
    schedule: WorkSchedule = field(default_factory=WorkSchedule)
    goals: list[Goal] = field(default_factory=list)
    attendance: list[Attendance] | None = None

    @property
    def is_manager(self) -> bool:
        return self.role is UserRole.MANAGER


@dataclass(frozen=True)
class RecoveryLink:
    """Static reference link shown on the resident dashboard."""

    title: str
    url: str
    type: str           # "meeting" | "material"
    description: str = ""
