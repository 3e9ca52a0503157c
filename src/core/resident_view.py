"""
Rooted Together — Resident View-Model.

Everything a resident does on their dashboard: tick off goal milestones,
keep their work schedule, and log recovery meetings. Each command reads the
current record, builds a full replacement, and submits it through
SessionStore.replace_resident. Nothing here edits a record in place.

The record transforms are plain functions so they can be used (and tested)
without a store.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from src.core import responses
from src.core.errors import ValidationRejected
from src.core.forms import (
    MeetingDraft,
    MeetingForm,
    ShiftDraft,
    ShiftForm,
    validate_meeting,
    validate_shift,
)
from src.core.responses import MutationResponse
from src.data.models import Attendance, RecoveryLink, User, WorkSchedule
from src.data.seed import QUOTES, RECOVERY_RESOURCES

if TYPE_CHECKING:
    from src.core.session_store import SessionStore
    from src.ports.confirmation_port import ConfirmationPort

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 86400


# ---------------------------------------------------------------------------
# Record transforms
# ---------------------------------------------------------------------------


def with_milestone_toggled(user: User, goal_id: str, milestone_id: str) -> User:
    """Return a copy of ``user`` with one milestone's ``completed`` flipped.

    Unknown ids give back an equal, unchanged record.
    """
    goals = []
    for goal in user.goals:
        if goal.id == goal_id:
            milestones = [
                dataclasses.replace(m, completed=not m.completed) if m.id == milestone_id else m
                for m in goal.milestones
            ]
            goal = dataclasses.replace(goal, milestones=milestones)
        goals.append(goal)
    return dataclasses.replace(user, goals=goals)


def with_shift_saved(
    user: User, draft: ShiftDraft, editing_id: str | None, new_id: Callable[[], str],
) -> User:
    """Edit the shift ``editing_id`` in place, or append a new one."""
    shifts = list(user.schedule.shifts)
    if editing_id is not None:
        for i, shift in enumerate(shifts):
            if shift.id == editing_id:
                shifts[i] = draft.to_shift(editing_id)
                return dataclasses.replace(user, schedule=WorkSchedule(shifts=shifts))
    shifts.append(draft.to_shift(new_id()))
    return dataclasses.replace(user, schedule=WorkSchedule(shifts=shifts))


def without_shift(user: User, shift_id: str) -> User:
    shifts = [s for s in user.schedule.shifts if s.id != shift_id]
    return dataclasses.replace(user, schedule=WorkSchedule(shifts=shifts))


def with_meeting_saved(
    user: User, draft: MeetingDraft, editing_id: str | None, new_id: Callable[[], str],
) -> User:
    """Edit the meeting ``editing_id`` in place, or prepend a new one."""
    attendance = list(user.attendance or [])
    if editing_id is not None:
        for i, record in enumerate(attendance):
            if record.id == editing_id:
                attendance[i] = draft.to_attendance(editing_id)
                return dataclasses.replace(user, attendance=attendance)
    attendance.insert(0, draft.to_attendance(new_id()))
    return dataclasses.replace(user, attendance=attendance)


def without_meeting(user: User, record_id: str) -> User:
    attendance = [a for a in (user.attendance or []) if a.id != record_id]
    return dataclasses.replace(user, attendance=attendance)


def attendance_newest_first(user: User) -> list[Attendance]:
    """Meetings newest first by ISO date; ties keep their stored order."""
    return sorted(user.attendance or [], key=lambda a: a.date, reverse=True)


def daily_quote(now: datetime | None = None) -> str:
    """Quote of the day; rotates once per UTC day.

    ``now`` should be timezone-aware. A naive datetime is read as UTC, not
    as local time.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    day_number = int(now.timestamp() // _SECONDS_PER_DAY)
    return QUOTES[day_number % len(QUOTES)]


def meeting_resources() -> list[RecoveryLink]:
    return [link for link in RECOVERY_RESOURCES if link.type == "meeting"]


# ---------------------------------------------------------------------------
# ResidentViewModel
# ---------------------------------------------------------------------------


class ResidentViewModel:
    """Dashboard commands for one resident.

    Defaults to whoever is logged in; pass ``resident_id`` to work on a
    specific record (the store still decides whether the change is allowed).
    """

    def __init__(
        self,
        store: SessionStore,
        confirmation: ConfirmationPort,
        resident_id: str | None = None,
    ) -> None:
        self._store = store
        self._confirmation = confirmation
        self._resident_id = resident_id
        self.shift_form = ShiftForm()
        self.meeting_form = MeetingForm()

    @property
    def resident(self) -> User:
        if self._resident_id is None:
            user = self._store.current_identity
        else:
            user = self._store.get_resident(self._resident_id)
        if user is None:
            raise LookupError("No resident record available")
        return user

    # ------------------------------------------------------------------
    # Goals
    # ------------------------------------------------------------------

    def toggle_milestone(self, goal_id: str, milestone_id: str) -> MutationResponse:
        user = self.resident
        updated = with_milestone_toggled(user, goal_id, milestone_id)
        if updated == user:
            logger.debug("toggle_milestone: %s/%s not found for %s", goal_id, milestone_id, user.id)
            return responses.no_change(user, "Milestone not found.")
        return self._store.replace_resident(updated)

    def goal_progress(self, goal_id: str) -> tuple[int, int]:
        """Return (completed, total) milestones for a goal; (0, 0) if unknown."""
        for goal in self.resident.goals:
            if goal.id == goal_id:
                done = sum(1 for m in goal.milestones if m.completed)
                return done, len(goal.milestones)
        return 0, 0

    # ------------------------------------------------------------------
    # Work schedule
    # ------------------------------------------------------------------

    def open_shift_form(self) -> None:
        self.shift_form = ShiftForm(is_open=True)

    def start_edit_shift(self, shift_id: str) -> bool:
        """Load an existing shift into the form. False if it does not exist."""
        for shift in self.resident.schedule.shifts:
            if shift.id == shift_id:
                self.shift_form = ShiftForm(
                    is_open=True, editing_id=shift_id, draft=ShiftDraft.from_shift(shift),
                )
                return True
        return False

    def cancel_shift_form(self) -> None:
        self.shift_form = ShiftForm()

    def save_shift(
        self, draft: ShiftDraft | None = None, editing_id: str | None = None,
    ) -> MutationResponse:
        """Save a shift; with no arguments, saves whatever the form holds.

        A rejected draft leaves the form open and untouched.
        """
        if draft is None:
            draft = self.shift_form.draft
            editing_id = self.shift_form.editing_id
        try:
            validate_shift(draft)
        except ValidationRejected as exc:
            logger.info("Shift not saved: %s", exc)
            return responses.rejected(exc)

        updated = with_shift_saved(self.resident, draft, editing_id, self._store.new_id)
        result = self._store.replace_resident(updated)
        if result.ok:
            self.shift_form = ShiftForm()
        return result

    def delete_shift(self, shift_id: str) -> MutationResponse:
        user = self.resident
        if not any(s.id == shift_id for s in user.schedule.shifts):
            return responses.no_change(user, "Shift not found.")
        if not self._confirmation.confirm("Remove this shift?"):
            return responses.cancelled()
        return self._store.replace_resident(without_shift(user, shift_id))

    # ------------------------------------------------------------------
    # Meeting attendance
    # ------------------------------------------------------------------

    def open_meeting_form(self) -> None:
        self.meeting_form = MeetingForm(is_open=True)

    def start_edit_meeting(self, record_id: str) -> bool:
        """Load an existing meeting into the form. False if it does not exist."""
        for record in self.resident.attendance or []:
            if record.id == record_id:
                self.meeting_form = MeetingForm(
                    is_open=True, editing_id=record_id, draft=MeetingDraft.from_attendance(record),
                )
                return True
        return False

    def cancel_meeting_form(self) -> None:
        self.meeting_form = MeetingForm()

    def save_meeting(
        self, draft: MeetingDraft | None = None, editing_id: str | None = None,
    ) -> MutationResponse:
        """Save a meeting; with no arguments, saves whatever the form holds.

        A rejected draft leaves the form open and untouched.
        """
        if draft is None:
            draft = self.meeting_form.draft
            editing_id = self.meeting_form.editing_id
        try:
            validate_meeting(draft)
        except ValidationRejected as exc:
            logger.info("Meeting not saved: %s", exc)
            return responses.rejected(exc)

        updated = with_meeting_saved(self.resident, draft, editing_id, self._store.new_id)
        result = self._store.replace_resident(updated)
        if result.ok:
            self.meeting_form = MeetingForm()
        return result

    def delete_meeting(self, record_id: str) -> MutationResponse:
        user = self.resident
        if not any(a.id == record_id for a in user.attendance or []):
            return responses.no_change(user, "Meeting not found.")
        if not self._confirmation.confirm("Delete this meeting record?"):
            return responses.cancelled()
        return self._store.replace_resident(without_meeting(user, record_id))

    def sorted_attendance(self) -> list[Attendance]:
        return attendance_newest_first(self.resident)

    # ------------------------------------------------------------------
    # Read-only panels
    # ------------------------------------------------------------------

    def financial_summary(self) -> dict[str, float]:
        user = self.resident
        return {
            "rent_due_this_week": user.rent_due_this_week,
            "total_paid": user.total_paid,
            "total_owed": user.total_owed,
        }
