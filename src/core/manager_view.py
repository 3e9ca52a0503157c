"""
Rooted Together — Manager View-Model.

House-manager commands that span the whole roster: adding and removing
residents, editing their rent figures, and the cross-resident work schedule
view with its name/day filters.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.core import responses
from src.core.errors import ValidationRejected
from src.core.resident_view import attendance_newest_first
from src.core.responses import MutationResponse
from src.data.models import Attendance, User

if TYPE_CHECKING:
    from src.core.session_store import SessionStore
    from src.ports.confirmation_port import ConfirmationPort

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = ("rent_due_this_week", "total_paid", "total_owed")


@dataclass(frozen=True)
class ShiftRow:
    """One line of the aggregate schedule view."""

    resident_name: str
    day: str
    start_time: str
    end_time: str
    employer: str


def parse_amount(value: str | float | int | None) -> float:
    """Coerce form input to a number. Blank, unparseable and NaN become 0."""
    if value is None:
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
        try:
            number = float(value)
        except ValueError:
            logger.debug("Unparseable amount %r treated as 0", value)
            return 0
    else:
        number = float(value)
    if not math.isfinite(number):
        return 0
    return number


def build_shift_rows(
    residents: tuple[User, ...] | list[User], name_filter: str = "", day_filter: str = "",
) -> list[ShiftRow]:
    """Flatten every resident's shifts, keeping roster then schedule order.

    ``name_filter`` matches resident names case-insensitively as a substring;
    ``day_filter`` must equal the shift's day exactly, or be empty for any day.
    """
    needle = name_filter.lower()
    rows: list[ShiftRow] = []
    for resident in residents:
        if needle not in resident.name.lower():
            continue
        for shift in resident.schedule.shifts:
            if day_filter and shift.day != day_filter:
                continue
            rows.append(ShiftRow(
                resident_name=resident.name,
                day=shift.day,
                start_time=shift.start_time,
                end_time=shift.end_time,
                employer=shift.employer,
            ))
    return rows


class ManagerViewModel:
    """Roster and schedule commands for the house manager."""

    def __init__(self, store: SessionStore, confirmation: ConfirmationPort) -> None:
        self._store = store
        self._confirmation = confirmation
        self._selected_id: str | None = None
        self.name_filter = ""
        self.day_filter = ""

    @property
    def residents(self) -> tuple[User, ...]:
        return self._store.residents

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def add_resident(self, name: str, email: str) -> MutationResponse:
        if not name.strip() or not email.strip():
            exc = ValidationRejected("Name and email are required.")
            logger.info("Resident not added: %s", exc)
            return responses.rejected(exc)
        return self._store.add_resident(name.strip(), email.strip())

    def delete_resident(self, resident_id: str) -> MutationResponse:
        """Remove a resident after confirmation.

        Raises:
            ProtectedRecordViolation: ``resident_id`` is the manager's id.
        """
        if not self._confirmation.confirm("Remove resident permanently?"):
            return responses.cancelled()
        result = self._store.delete_resident(resident_id)
        if result.ok and self._selected_id == resident_id:
            self._selected_id = None
        return result

    def select_resident(self, resident_id: str) -> None:
        self._selected_id = resident_id

    def clear_selection(self) -> None:
        self._selected_id = None

    @property
    def selected_resident(self) -> User | None:
        """The selected resident as currently stored, or None."""
        if self._selected_id is None:
            return None
        return self._store.get_resident(self._selected_id)

    def sorted_attendance(self, resident: User) -> list[Attendance]:
        return attendance_newest_first(resident)

    # ------------------------------------------------------------------
    # Finances
    # ------------------------------------------------------------------

    def update_resident_field(
        self, resident: User, field: str, value: str | float | int | None,
    ) -> MutationResponse:
        """Set one rent figure and submit the whole record."""
        if field not in NUMERIC_FIELDS:
            raise ValueError(f"Field {field!r} is not editable; expected one of {NUMERIC_FIELDS}")
        updated = dataclasses.replace(resident, **{field: parse_amount(value)})
        return self._store.replace_resident(updated)

    # ------------------------------------------------------------------
    # Aggregate schedule view
    # ------------------------------------------------------------------

    def aggregate_shifts(
        self, name_filter: str | None = None, day_filter: str | None = None,
    ) -> list[ShiftRow]:
        """Recompute the all-residents shift list.

        Arguments default to the view's current ``name_filter``/``day_filter``.
        """
        if name_filter is None:
            name_filter = self.name_filter
        if day_filter is None:
            day_filter = self.day_filter
        return build_shift_rows(self._store.residents, name_filter, day_filter)
