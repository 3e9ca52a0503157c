"""
Rooted Together — Entry Point.

`python main.py` walks through a short scripted session over the seed data:
the house manager reviews the schedule board and adds a resident, then a
resident logs in and records a shift.
"""

import logging

from src.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

from src.adapters.console_confirmation import ConsoleConfirmation
from src.core.errors import InvalidCredentials
from src.core.forms import ShiftDraft
from src.core.manager_view import ManagerViewModel
from src.core.resident_view import ResidentViewModel, daily_quote
from src.core.session_store import SessionStore
from src.data.models import UserRole


def main() -> None:
    store = SessionStore.from_seed()
    confirmation = ConsoleConfirmation(assume_yes=True)

    store.authenticate(UserRole.MANAGER, "owner@beacon.com", "password123")
    manager = ManagerViewModel(store, confirmation)
    print("Monday shifts:")
    for row in manager.aggregate_shifts(day_filter="Mon"):
        print(f"  {row.resident_name:<12} {row.start_time}-{row.end_time}  {row.employer}")
    added = manager.add_resident("Mike Reyes", "mike@example.com")
    print(added.message)
    store.logout()

    try:
        store.authenticate(UserRole.RESIDENT, "john@example.com", "wrong")
    except InvalidCredentials as exc:
        print(f"Login failed: {exc}")

    store.authenticate(UserRole.RESIDENT, "john@example.com", "john123")
    resident = ResidentViewModel(store, confirmation)
    print(f'"{daily_quote()}"')
    resident.open_shift_form()
    resident.shift_form.draft = ShiftDraft(day="Fri", start_time="10:00", end_time="14:00", employer="Hardware Co")
    resident.save_shift()
    for shift in resident.resident.schedule.shifts:
        print(f"  {shift.day} {shift.start_time}-{shift.end_time} {shift.employer}")
    store.logout()


if __name__ == "__main__":
    main()
