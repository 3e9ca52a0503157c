"""
Rooted Together — Seed Data.

Static records the session starts from. Each call returns fresh copies so
two sessions (or two tests) never share mutable state.
"""

from __future__ import annotations

from src.data.models import (
    Goal,
    Milestone,
    RecoveryLink,
    Shift,
    User,
    UserRole,
    WorkSchedule,
)

MANAGER_ID = "owner-1"


def initial_residents() -> list[User]:
    """Return the two demo residents the portal ships with."""
    return [
        User(
            id="res-1",
            name="John Doe",
            email="john@example.com",
            password="john123",
            role=UserRole.RESIDENT,
            rent_due_this_week=150,
            total_paid=1200,
            total_owed=300,
            schedule=WorkSchedule(shifts=[
                Shift(id="s1", day="Mon", start_time="08:00", end_time="16:00", employer="Main St. Cafe"),
                Shift(id="s2", day="Wed", start_time="08:00", end_time="16:00", employer="Main St. Cafe"),
            ]),
            goals=[
                Goal(id="g1", title="90 Days Sober", milestones=[
                    Milestone(id="m1", text="30 Days", completed=True),
                    Milestone(id="m2", text="60 Days", completed=False),
                    Milestone(id="m3", text="90 Days", completed=False),
                ]),
            ],
        ),
        User(
            id="res-2",
            name="Sarah Smith",
            email="sarah@example.com",
            password="sarah123",
            role=UserRole.RESIDENT,
            rent_due_this_week=150,
            total_paid=2400,
            total_owed=0,
            schedule=WorkSchedule(shifts=[
                Shift(id="s3", day="Mon", start_time="09:00", end_time="17:00", employer="Tech Solutions Inc"),
                Shift(id="s4", day="Tue", start_time="09:00", end_time="17:00", employer="Tech Solutions Inc"),
            ]),
            goals=[
                Goal(id="g2", title="Save for Apartment", milestones=[
                    Milestone(id="m4", text="Save $500", completed=True),
                    Milestone(id="m5", text="Save $1000", completed=True),
                    Milestone(id="m6", text="Credit Check", completed=False),
                ]),
            ],
        ),
    ]


def manager_user() -> User:
    """Return the house manager singleton record."""
    return User(
        id=MANAGER_ID,
        name="House Manager",
        email="owner@beacon.com",
        password="password123",
        role=UserRole.MANAGER,
    )


RECOVERY_RESOURCES: tuple[RecoveryLink, ...] = (
    RecoveryLink("AA Online Meetings", "https://aa-intergroup.org/meetings/", "meeting",
                 "Global directory of AA Zoom meetings"),
    RecoveryLink("NA Virtual", "https://virtual-na.org/", "meeting",
                 "Narcotics Anonymous online presence"),
    RecoveryLink("SMART Recovery", "https://www.smartrecovery.org/community/", "meeting",
                 "Science-based self-empowerment"),
    RecoveryLink("The Fix", "https://www.thefix.com/", "material",
                 "Addiction and recovery news"),
    RecoveryLink("Inspiration Daily", "https://www.hazeldenbettyford.org/thought-for-the-day", "material",
                 "Hazelden Betty Ford daily meditations"),
)

QUOTES: tuple[str, ...] = (
    "Recovery is not for people who need it, it's for people who want it.",
    "One day at a time.",
    "Your best days are ahead of you.",
    "It does not matter how slowly you go as long as you do not stop.",
)
