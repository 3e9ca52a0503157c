"""Shared test fixtures and configuration.

Sets environment variables before any src imports so src.config picks up
known defaults, and provides stores seeded with the demo roster.
"""

import os

# Patch env vars BEFORE any src imports
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("DEFAULT_RESIDENT_PASSWORD", "newuser123")
os.environ.setdefault("DEFAULT_RENT_DUE", "150")
os.environ.setdefault("STRICT_DAY_VALIDATION", "false")

import pytest


@pytest.fixture
def store():
    """A fresh SessionStore over the seed data, nobody logged in."""
    from src.core.session_store import SessionStore
    return SessionStore.from_seed()


@pytest.fixture
def manager_store(store):
    """Seed store with the house manager logged in."""
    from src.data.models import UserRole
    store.authenticate(UserRole.MANAGER, "owner@beacon.com", "password123")
    return store


@pytest.fixture
def john_store(store):
    """Seed store with John Doe (res-1) logged in."""
    from src.data.models import UserRole
    store.authenticate(UserRole.RESIDENT, "john@example.com", "john123")
    return store


@pytest.fixture
def sarah_store(store):
    """Seed store with Sarah Smith (res-2) logged in."""
    from src.data.models import UserRole
    store.authenticate(UserRole.RESIDENT, "sarah@example.com", "sarah123")
    return store


@pytest.fixture
def confirm_yes():
    from src.adapters.console_confirmation import ConsoleConfirmation
    return ConsoleConfirmation(assume_yes=True)


@pytest.fixture
def confirm_no():
    from src.adapters.console_confirmation import ConsoleConfirmation
    return ConsoleConfirmation(input_fn=lambda prompt: "n")
