"""
Rooted Together — Session Store.

Single source of truth for one portal session: the resident roster, the
house manager singleton, and whoever is logged in. View-models read from it
and submit whole-record replacements back; the authorization gate is
consulted before every mutation is applied.

Records are deep-copied on the way in and on the way out, so no caller can
reach into the roster and change it without going through a command.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable

from src.core import responses
from src.core.authorization import can_manage_roster, can_mutate
from src.core.errors import (
    AuthorizationDenied,
    InvalidCredentials,
    ProtectedRecordViolation,
    ValidationRejected,
)
from src.core.ids import IdFactory
from src.core.responses import MutationResponse
from src.data.models import User, UserRole, WorkSchedule

logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory roster plus the current identity for one session."""

    def __init__(
        self,
        residents: Iterable[User],
        manager: User,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        if manager.role is not UserRole.MANAGER:
            raise ValueError(f"Manager record {manager.id!r} must have role MANAGER")

        self._manager = copy.deepcopy(manager)
        self._residents: list[User] = []
        for resident in residents:
            if resident.id == manager.id:
                raise ValueError("The manager record cannot be part of the resident roster")
            if any(r.id == resident.id for r in self._residents):
                raise ValueError(f"Duplicate resident id {resident.id!r}")
            self._residents.append(copy.deepcopy(resident))

        self._current: User | None = None
        self.new_id = id_factory or IdFactory()

    @classmethod
    def from_seed(cls) -> SessionStore:
        """Build a store over the bundled demo residents and manager."""
        from src.data.seed import initial_residents, manager_user

        return cls(initial_residents(), manager_user())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def current_identity(self) -> User | None:
        return copy.deepcopy(self._current)

    @property
    def residents(self) -> tuple[User, ...]:
        return tuple(copy.deepcopy(r) for r in self._residents)

    @property
    def manager(self) -> User:
        return copy.deepcopy(self._manager)

    def get_resident(self, resident_id: str) -> User | None:
        """Fetch a single resident by ID."""
        index = self._index_of(resident_id)
        if index is None:
            return None
        return copy.deepcopy(self._residents[index])

    def _index_of(self, resident_id: str) -> int | None:
        for i, resident in enumerate(self._residents):
            if resident.id == resident_id:
                return i
        return None

    # ------------------------------------------------------------------
    # Login / logout
    # ------------------------------------------------------------------

    def authenticate(self, role: UserRole, email: str, password: str) -> User:
        """Log in as the manager or a resident.

        Email is matched case-insensitively but otherwise exactly (no
        whitespace trimming); the password exactly.

        Raises:
            InvalidCredentials: no record of that role matches.
        """
        wanted = email.lower()

        if role is UserRole.MANAGER:
            if wanted == self._manager.email.lower() and password == self._manager.password:
                self._current = self._manager
                logger.info("Manager %s logged in", self._manager.id)
                return self.current_identity
            logger.info("Failed manager login for %s", wanted)
            raise InvalidCredentials("Invalid owner credentials.")

        for resident in self._residents:
            if resident.email.lower() == wanted and resident.password == password:
                self._current = resident
                logger.info("Resident %s logged in", resident.id)
                return self.current_identity

        logger.info("Failed resident login for %s", wanted)
        raise InvalidCredentials("Invalid resident email or password.")

    def logout(self) -> None:
        if self._current is not None:
            logger.info("User %s logged out", self._current.id)
        self._current = None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def replace_resident(self, updated: User) -> MutationResponse:
        """Swap in a whole replacement record, keeping its roster position."""
        if not can_mutate(self._current, updated):
            actor = self._current.id if self._current else None
            logger.warning(
                "Unauthorized update attempt blocked: actor=%s target=%s", actor, updated.id,
            )
            return responses.denied(
                AuthorizationDenied(f"Not allowed to update resident {updated.id}")
            )

        index = self._index_of(updated.id)
        if index is None:
            logger.debug("replace_resident: no resident with id %s", updated.id)
            return responses.not_found(f"Resident {updated.id} not found")

        if updated.role is not self._residents[index].role:
            logger.warning("Rejected role change for resident %s", updated.id)
            return responses.rejected(ValidationRejected("A user's role cannot change"))

        self._residents[index] = copy.deepcopy(updated)
        self._refresh_identity()
        logger.info("Resident %s updated", updated.id)
        return responses.ok(self.get_resident(updated.id))

    def add_resident(self, name: str, email: str) -> MutationResponse:
        """Create a resident with default finances and an empty schedule."""
        from src.config import settings

        if not can_manage_roster(self._current):
            logger.warning("Blocked add_resident by non-manager")
            return responses.denied(AuthorizationDenied("Only the house manager can add residents"))

        new_user = User(
            id=self.new_id(),
            name=name,
            email=email,
            password=settings.DEFAULT_RESIDENT_PASSWORD,
            role=UserRole.RESIDENT,
            rent_due_this_week=settings.DEFAULT_RENT_DUE,
            total_paid=0,
            total_owed=0,
            schedule=WorkSchedule(shifts=[]),
            goals=[],
        )
        self._residents.append(new_user)
        self._refresh_identity()
        logger.info("Resident added: %s '%s'", new_user.id, name)
        return responses.ok(copy.deepcopy(new_user), f"Added {name}.")

    def delete_resident(self, resident_id: str) -> MutationResponse:
        """Remove a resident from the roster.

        Raises:
            ProtectedRecordViolation: ``resident_id`` is the manager's id.
        """
        if not can_manage_roster(self._current):
            logger.warning("Blocked delete_resident(%s) by non-manager", resident_id)
            return responses.denied(AuthorizationDenied("Only the house manager can remove residents"))

        if resident_id == self._manager.id:
            logger.warning("Refused to delete the house manager account")
            raise ProtectedRecordViolation("Cannot delete the house manager account.")

        index = self._index_of(resident_id)
        if index is None:
            logger.debug("delete_resident: no resident with id %s", resident_id)
            return responses.not_found(f"Resident {resident_id} not found")

        removed = self._residents.pop(index)
        self._refresh_identity()
        logger.info("Resident %s '%s' removed", removed.id, removed.name)
        return responses.ok(None, f"Removed {removed.name}.")

    def _refresh_identity(self) -> None:
        """Point a logged-in resident at their latest record.

        If their record is gone the identity is left as it was.
        """
        if self._current is None or self._current.role is not UserRole.RESIDENT:
            return
        index = self._index_of(self._current.id)
        if index is not None:
            self._current = self._residents[index]
