"""Tests for src.core.session_store — roster, login, and mutation gating."""

import dataclasses

import pytest

from src.core.errors import AuthorizationDenied, InvalidCredentials, ProtectedRecordViolation
from src.core.responses import ResponseKind
from src.core.session_store import SessionStore
from src.data.models import User, UserRole
from src.data.seed import MANAGER_ID, initial_residents, manager_user


class TestConstruction:
    def test_from_seed(self, store):
        assert [r.name for r in store.residents] == ["John Doe", "Sarah Smith"]
        assert store.manager.id == MANAGER_ID
        assert store.current_identity is None

    def test_manager_cannot_be_in_roster(self):
        with pytest.raises(ValueError):
            SessionStore(initial_residents() + [manager_user()], manager_user())

    def test_duplicate_ids_rejected(self):
        john = initial_residents()[0]
        with pytest.raises(ValueError):
            SessionStore([john, dataclasses.replace(john)], manager_user())

    def test_manager_must_have_manager_role(self):
        with pytest.raises(ValueError):
            SessionStore([], initial_residents()[0])

    def test_snapshots_are_copies(self, store):
        snapshot = store.residents
        snapshot[0].schedule.shifts.clear()
        assert len(store.get_resident("res-1").schedule.shifts) == 2


class TestAuthenticate:
    def test_manager_email_case_insensitive(self, store):
        user = store.authenticate(UserRole.MANAGER, "OWNER@BEACON.COM", "password123")
        assert user.id == MANAGER_ID
        assert store.current_identity.role is UserRole.MANAGER

    def test_resident_login(self, store):
        user = store.authenticate(UserRole.RESIDENT, "John@Example.com", "john123")
        assert user.id == "res-1"

    def test_wrong_password(self, store):
        with pytest.raises(InvalidCredentials, match="Invalid resident email or password."):
            store.authenticate(UserRole.RESIDENT, "john@example.com", "wrong")
        assert store.current_identity is None

    def test_password_case_sensitive(self, store):
        with pytest.raises(InvalidCredentials):
            store.authenticate(UserRole.RESIDENT, "john@example.com", "JOHN123")

    def test_email_not_trimmed(self, store):
        with pytest.raises(InvalidCredentials):
            store.authenticate(UserRole.RESIDENT, " john@example.com", "john123")
        with pytest.raises(InvalidCredentials):
            store.authenticate(UserRole.MANAGER, "owner@beacon.com ", "password123")
        assert store.current_identity is None

    def test_manager_credentials_with_resident_role(self, store):
        with pytest.raises(InvalidCredentials):
            store.authenticate(UserRole.RESIDENT, "owner@beacon.com", "password123")

    def test_resident_credentials_with_manager_role(self, store):
        with pytest.raises(InvalidCredentials, match="Invalid owner credentials."):
            store.authenticate(UserRole.MANAGER, "john@example.com", "john123")

    def test_logout_keeps_roster(self, john_store):
        before = john_store.residents
        john_store.logout()
        assert john_store.current_identity is None
        assert john_store.residents == before


class TestReplaceResident:
    def test_other_resident_denied(self, sarah_store):
        john = sarah_store.get_resident("res-1")
        result = sarah_store.replace_resident(dataclasses.replace(john, total_owed=0))
        assert result.kind is ResponseKind.DENIED
        assert isinstance(result.error, AuthorizationDenied)
        assert sarah_store.get_resident("res-1") == john

    def test_self_update_allowed(self, sarah_store):
        sarah = sarah_store.current_identity
        result = sarah_store.replace_resident(dataclasses.replace(sarah, rent_due_this_week=175))
        assert result.ok
        assert sarah_store.get_resident("res-2").rent_due_this_week == 175
        assert sarah_store.current_identity.rent_due_this_week == 175

    def test_logged_out_denied(self, store):
        john = store.get_resident("res-1")
        result = store.replace_resident(dataclasses.replace(john, name="X"))
        assert result.kind is ResponseKind.DENIED
        assert store.get_resident("res-1").name == "John Doe"

    def test_position_preserved(self, manager_store):
        john = manager_store.get_resident("res-1")
        manager_store.replace_resident(dataclasses.replace(john, name="Johnny"))
        assert [r.name for r in manager_store.residents] == ["Johnny", "Sarah Smith"]

    def test_unknown_id_is_noop(self, manager_store):
        ghost = User(id="ghost", name="G", email="g@x", role=UserRole.RESIDENT)
        before = manager_store.residents
        result = manager_store.replace_resident(ghost)
        assert result.kind is ResponseKind.NOT_FOUND
        assert manager_store.residents == before

    def test_role_change_rejected(self, manager_store):
        john = manager_store.get_resident("res-1")
        result = manager_store.replace_resident(dataclasses.replace(john, role=UserRole.MANAGER))
        assert result.kind is ResponseKind.REJECTED
        assert manager_store.get_resident("res-1").role is UserRole.RESIDENT

    def test_ids_stable_across_updates_to_others(self, manager_store):
        ids_before = [r.id for r in manager_store.residents]
        sarah = manager_store.get_resident("res-2")
        for paid in (10, 20, 30):
            manager_store.replace_resident(dataclasses.replace(sarah, total_paid=paid))
        assert [r.id for r in manager_store.residents] == ids_before
        assert len(set(ids_before)) == len(ids_before)

    def test_stored_record_detached_from_caller(self, john_store):
        john = john_store.current_identity
        updated = dataclasses.replace(john, name="John D.")
        john_store.replace_resident(updated)
        updated.goals.clear()
        assert len(john_store.get_resident("res-1").goals) == 1


class TestAddResident:
    def test_defaults(self, manager_store):
        result = manager_store.add_resident("Mike Reyes", "mike@example.com")
        assert result.ok
        new = manager_store.residents[-1]
        assert new.name == "Mike Reyes"
        assert new.role is UserRole.RESIDENT
        assert new.password == "newuser123"
        assert new.rent_due_this_week == 150
        assert new.total_paid == 0
        assert new.total_owed == 0
        assert new.schedule.shifts == []
        assert new.goals == []

    def test_new_resident_can_log_in(self, manager_store):
        manager_store.add_resident("Mike Reyes", "mike@example.com")
        manager_store.logout()
        user = manager_store.authenticate(UserRole.RESIDENT, "mike@example.com", "newuser123")
        assert user.name == "Mike Reyes"

    def test_fresh_unique_ids(self, manager_store):
        manager_store.add_resident("A", "a@x")
        manager_store.add_resident("B", "b@x")
        ids = [r.id for r in manager_store.residents]
        assert len(set(ids)) == len(ids) == 4

    def test_resident_cannot_add(self, john_store):
        result = john_store.add_resident("Sneaky", "s@x")
        assert result.kind is ResponseKind.DENIED
        assert len(john_store.residents) == 2


class TestDeleteResident:
    def test_manager_deletes(self, manager_store):
        result = manager_store.delete_resident("res-1")
        assert result.ok
        assert [r.id for r in manager_store.residents] == ["res-2"]

    def test_manager_record_protected(self, manager_store):
        with pytest.raises(ProtectedRecordViolation):
            manager_store.delete_resident(MANAGER_ID)
        assert manager_store.manager.id == MANAGER_ID
        manager_store.logout()
        user = manager_store.authenticate(UserRole.MANAGER, "owner@beacon.com", "password123")
        assert user.id == MANAGER_ID

    def test_resident_cannot_delete_self(self, john_store):
        result = john_store.delete_resident("res-1")
        assert result.kind is ResponseKind.DENIED
        assert john_store.get_resident("res-1") is not None

    def test_unknown_id(self, manager_store):
        result = manager_store.delete_resident("nope")
        assert result.kind is ResponseKind.NOT_FOUND
        assert len(manager_store.residents) == 2

    def test_deleted_ids_not_reused(self, manager_store):
        first = manager_store.add_resident("A", "a@x").user
        manager_store.delete_resident(first.id)
        second = manager_store.add_resident("B", "b@x").user
        assert second.id != first.id


class TestIdentityRefresh:
    def test_resident_sees_manager_edit(self, store):
        store.authenticate(UserRole.MANAGER, "owner@beacon.com", "password123")
        john = store.get_resident("res-1")
        store.replace_resident(dataclasses.replace(john, total_owed=0))
        store.logout()
        store.authenticate(UserRole.RESIDENT, "john@example.com", "john123")
        assert store.current_identity.total_owed == 0

    def test_identity_follows_own_update(self, john_store):
        john = john_store.current_identity
        john_store.replace_resident(dataclasses.replace(john, name="John D."))
        assert john_store.current_identity.name == "John D."

    def test_manager_identity_untouched(self, manager_store):
        john = manager_store.get_resident("res-1")
        manager_store.replace_resident(dataclasses.replace(john, name="Johnny"))
        assert manager_store.current_identity.id == MANAGER_ID
