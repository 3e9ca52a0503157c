"""
Rooted Together — Authorization Gate.

Pure decisions about who may change which record. The session store asks
before applying every mutation.
"""

from __future__ import annotations

from src.data.models import User


def can_mutate(actor: User | None, target: User) -> bool:
    """The manager may change any record; a resident only their own."""
    if actor is None:
        return False
    if actor.is_manager:
        return True
    return actor.id == target.id


def can_manage_roster(actor: User | None) -> bool:
    """Only the manager adds or removes residents, including self-removal."""
    return actor is not None and actor.is_manager
