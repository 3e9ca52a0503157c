"""Response objects returned by the session store and view-models.

Each UI adapter renders these in its own way; the core never shows messages
itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.core.errors import PortalError
    from src.data.models import User


class ResponseKind(Enum):
    OK = "ok"
    DENIED = "denied"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    NO_CHANGE = "no_change"


@dataclass
class MutationResponse:
    """Outcome of one command.

    ``user`` is the record as stored after the command (None when nothing
    was stored). ``error`` is set for DENIED and REJECTED.
    """

    kind: ResponseKind
    message: str = ""
    user: User | None = None
    error: PortalError | None = None

    @property
    def ok(self) -> bool:
        return self.kind is ResponseKind.OK


def ok(user: User | None, message: str = "") -> MutationResponse:
    return MutationResponse(ResponseKind.OK, message, user=user)


def denied(error: PortalError) -> MutationResponse:
    return MutationResponse(ResponseKind.DENIED, str(error), error=error)


def rejected(error: PortalError) -> MutationResponse:
    return MutationResponse(ResponseKind.REJECTED, str(error), error=error)


def not_found(message: str) -> MutationResponse:
    return MutationResponse(ResponseKind.NOT_FOUND, message)


def cancelled() -> MutationResponse:
    return MutationResponse(ResponseKind.CANCELLED, "Cancelled.")


def no_change(user: User | None, message: str = "") -> MutationResponse:
    return MutationResponse(ResponseKind.NO_CHANGE, message, user=user)
