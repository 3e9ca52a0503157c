"""Portal error taxonomy.

Only the blocking, user-visible failures are raised. Authorization denial
and validation rejection travel back as response objects instead
(see src.core.responses).
"""

from __future__ import annotations


class PortalError(Exception):
    """Base class for every error the portal core raises."""


class InvalidCredentials(PortalError):
    """Raised when login fails: unknown email, wrong password, or wrong role."""


class AuthorizationDenied(PortalError):
    """The acting identity may not perform the mutation.

    Never raised by the store; it is attached to DENIED responses so callers
    that care can inspect it.
    """


class ProtectedRecordViolation(PortalError):
    """Raised on an attempt to delete the house manager account."""


class ValidationRejected(PortalError):
    """A required field was empty or malformed. Attached to REJECTED responses."""
