"""Confirmation port — abstract interface for yes/no prompts before deletes.

Core modules depend on this protocol, never on a specific UI.
"""

from __future__ import annotations

from typing import Protocol


class ConfirmationPort(Protocol):
    """Asks the person at the keyboard to confirm a destructive action."""

    def confirm(self, prompt: str) -> bool: ...
