"""Console confirmation adapter — implements ConfirmationPort.

Asks on stdin before a delete goes through. ``assume_yes`` skips the prompt
for scripted runs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ConsoleConfirmation:
    """Terminal implementation of ConfirmationPort."""

    def __init__(self, assume_yes: bool = False, input_fn: Callable[[str], str] = input) -> None:
        self._assume_yes = assume_yes
        self._input = input_fn

    def confirm(self, prompt: str) -> bool:
        if self._assume_yes:
            logger.debug("Auto-confirmed: %s", prompt)
            return True
        answer = self._input(f"{prompt} [y/N] ")
        return answer.strip().lower() in {"y", "yes"}
