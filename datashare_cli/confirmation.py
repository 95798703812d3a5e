"""
Confirmation gate for destructive operations

The prompt is injected so the gate can run without a terminal.
"""

from dataclasses import dataclass, field
from typing import Callable

from loguru import logger
from rich.console import Console
from rich.prompt import Confirm

PromptFn = Callable[[str], bool]

_console = Console(stderr=True)


def rich_prompt(message: str) -> bool:
    """Ask on the terminal, defaulting to no"""
    return Confirm.ask(message, default=False, console=_console)


@dataclass
class ConfirmationPolicy:
    """
    Decides whether a destructive call may proceed

    - what_if: describe the operation and never proceed
    - force: always proceed without prompting
    - otherwise the prompt decides
    """
    force: bool = False
    what_if: bool = False
    prompt: PromptFn = field(default=rich_prompt, repr=False)

    def confirm(self, target: str, action: str) -> bool:
        if self.what_if:
            _console.print(
                f'What if: Performing the operation "{action}" on target "{target}".'
            )
            logger.info("What-if mode, skipping {} on {}", action, target)
            return False
        if self.force:
            return True
        return bool(self.prompt(f'Are you sure you want to perform "{action}" on "{target}"?'))
