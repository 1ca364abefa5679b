"""Operator confirmation with interactive and headless modes."""

from abc import ABC, abstractmethod

import click

from close_dup.cli.output import user_output


class ConfirmationPolicy(ABC):
    """Decides whether to continue when a yes/no answer is needed.

    Default answer is always "no": only an explicit affirmative continues.
    """

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask whether to continue.

        Args:
            message: Question to show the operator (without the "(y/N)" suffix)

        Returns:
            True to continue, False to abort
        """
        ...


class InteractiveConfirmation(ConfirmationPolicy):
    """Prompt on the terminal and read a single keypress."""

    def confirm(self, message: str) -> bool:
        user_output(f"{message} (y/N): ", nl=False)
        answer = click.getchar()
        user_output()
        return answer in ("y", "Y")


class AutoConfirmation(ConfirmationPolicy):
    """Answer without prompting, for headless runs."""

    def __init__(self, answer: bool) -> None:
        self._answer = answer
        self._messages: list[str] = []

    @property
    def messages(self) -> list[str]:
        """Questions that were asked, for test assertions."""
        return self._messages

    def confirm(self, message: str) -> bool:
        self._messages.append(message)
        answer = "y" if self._answer else "N"
        user_output(f"{message} (y/N): {answer} (non-interactive)")
        return self._answer
