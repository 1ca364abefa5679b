"""Application context with dependency injection."""

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

from close_dup.core.config import CloseDupConfig, load_config
from close_dup.core.confirmation import (
    AutoConfirmation,
    ConfirmationPolicy,
    InteractiveConfirmation,
)
from close_dup.core.time import FakeTime, RealTime, Time
from close_dup.github import FakeIssueTrackingClient, IssueTrackingClient, RealIssueTrackingClient


@dataclass(frozen=True)
class CloseDupContext:
    """Immutable context holding all dependencies for a run.

    Created at the CLI entry point. Tests build one from fakes and pass it as
    the click ``obj``.
    """

    issues: IssueTrackingClient
    time: Time
    confirmation: ConfirmationPolicy
    config: CloseDupConfig

    @staticmethod
    def for_test(
        issues: IssueTrackingClient | None = None,
        time: Time | None = None,
        confirmation: ConfirmationPolicy | None = None,
        config: CloseDupConfig | None = None,
    ) -> "CloseDupContext":
        """Create a context with fake defaults for anything not supplied.

        Confirmation defaults to an automatic "no", matching a headless run.
        """
        return CloseDupContext(
            issues=issues if issues is not None else FakeIssueTrackingClient(),
            time=time if time is not None else FakeTime(),
            confirmation=confirmation if confirmation is not None else AutoConfirmation(False),
            config=config if config is not None else CloseDupConfig.default(),
        )


def select_confirmation(config: CloseDupConfig, interactive: bool) -> ConfirmationPolicy:
    """Pick how the already-closed prompt is answered.

    Configured assume_yes wins; without a terminal the answer is "no".
    """
    if config.assume_yes:
        return AutoConfirmation(True)
    if not interactive:
        return AutoConfirmation(False)
    return InteractiveConfirmation()


def create_context(env: Mapping[str, str] | None = None) -> CloseDupContext:
    """Create production context with real implementations."""
    if env is None:
        env = os.environ
    config = load_config(env)
    return CloseDupContext(
        issues=RealIssueTrackingClient(),
        time=RealTime(),
        confirmation=select_confirmation(config, interactive=sys.stdin.isatty()),
        config=config,
    )
