import logging
import os

import click

from close_dup.cli.output import error_output, user_output
from close_dup.cli.parse_issue_ref import EXPECTED_FORMAT, parse_issue_ref
from close_dup.core.close_duplicate import close_as_duplicate
from close_dup.core.config import DEBUG_ENV_VAR, is_truthy
from close_dup.core.context import CloseDupContext, create_context
from close_dup.core.errors import CloseDuplicateError, ConfigError, UsageError
from close_dup.github.types import CloseResult, IssueRef

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["--help"], ignore_unknown_options=True)


def _usage_lines(prog: str) -> list[str]:
    return [
        f"Usage: {prog} <issue_to_close> [duplicate_of_issue]",
        f"Format: {EXPECTED_FORMAT} [{EXPECTED_FORMAT}]",
        f"Example: {prog} octocat/Hello-World#42 octocat/Hello-World#15",
        f"Example: {prog} octocat/Hello-World#42",
        "",
        "The first issue will be closed as a duplicate.",
        "If a second issue is provided, it will be referenced as the original.",
    ]


def _report_success(target: IssueRef, duplicate_of: IssueRef | None, result: CloseResult) -> None:
    user_output(
        click.style("✅ Successfully closed issue ", fg="green")
        + f"#{target.number} as {result.state_reason}"
    )
    user_output(f"   Issue URL: {result.url}")
    if duplicate_of is not None:
        user_output(f"   Duplicate of: {duplicate_of}")
    else:
        user_output("   Closed as duplicate without specific reference")


@click.command("close-issue-as-duplicate", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="close-issue-as-duplicate")
@click.argument("issues", nargs=-1, metavar="ISSUE_TO_CLOSE [DUPLICATE_OF_ISSUE]")
@click.pass_context
def cli(ctx: click.Context, issues: tuple[str, ...]) -> None:
    """Close a GitHub issue as a duplicate.

    Both issues use the format org/repo#<issue_number>. When DUPLICATE_OF_ISSUE
    is given, the closed issue gets a "Duplicate of ..." comment; otherwise the
    comment records who closed it and when.

    Authentication uses the current gh CLI session.
    """
    if is_truthy(os.environ.get(DEBUG_ENV_VAR)):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    try:
        if len(issues) not in (1, 2):
            for line in _usage_lines(ctx.command_path):
                user_output(line)
            raise UsageError(f"expected 1 or 2 issue arguments, got {len(issues)}")

        # Both references are parsed before the first remote call
        target = parse_issue_ref(issues[0], "issue to close")
        duplicate_of = None
        if len(issues) == 2:
            duplicate_of = parse_issue_ref(issues[1], "duplicate of issue")

        if ctx.obj is None:
            try:
                ctx.obj = create_context()
            except ValueError as e:
                raise ConfigError(f"Invalid configuration: {e}") from e
        app_ctx: CloseDupContext = ctx.obj

        result = close_as_duplicate(app_ctx, target, duplicate_of)
    except CloseDuplicateError as e:
        logger.debug("Failed with %s", type(e).__name__)
        error_output(str(e))
        raise SystemExit(1) from e

    _report_success(target, duplicate_of, result)


def main() -> None:
    """CLI entry point used by the `close-issue-as-duplicate` console script."""
    cli()
