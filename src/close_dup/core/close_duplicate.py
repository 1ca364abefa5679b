"""Close an issue as a duplicate of another."""

import logging
from datetime import UTC, datetime

from close_dup.cli.output import user_output
from close_dup.core.context import CloseDupContext
from close_dup.core.errors import NotFoundError, StateConflictError
from close_dup.github.types import CloseReason, CloseResult, IssueRef, IssueState

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
UNKNOWN_ACTOR = "@unknown"


def build_comment_body(duplicate_of: IssueRef | None, actor: str, now: datetime) -> str:
    """Compose the comment posted before closing.

    Examples:
        >>> now = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
        >>> build_comment_body(IssueRef("octocat", "Hello-World", 15), "@me", now)
        'Duplicate of octocat/Hello-World#15'
        >>> build_comment_body(None, "@me", now)
        'Closed as duplicate by @me on 2024-01-15 10:30:00 UTC'
    """
    if duplicate_of is not None:
        return f"Duplicate of {duplicate_of}"
    timestamp = now.astimezone(UTC).strftime(TIMESTAMP_FORMAT)
    return f"Closed as duplicate by {actor} on {timestamp}"


def resolve_actor(ctx: CloseDupContext) -> str:
    """Identity named in the no-reference comment.

    A configured actor is used verbatim; otherwise the authenticated user is
    mentioned as ``@login``.
    """
    if ctx.config.actor is not None:
        return ctx.config.actor
    username = ctx.issues.get_current_username()
    if username is None:
        logger.debug("gh api user returned no login")
        user_output(f"Warning: could not determine the gh user; naming {UNKNOWN_ACTOR}")
        return UNKNOWN_ACTOR
    return f"@{username}"


def close_as_duplicate(
    ctx: CloseDupContext, target: IssueRef, duplicate_of: IssueRef | None
) -> CloseResult:
    """Verify both issues, comment on the target and close it as DUPLICATE.

    The comment is posted before the close mutation and is not removed if
    closing fails.

    Args:
        ctx: Application context
        target: Issue to close
        duplicate_of: Canonical issue, or None to close without a reference

    Returns:
        CloseResult reported by the issue tracking service

    Raises:
        NotFoundError: If either issue does not exist
        StateConflictError: If the target is closed and the operator declines
        RemoteError: If any service call fails
    """
    if duplicate_of is not None:
        user_output(
            f"Closing issue #{target.number} in {target.repo_slug} as duplicate of "
            f"#{duplicate_of.number} in {duplicate_of.repo_slug}..."
        )
        user_output("Verifying duplicate issue exists...")
        duplicate = ctx.issues.get_issue(
            duplicate_of.owner, duplicate_of.repo, duplicate_of.number
        )
        if duplicate is None:
            raise NotFoundError(
                f"Duplicate issue #{duplicate_of.number} not found in {duplicate_of.repo_slug}"
            )
        user_output(
            f"✓ Found duplicate issue: #{duplicate.number} "
            f"({duplicate.state.value}) - {duplicate.title}"
        )
    else:
        user_output(f"Closing issue #{target.number} in {target.repo_slug} as duplicate...")

    user_output("Getting issue ID for issue to close...")
    issue = ctx.issues.get_issue(target.owner, target.repo, target.number)
    if issue is None or not issue.id:
        raise NotFoundError(f"Issue #{target.number} not found in {target.repo_slug}")
    user_output(f"✓ Found issue to close: #{issue.number} ({issue.state.value}) - {issue.title}")

    if issue.state == IssueState.CLOSED:
        user_output(f"Warning: Issue #{target.number} is already closed")
        if not ctx.confirmation.confirm("Continue anyway?"):
            raise StateConflictError("Aborted.")

    if duplicate_of is not None:
        user_output("Adding duplicate reference comment...")
        actor = ""
    else:
        user_output("Adding duplicate closure comment...")
        actor = resolve_actor(ctx)
    body = build_comment_body(duplicate_of, actor, ctx.time.now())

    comment = ctx.issues.create_comment(target.owner, target.repo, target.number, body)
    logger.debug("Added comment %s: %s", comment.url, comment.body)

    user_output("Closing issue as duplicate...")
    result = ctx.issues.close_issue(issue.id, CloseReason.DUPLICATE)
    logger.debug(
        "Closed issue #%d: state=%s reason=%s", result.number, result.state, result.state_reason
    )
    return result
