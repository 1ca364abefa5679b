"""In-memory fake implementation of the issue tracking client for testing."""

from close_dup.core.errors import RemoteError
from close_dup.github.abc import IssueTrackingClient
from close_dup.github.types import (
    CloseReason,
    CloseResult,
    CommentInfo,
    IssueInfo,
    IssueRef,
    IssueState,
)


class FakeIssueTrackingClient(IssueTrackingClient):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        issues: dict[IssueRef, IssueInfo] | None = None,
        username: str | None = "testuser",
        comment_error: str | None = None,
        close_error: str | None = None,
    ) -> None:
        """Create FakeIssueTrackingClient with pre-configured state.

        Args:
            issues: Mapping of issue reference -> IssueInfo
            username: Username to return (None means not authenticated)
            comment_error: If set, create_comment raises RemoteError with this message
            close_error: If set, close_issue raises RemoteError with this message
        """
        self._issues = dict(issues) if issues else {}
        self._username = username
        self._comment_error = comment_error
        self._close_error = close_error
        self._lookups: list[IssueRef] = []
        self._added_comments: list[tuple[IssueRef, str]] = []
        self._closed_issues: list[tuple[str, CloseReason]] = []

    @property
    def lookups(self) -> list[IssueRef]:
        """Read-only access to get_issue calls for test assertions."""
        return self._lookups

    @property
    def added_comments(self) -> list[tuple[IssueRef, str]]:
        """Read-only access to added comments for test assertions.

        Returns list of (issue_ref, body) tuples.
        """
        return self._added_comments

    @property
    def closed_issues(self) -> list[tuple[str, CloseReason]]:
        """Read-only access to closed issues for test assertions.

        Returns list of (issue_id, reason) tuples.
        """
        return self._closed_issues

    @property
    def call_count(self) -> int:
        """Total number of remote calls made (reads and writes)."""
        return len(self._lookups) + len(self._added_comments) + len(self._closed_issues)

    def get_issue(self, owner: str, repo: str, number: int) -> IssueInfo | None:
        ref = IssueRef(owner=owner, repo=repo, number=number)
        self._lookups.append(ref)
        return self._issues.get(ref)

    def create_comment(self, owner: str, repo: str, number: int, body: str) -> CommentInfo:
        """Record comment in mutation tracking.

        Raises:
            RemoteError: If configured with comment_error or the issue is unknown
        """
        ref = IssueRef(owner=owner, repo=repo, number=number)
        if self._comment_error is not None:
            raise RemoteError(self._comment_error)
        if ref not in self._issues:
            raise RemoteError(f"Issue {ref} not found")
        self._added_comments.append((ref, body))
        comment_id = len(self._added_comments)
        url = f"https://github.com/{owner}/{repo}/issues/{number}#issuecomment-{comment_id}"
        return CommentInfo(url=url, body=body)

    def close_issue(self, issue_id: str, reason: CloseReason) -> CloseResult:
        """Close issue in fake storage.

        Raises:
            RemoteError: If configured with close_error or the id is unknown
        """
        if self._close_error is not None:
            raise RemoteError(self._close_error)

        for ref, issue in self._issues.items():
            if issue.id != issue_id:
                continue
            self._issues[ref] = IssueInfo(
                id=issue.id,
                number=issue.number,
                title=issue.title,
                state=IssueState.CLOSED,
            )
            self._closed_issues.append((issue_id, reason))
            return CloseResult(
                number=issue.number,
                state=IssueState.CLOSED.value,
                state_reason=reason.value,
                url=f"https://github.com/{ref.owner}/{ref.repo}/issues/{ref.number}",
            )

        raise RemoteError(f"Could not resolve to a node with the global id of '{issue_id}'")

    def get_current_username(self) -> str | None:
        """Return configured username from constructor."""
        return self._username
