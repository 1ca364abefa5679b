"""Abstract interface for issue tracking operations."""

from abc import ABC, abstractmethod

from close_dup.github.types import CloseReason, CloseResult, CommentInfo, IssueInfo


class IssueTrackingClient(ABC):
    """Abstract interface for the issue tracking service.

    All implementations (real and fake) must implement this interface.
    Authentication is the implementation's concern; callers never pass credentials.
    """

    @abstractmethod
    def get_issue(self, owner: str, repo: str, number: int) -> IssueInfo | None:
        """Fetch issue id, title and state.

        Args:
            owner: Repository owner
            repo: Repository name
            number: Issue number to fetch

        Returns:
            IssueInfo, or None if the issue does not exist

        Raises:
            RemoteError: If the service call fails for any other reason
        """
        ...

    @abstractmethod
    def create_comment(self, owner: str, repo: str, number: int, body: str) -> CommentInfo:
        """Add a comment to an existing issue.

        Args:
            owner: Repository owner
            repo: Repository name
            number: Issue number to comment on
            body: Comment body markdown

        Returns:
            CommentInfo with the comment URL and body as stored

        Raises:
            RemoteError: If the service call fails
        """
        ...

    @abstractmethod
    def close_issue(self, issue_id: str, reason: CloseReason) -> CloseResult:
        """Close an issue with a categorical reason.

        Args:
            issue_id: Opaque issue id from IssueInfo.id
            reason: Close reason to record

        Returns:
            CloseResult with the new state, reason and URL

        Raises:
            RemoteError: If the service call fails
        """
        ...

    @abstractmethod
    def get_current_username(self) -> str | None:
        """Get the authenticated username.

        Returns:
            Username if authenticated, None otherwise
        """
        ...
