"""Data types for the issue tracking integration."""

from dataclasses import dataclass
from enum import Enum


class IssueState(Enum):
    """State of an issue."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"


class CloseReason(Enum):
    """Categorical reason recorded when an issue is closed.

    Values match GitHub's ``IssueClosedStateReason`` GraphQL enum.
    """

    COMPLETED = "COMPLETED"
    NOT_PLANNED = "NOT_PLANNED"
    DUPLICATE = "DUPLICATE"


@dataclass(frozen=True)
class IssueRef:
    """Reference to an issue in a specific repository.

    Attributes:
        owner: Repository owner (user or organization)
        repo: Repository name
        number: Issue number (positive)
    """

    owner: str
    repo: str
    number: int

    @property
    def repo_slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}#{self.number}"


@dataclass(frozen=True)
class IssueInfo:
    """Snapshot of an issue fetched at call time.

    ``id`` is the opaque GraphQL node id used by mutations.
    """

    id: str
    number: int
    title: str
    state: IssueState


@dataclass(frozen=True)
class CommentInfo:
    """Result from creating an issue comment."""

    url: str
    body: str


@dataclass(frozen=True)
class CloseResult:
    """Result from closing an issue.

    Attributes:
        number: Issue number
        state: New issue state as reported by GitHub (e.g. "CLOSED")
        state_reason: Close reason as reported by GitHub (e.g. "DUPLICATE")
        url: Full GitHub URL of the issue
    """

    number: int
    state: str
    state_reason: str
    url: str
