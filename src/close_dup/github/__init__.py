"""Issue tracking integration."""

from close_dup.github.abc import IssueTrackingClient
from close_dup.github.fake import FakeIssueTrackingClient
from close_dup.github.real import RealIssueTrackingClient
from close_dup.github.types import (
    CloseReason,
    CloseResult,
    CommentInfo,
    IssueInfo,
    IssueRef,
    IssueState,
)

__all__ = [
    "CloseReason",
    "CloseResult",
    "CommentInfo",
    "FakeIssueTrackingClient",
    "IssueInfo",
    "IssueRef",
    "IssueState",
    "IssueTrackingClient",
    "RealIssueTrackingClient",
]
