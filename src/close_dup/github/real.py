"""Production implementation of the issue tracking client using gh CLI."""

import json
import logging
from typing import Any

from close_dup.core.errors import RemoteError
from close_dup.github.abc import IssueTrackingClient
from close_dup.github.types import CloseReason, CloseResult, CommentInfo, IssueInfo, IssueState
from close_dup.subprocess_utils import describe_gh_failure, execute_gh_command, run_gh_command

logger = logging.getLogger(__name__)

ISSUE_QUERY = """
query($owner: String!, $name: String!, $number: Int!) {
  repository(owner: $owner, name: $name) {
    issue(number: $number) {
      id
      number
      title
      state
    }
  }
}
"""

CLOSE_ISSUE_MUTATION = """
mutation($issueId: ID!, $reason: IssueClosedStateReason!) {
  closeIssue(input: {issueId: $issueId, stateReason: $reason}) {
    issue {
      number
      state
      stateReason
      url
    }
  }
}
"""


class RealIssueTrackingClient(IssueTrackingClient):
    """Production implementation using gh CLI.

    Authentication comes from the ambient gh session (``gh auth login`` or
    ``GH_TOKEN``). All operations execute actual gh commands via subprocess.
    """

    def get_issue(self, owner: str, repo: str, number: int) -> IssueInfo | None:
        """Fetch issue via GraphQL.

        GitHub answers a missing repository or issue with a NOT_FOUND GraphQL
        error, which gh turns into a non-zero exit. That case maps to None.
        """
        cmd = [
            "gh",
            "api",
            "graphql",
            "-f",
            f"query={ISSUE_QUERY}",
            "-f",
            f"owner={owner}",
            "-f",
            f"name={repo}",
            "-F",
            f"number={number}",
        ]
        result = run_gh_command(cmd)
        if result.returncode != 0:
            data = _try_parse_json(result.stdout)
            if data is not None and _only_not_found_errors(data):
                logger.debug("Issue %s/%s#%d not found", owner, repo, number)
                return None
            raise RemoteError(describe_gh_failure(cmd, result))

        data = _parse_json(result.stdout) if result.stdout.strip() else None
        if data is None:
            raise RemoteError(f"Empty response looking up issue {owner}/{repo}#{number}")

        repository = (data.get("data") or {}).get("repository") or {}
        issue = repository.get("issue")
        if not issue or not issue.get("id"):
            return None

        return IssueInfo(
            id=issue["id"],
            number=issue["number"],
            title=issue["title"],
            state=IssueState(issue["state"]),
        )

    def create_comment(self, owner: str, repo: str, number: int, body: str) -> CommentInfo:
        """Add comment via the REST issues API."""
        cmd = [
            "gh",
            "api",
            "--method",
            "POST",
            f"repos/{owner}/{repo}/issues/{number}/comments",
            "-f",
            f"body={body}",
        ]
        data = _parse_json(execute_gh_command(cmd))
        return CommentInfo(url=data.get("html_url", ""), body=data.get("body", body))

    def close_issue(self, issue_id: str, reason: CloseReason) -> CloseResult:
        """Close issue via the closeIssue GraphQL mutation."""
        cmd = [
            "gh",
            "api",
            "graphql",
            "-f",
            f"query={CLOSE_ISSUE_MUTATION}",
            "-f",
            f"issueId={issue_id}",
            "-f",
            f"reason={reason.value}",
        ]
        data = _parse_json(execute_gh_command(cmd))

        close_issue = (data.get("data") or {}).get("closeIssue") or {}
        issue = close_issue.get("issue")
        if not issue:
            raise RemoteError(f"closeIssue returned no issue for id {issue_id}")

        return CloseResult(
            number=issue["number"],
            state=issue["state"],
            state_reason=issue.get("stateReason") or "",
            url=issue["url"],
        )

    def get_current_username(self) -> str | None:
        """Get current GitHub username via gh api user.

        Returns:
            GitHub username if authenticated, None otherwise
        """
        result = run_gh_command(["gh", "api", "user", "--jq", ".login"])
        if result.returncode != 0:
            return None
        username = result.stdout.strip()
        return username or None


def _parse_json(stdout: str) -> dict[str, Any]:
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as e:
        raise RemoteError(f"Could not decode gh response: {stdout.strip()[:200]}") from e
    if not isinstance(data, dict):
        raise RemoteError(f"Unexpected gh response: {stdout.strip()[:200]}")
    return data


def _only_not_found_errors(data: dict[str, Any]) -> bool:
    errors = data.get("errors")
    if not errors or not isinstance(errors, list):
        return False
    return all(isinstance(error, dict) and error.get("type") == "NOT_FOUND" for error in errors)


def _try_parse_json(stdout: str) -> dict[str, Any] | None:
    """Parse a failed command's output, returning None when it is not a JSON object."""
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None
