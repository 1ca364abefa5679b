"""Tests for RealIssueTrackingClient with mocked subprocess execution.

These tests verify that RealIssueTrackingClient calls gh CLI with the right
arguments and maps responses. We use pytest monkeypatch to mock subprocess calls.
"""

import json
import subprocess
from collections.abc import Callable

import pytest
from pytest import MonkeyPatch

from close_dup.core.errors import RemoteError
from close_dup.github import CloseReason, IssueState, RealIssueTrackingClient

MockRun = Callable[..., subprocess.CompletedProcess]


def _respond(
    commands: list[list[str]], stdout: str, returncode: int = 0, stderr: str = ""
) -> MockRun:
    def mock_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
        commands.append(cmd)
        return subprocess.CompletedProcess(
            args=cmd, returncode=returncode, stdout=stdout, stderr=stderr
        )

    return mock_run


def test_get_issue_success(monkeypatch: MonkeyPatch) -> None:
    """get_issue queries GraphQL with variables and maps the issue."""
    commands: list[list[str]] = []
    payload = {
        "data": {
            "repository": {
                "issue": {"id": "I_kwDO42", "number": 42, "title": "Crash", "state": "OPEN"}
            }
        }
    }
    monkeypatch.setattr(subprocess, "run", _respond(commands, json.dumps(payload)))

    issue = RealIssueTrackingClient().get_issue("octocat", "Hello-World", 42)

    assert issue is not None
    assert issue.id == "I_kwDO42"
    assert issue.number == 42
    assert issue.title == "Crash"
    assert issue.state == IssueState.OPEN

    cmd = commands[0]
    assert cmd[:3] == ["gh", "api", "graphql"]
    assert "owner=octocat" in cmd
    assert "name=Hello-World" in cmd
    assert cmd[cmd.index("number=42") - 1] == "-F"
    query = next(arg for arg in cmd if arg.startswith("query="))
    assert "issue(number: $number)" in query


def test_get_issue_null_issue_returns_none(monkeypatch: MonkeyPatch) -> None:
    commands: list[list[str]] = []
    payload = {"data": {"repository": {"issue": None}}}
    monkeypatch.setattr(subprocess, "run", _respond(commands, json.dumps(payload)))

    assert RealIssueTrackingClient().get_issue("octocat", "Hello-World", 42) is None


def test_get_issue_not_found_error_returns_none(monkeypatch: MonkeyPatch) -> None:
    """A NOT_FOUND GraphQL error makes gh exit non-zero; that means no issue."""
    commands: list[list[str]] = []
    payload = {
        "data": {"repository": {"issue": None}},
        "errors": [
            {
                "type": "NOT_FOUND",
                "path": ["repository", "issue"],
                "message": "Could not resolve to an Issue with the number of 9999.",
            }
        ],
    }
    monkeypatch.setattr(
        subprocess,
        "run",
        _respond(
            commands,
            json.dumps(payload),
            returncode=1,
            stderr="gh: Could not resolve to an Issue with the number of 9999.",
        ),
    )

    assert RealIssueTrackingClient().get_issue("octocat", "Hello-World", 9999) is None


def test_get_issue_other_failure_raises(monkeypatch: MonkeyPatch) -> None:
    commands: list[list[str]] = []
    monkeypatch.setattr(
        subprocess,
        "run",
        _respond(commands, "", returncode=4, stderr="To get started with GitHub CLI, run: gh auth"),
    )

    with pytest.raises(RemoteError, match="gh auth") as exc_info:
        RealIssueTrackingClient().get_issue("octocat", "Hello-World", 42)

    # GraphQL document is left out of the message
    assert "query=" not in str(exc_info.value)


def test_get_issue_failure_with_plain_text_output_keeps_stderr(monkeypatch: MonkeyPatch) -> None:
    """Non-JSON output on failure still reports gh's stderr and exit code."""
    commands: list[list[str]] = []
    monkeypatch.setattr(
        subprocess,
        "run",
        _respond(commands, "Bad credentials", returncode=1, stderr="HTTP 401: Bad credentials"),
    )

    with pytest.raises(RemoteError) as exc_info:
        RealIssueTrackingClient().get_issue("octocat", "Hello-World", 42)

    message = str(exc_info.value)
    assert "HTTP 401" in message
    assert "exit code 1" in message
    assert "Could not decode" not in message


def test_get_issue_failure_with_malformed_errors_raises(monkeypatch: MonkeyPatch) -> None:
    """Error entries that are not objects are treated as a failure, not as not-found."""
    commands: list[list[str]] = []
    payload = {"errors": ["something went wrong"]}
    monkeypatch.setattr(
        subprocess,
        "run",
        _respond(commands, json.dumps(payload), returncode=1, stderr="gh: something went wrong"),
    )

    with pytest.raises(RemoteError, match="something went wrong"):
        RealIssueTrackingClient().get_issue("octocat", "Hello-World", 42)


def test_get_issue_gh_not_installed(monkeypatch: MonkeyPatch) -> None:
    def mock_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
        raise FileNotFoundError("gh")

    monkeypatch.setattr(subprocess, "run", mock_run)

    with pytest.raises(RemoteError, match="Command not found: gh"):
        RealIssueTrackingClient().get_issue("octocat", "Hello-World", 42)


def test_create_comment_posts_to_rest_api(monkeypatch: MonkeyPatch) -> None:
    commands: list[list[str]] = []
    payload = {
        "html_url": "https://github.com/octocat/Hello-World/issues/42#issuecomment-1",
        "body": "Duplicate of octocat/Hello-World#15",
    }
    monkeypatch.setattr(subprocess, "run", _respond(commands, json.dumps(payload)))

    comment = RealIssueTrackingClient().create_comment(
        "octocat", "Hello-World", 42, "Duplicate of octocat/Hello-World#15"
    )

    assert comment.url.endswith("#issuecomment-1")
    assert comment.body == "Duplicate of octocat/Hello-World#15"
    assert commands[0] == [
        "gh",
        "api",
        "--method",
        "POST",
        "repos/octocat/Hello-World/issues/42/comments",
        "-f",
        "body=Duplicate of octocat/Hello-World#15",
    ]


def test_create_comment_failure_raises(monkeypatch: MonkeyPatch) -> None:
    commands: list[list[str]] = []
    monkeypatch.setattr(
        subprocess, "run", _respond(commands, "", returncode=1, stderr="HTTP 403: Forbidden")
    )

    with pytest.raises(RemoteError, match="HTTP 403"):
        RealIssueTrackingClient().create_comment("octocat", "Hello-World", 42, "body")


def test_close_issue_runs_mutation(monkeypatch: MonkeyPatch) -> None:
    commands: list[list[str]] = []
    payload = {
        "data": {
            "closeIssue": {
                "issue": {
                    "number": 42,
                    "state": "CLOSED",
                    "stateReason": "DUPLICATE",
                    "url": "https://github.com/octocat/Hello-World/issues/42",
                }
            }
        }
    }
    monkeypatch.setattr(subprocess, "run", _respond(commands, json.dumps(payload)))

    result = RealIssueTrackingClient().close_issue("I_kwDO42", CloseReason.DUPLICATE)

    assert result.number == 42
    assert result.state == "CLOSED"
    assert result.state_reason == "DUPLICATE"
    assert result.url == "https://github.com/octocat/Hello-World/issues/42"

    cmd = commands[0]
    assert "issueId=I_kwDO42" in cmd
    assert "reason=DUPLICATE" in cmd
    query = next(arg for arg in cmd if arg.startswith("query="))
    assert "closeIssue" in query
    assert "stateReason: $reason" in query


def test_close_issue_without_issue_in_response_raises(monkeypatch: MonkeyPatch) -> None:
    commands: list[list[str]] = []
    payload = {"data": {"closeIssue": None}}
    monkeypatch.setattr(subprocess, "run", _respond(commands, json.dumps(payload)))

    with pytest.raises(RemoteError, match="closeIssue returned no issue"):
        RealIssueTrackingClient().close_issue("I_kwDO42", CloseReason.DUPLICATE)


def test_undecodable_response_raises(monkeypatch: MonkeyPatch) -> None:
    commands: list[list[str]] = []
    monkeypatch.setattr(subprocess, "run", _respond(commands, "<html>oops</html>"))

    with pytest.raises(RemoteError, match="Could not decode"):
        RealIssueTrackingClient().close_issue("I_kwDO42", CloseReason.DUPLICATE)


def test_get_current_username(monkeypatch: MonkeyPatch) -> None:
    commands: list[list[str]] = []
    monkeypatch.setattr(subprocess, "run", _respond(commands, "octocat\n"))

    assert RealIssueTrackingClient().get_current_username() == "octocat"
    assert commands[0] == ["gh", "api", "user", "--jq", ".login"]


def test_get_current_username_not_authenticated(monkeypatch: MonkeyPatch) -> None:
    commands: list[list[str]] = []
    monkeypatch.setattr(subprocess, "run", _respond(commands, "", returncode=1))

    assert RealIssueTrackingClient().get_current_username() is None
