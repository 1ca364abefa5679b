"""Subprocess helpers for running gh CLI commands."""

import logging
import subprocess

from close_dup.core.errors import RemoteError

logger = logging.getLogger(__name__)


def run_gh_command(cmd: list[str]) -> subprocess.CompletedProcess[str]:
    """Run a gh CLI command without checking its exit code.

    Args:
        cmd: Command and arguments to execute

    Returns:
        CompletedProcess with captured stdout/stderr

    Raises:
        RemoteError: If gh is not installed
    """
    logger.debug("Running: %s", " ".join(cmd))
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except FileNotFoundError as e:
        msg = f"Command not found: {cmd[0]} (is the GitHub CLI installed?)"
        raise RemoteError(msg) from e


def execute_gh_command(cmd: list[str]) -> str:
    """Execute a gh CLI command and return stdout.

    Args:
        cmd: Command and arguments to execute

    Returns:
        stdout from the command

    Raises:
        RemoteError: If the command fails or gh is not installed
    """
    result = run_gh_command(cmd)
    if result.returncode != 0:
        raise RemoteError(describe_gh_failure(cmd, result))
    return result.stdout


def describe_gh_failure(cmd: list[str], result: subprocess.CompletedProcess[str]) -> str:
    """Build an error message for a failed gh command."""
    # GraphQL documents are omitted to keep the message readable
    cmd_str = " ".join(arg for arg in cmd if not arg.startswith("query="))
    error_msg = f"Failed to execute gh command '{cmd_str}' (exit code {result.returncode})"
    if result.stderr and result.stderr.strip():
        error_msg += f": {result.stderr.strip()}"
    return error_msg
