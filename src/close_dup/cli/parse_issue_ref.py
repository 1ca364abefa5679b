"""Parse issue references from user input."""

import re

from close_dup.core.errors import FormatError
from close_dup.github.types import IssueRef

# owner and repo non-empty without "/" or "#"; number positive without sign or leading zero
ISSUE_REF_PATTERN = re.compile(r"[^/#]+/[^/#]+#[1-9][0-9]*")

EXPECTED_FORMAT = "org/repo#<issue_number>"
EXAMPLE_REF = "octocat/Hello-World#42"


def validate_issue_ref(reference: str, label: str) -> None:
    """Check that a reference has the form ``owner/repo#number``.

    Args:
        reference: Raw command-line argument
        label: Which argument this is, used in the error message

    Raises:
        FormatError: If the format does not match
    """
    if ISSUE_REF_PATTERN.fullmatch(reference) is None:
        raise FormatError(
            f"Invalid format for {label}. Expected format: {EXPECTED_FORMAT}\n"
            f"Example: {EXAMPLE_REF}"
        )


def parse_issue_ref(reference: str, label: str = "issue") -> IssueRef:
    """Parse ``owner/repo#number`` into an IssueRef.

    The number is taken after the last "#", then owner and repo are split on
    the first "/".

    Examples:
        >>> parse_issue_ref("octocat/Hello-World#42")
        IssueRef(owner='octocat', repo='Hello-World', number=42)
        >>> str(parse_issue_ref("octocat/Hello-World#42"))
        'octocat/Hello-World#42'

    Raises:
        FormatError: If the reference is malformed
    """
    validate_issue_ref(reference, label)
    repo_part, number = reference.rsplit("#", 1)
    owner, repo = repo_part.split("/", 1)
    return IssueRef(owner=owner, repo=repo, number=int(number))
