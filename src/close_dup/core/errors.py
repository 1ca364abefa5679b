"""Error taxonomy for closing issues as duplicates.

Every failure the command can report derives from CloseDuplicateError. The CLI
catches the base class once, prints an ``Error:`` line and exits with status 1.
None of these errors are retried.
"""


class CloseDuplicateError(Exception):
    """Base class for all user-facing failures."""


class UsageError(CloseDuplicateError):
    """Wrong number of positional arguments."""


class FormatError(CloseDuplicateError):
    """Issue identifier does not match ``owner/repo#number``."""


class NotFoundError(CloseDuplicateError):
    """Issue lookup returned nothing."""


class StateConflictError(CloseDuplicateError):
    """Issue is already closed and the operator declined to continue."""


class RemoteError(CloseDuplicateError, RuntimeError):
    """Failure reported by the issue tracking service.

    Covers permission errors, connectivity failures, a missing ``gh`` binary and
    responses that cannot be decoded.
    """


class ConfigError(CloseDuplicateError):
    """Configuration file is malformed."""
