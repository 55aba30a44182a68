"""Exception hierarchy for prflow.

Every error carries a machine-readable ``code`` that services copy into
:class:`~prflow.services.result.ServiceError`.
"""

from __future__ import annotations


class PrflowError(Exception):
    """Base class for all prflow errors."""

    code = "PRFLOW_ERROR"

    def __init__(self, message: str, **detail: object) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidRepositoryUrlError(PrflowError):
    """The repository URL does not point at the configured hosting domain."""

    code = "INVALID_REPOSITORY_URL"


class RemoteNotEmptyError(PrflowError):
    """The remote already has branches; the demo needs a fresh repository."""

    code = "REMOTE_NOT_EMPTY"


class GitCommandError(PrflowError):
    """A git invocation exited non-zero."""

    code = "GIT_FAILED"

    def __init__(self, args: list[str], returncode: int, stderr: str = "") -> None:
        cmd = " ".join(args)
        super().__init__(
            f"'{cmd}' exited with status {returncode}",
            command=cmd,
            returncode=returncode,
            stderr=stderr.strip(),
        )
        self.returncode = returncode
        self.stderr = stderr
