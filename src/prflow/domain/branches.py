"""Branch and tag naming conventions.

Feature branches are ``feature/f<N>``, release branches ``release/r<N>``.
A disposable branch for resolving conflicts is ``<branch>-merge-conflict``.
The release tag is the last path segment of the release branch.
"""

from __future__ import annotations

MAIN = "main"
DEVELOP = "develop"

FEATURE_PREFIX = "feature/"
RELEASE_PREFIX = "release/"
MERGE_CONFLICT_SUFFIX = "-merge-conflict"


def feature_branch(number: int) -> str:
    """Return the feature branch name for *number* (``feature/f1``)."""
    return f"{FEATURE_PREFIX}f{number}"


def release_branch(number: int) -> str:
    """Return the release branch name for *number* (``release/r1``)."""
    return f"{RELEASE_PREFIX}r{number}"


def merge_conflict_branch(branch: str) -> str:
    """Return the disposable branch used to resolve conflicts for *branch*."""
    return f"{branch}{MERGE_CONFLICT_SUFFIX}"


def short_name(branch: str) -> str:
    """Return the last path segment of *branch* (``release/r1`` -> ``r1``)."""
    return branch.rsplit("/", 1)[-1]


def release_tag(branch: str) -> str:
    """Return the tag a release branch is published under."""
    if not branch.startswith(RELEASE_PREFIX):
        msg = f"not a release branch: {branch!r}"
        raise ValueError(msg)
    return short_name(branch)


def marker_filename(branch: str) -> str:
    """Return the marker file a feature branch creates (``f1.md``)."""
    return f"{short_name(branch)}.md"

