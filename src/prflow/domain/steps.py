"""Declarative step descriptors interpreted by the scenario driver."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class StepKind(StrEnum):
    """Kinds of steps the driver knows how to execute."""

    GIT = "git"
    WRITE_README = "write_readme"
    WRITE_MARKER = "write_marker"
    VERIFY_REMOTE_EMPTY = "verify_remote_empty"
    OPEN_PR = "open_pr"


class Step(BaseModel):
    """One step of the scenario.

    Attributes:
        kind: What the driver does.
        args: Kind-specific positional arguments. For ``git`` these are the
            git arguments; for ``write_readme``/``write_marker`` the branch;
            for ``open_pr`` the source and target refs.
        label: Pause point description. Unlabeled steps never pause.
        expect_conflict: ``open_pr`` only. The PR is expected to have
            unresolvable conflicts and must not be completed.
    """

    model_config = {"frozen": True}

    kind: StepKind
    args: tuple[str, ...] = Field(default_factory=tuple)
    label: str | None = None
    expect_conflict: bool = False

    def describe(self) -> str:
        """One-line human description used in banners and the plan table."""
        if self.kind == StepKind.GIT:
            return "git " + " ".join(self.args)
        if self.kind == StepKind.OPEN_PR:
            source, target = self.args
            suffix = " (conflicts)" if self.expect_conflict else ""
            return f"pull request {source} -> {target}{suffix}"
        if self.args:
            return f"{self.kind.value} {' '.join(self.args)}"
        return self.kind.value


def git(*args: str, label: str | None = None) -> Step:
    return Step(kind=StepKind.GIT, args=args, label=label)


def write_readme(branch: str | None = None, label: str | None = None) -> Step:
    """README step. Without *branch* the README is created from scratch."""
    args = (branch,) if branch else ()
    return Step(kind=StepKind.WRITE_README, args=args, label=label)


def write_marker(branch: str, label: str | None = None) -> Step:
    return Step(kind=StepKind.WRITE_MARKER, args=(branch,), label=label)


def verify_remote_empty(label: str | None = None) -> Step:
    return Step(kind=StepKind.VERIFY_REMOTE_EMPTY, label=label)


def open_pr(
    source: str,
    target: str,
    *,
    expect_conflict: bool = False,
    label: str | None = None,
) -> Step:
    return Step(
        kind=StepKind.OPEN_PR,
        args=(source, target),
        label=label,
        expect_conflict=expect_conflict,
    )
