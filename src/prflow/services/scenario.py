"""The demo scenario as an ordered list of step descriptors.

Two features are branched from the same ``main`` and both append to the
shared README, so the second one conflicts with ``develop`` (and with the
release branch) once the first is merged. Those conflicts are resolved on
a disposable ``<branch>-merge-conflict`` branch cut from ``main``, keeping
the feature branch itself free of ``develop`` history. A third feature
goes through a clean release to show the ordinary path.
"""

from __future__ import annotations

from typing import Any

from prflow.domain.branches import (
    DEVELOP,
    MAIN,
    feature_branch,
    marker_filename,
    merge_conflict_branch,
    release_branch,
    release_tag,
    short_name,
)
from prflow.domain.content import README_FILENAME
from prflow.domain.steps import (
    Step,
    StepKind,
    git,
    open_pr,
    verify_remote_empty,
    write_marker,
    write_readme,
)


def setup_steps(remote_url: str, remote: str = "origin") -> list[Step]:
    """Create ``main`` and ``develop`` and publish them to an empty remote."""
    return [
        git("init", f"--initial-branch={MAIN}", label="Initialize repository"),
        write_readme(),
        git("add", README_FILENAME),
        git("commit", "-m", "Initial commit", label=f"Create {MAIN}"),
        git("checkout", "-b", DEVELOP, label=f"Create {DEVELOP}"),
        git("remote", "add", remote, remote_url, label="Register remote"),
        verify_remote_empty(label="Verify remote repository is empty"),
        git("push", "-u", remote, MAIN),
        git("push", "-u", remote, DEVELOP, label=f"Push {MAIN} and {DEVELOP}"),
    ]


def pull_steps(branch: str, remote: str = "origin") -> list[Step]:
    return [
        git("checkout", branch),
        git("pull", "--ff-only", remote, branch, label=f"Pull {branch}"),
    ]


def feature_steps(branch: str, remote: str = "origin", start: str = MAIN) -> list[Step]:
    """Branch from *start*, add a marker file and a README section, push."""
    return [
        git("checkout", start),
        git("pull", "--ff-only", remote, start),
        git("checkout", "-b", branch, label=f"Create {branch} from {start}"),
        write_marker(branch),
        write_readme(branch, label=f"Edit files on {branch}"),
        git("add", README_FILENAME, marker_filename(branch)),
        git("commit", "-m", f"Add {short_name(branch)}", label=f"Commit {branch}"),
        git("push", "-u", remote, branch, label=f"Push {branch}"),
    ]


def merge_conflict_steps(source: str, target: str, remote: str = "origin") -> list[Step]:
    """Resolve a conflicting *source* -> *target* PR on a disposable branch.

    The disposable branch starts at the current ``main``, takes *source* by
    merge, and is the one the operator resolves conflicts on. It is deleted
    remotely and locally once *target* has been pulled.
    """
    disposable = merge_conflict_branch(source)
    return [
        git("checkout", MAIN),
        git("pull", "--ff-only", remote, MAIN),
        git("checkout", "-b", disposable, label=f"Create {disposable} from {MAIN}"),
        git("merge", "--no-edit", source, label=f"Merge {source} into {disposable}"),
        git("push", "-u", remote, disposable, label=f"Push {disposable}"),
        open_pr(disposable, target, label=f"Resolve conflicts of {source} into {target}"),
        *pull_steps(target, remote),
        git("push", remote, "--delete", disposable),
        git("branch", "-D", disposable, label=f"Delete {disposable}"),
    ]


def feature_into_steps(
    branch: str,
    target: str,
    remote: str = "origin",
    *,
    conflicts: bool = False,
) -> list[Step]:
    """PR *branch* into *target*, going through a disposable branch if it conflicts."""
    if not conflicts:
        return [
            open_pr(branch, target, label=f"Pull request {branch} -> {target}"),
            *pull_steps(target, remote),
        ]
    return [
        open_pr(
            branch,
            target,
            expect_conflict=True,
            label=f"Pull request {branch} -> {target} (conflicts)",
        ),
        *merge_conflict_steps(branch, target, remote),
    ]


def release_steps(
    number: int,
    features: list[tuple[str, bool]],
    remote: str = "origin",
) -> list[Step]:
    """Build release *number* from ``(feature, conflicts)`` pairs, tag it, ship it.

    The release branch is cut from ``main``, collects each feature by PR,
    is tagged with its short name, merged into ``main``, and ``main`` is
    propagated back into ``develop``.
    """
    release = release_branch(number)
    tag = release_tag(release)
    steps = [
        git("checkout", MAIN),
        git("pull", "--ff-only", remote, MAIN),
        git("checkout", "-b", release, label=f"Create {release} from {MAIN}"),
        git("push", "-u", remote, release, label=f"Push {release}"),
    ]
    for feature, conflicts in features:
        steps.extend(feature_into_steps(feature, release, remote, conflicts=conflicts))
    steps.extend(
        [
            git("tag", "-a", tag, "-m", f"Release {tag}", label=f"Tag {tag}"),
            git("push", remote, "tag", tag, label=f"Push tag {tag}"),
            *feature_into_steps(release, MAIN, remote),
            *feature_into_steps(MAIN, DEVELOP, remote),
        ]
    )
    return steps


def build_scenario(remote_url: str, remote: str = "origin") -> list[Step]:
    """Return the full demo sequence."""
    f1, f2, f3 = (feature_branch(n) for n in (1, 2, 3))
    steps = setup_steps(remote_url, remote)
    steps += feature_steps(f1, remote)
    steps += feature_steps(f2, remote)
    steps += feature_into_steps(f1, DEVELOP, remote)
    steps += feature_into_steps(f2, DEVELOP, remote, conflicts=True)
    steps += release_steps(1, [(f1, False), (f2, True)], remote)
    steps += feature_steps(f3, remote)
    steps += feature_into_steps(f3, DEVELOP, remote)
    steps += release_steps(2, [(f3, False)], remote)
    return steps


def summarize(steps: list[Step]) -> dict[str, Any]:
    """Collect the branches, tags and pull requests a step list produces."""
    branches: list[str] = []
    deleted: list[str] = []
    tags: list[str] = []
    pull_requests = 0
    for step in steps:
        if step.kind == StepKind.OPEN_PR:
            pull_requests += 1
        elif step.kind == StepKind.GIT:
            args = step.args
            if args[:2] == ("checkout", "-b"):
                branches.append(args[2])
            elif args[:2] == ("branch", "-D"):
                deleted.append(args[2])
            elif args[:2] == ("tag", "-a"):
                tags.append(args[2])
    return {
        "branches": [b for b in branches if b not in deleted],
        "deleted_branches": deleted,
        "tags": tags,
        "pull_requests": pull_requests,
    }
