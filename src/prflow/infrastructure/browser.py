"""Pull-request launcher: the hand-off point between script and operator.

The operator has to complete (or deliberately abandon) each PR in the
hosting service's web UI before the script goes on to pull the affected
branch, so every launch blocks on input.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

import click

from prflow.config.models import BrowserConfig
from prflow.domain.repository import RepositoryUrl

logger = logging.getLogger(__name__)

COMPLETE_MESSAGE = "Please complete the pull request {source} -> {target} in the browser."
CONFLICT_MESSAGE = (
    "The pull request {source} -> {target} will have merge conflicts. "
    "Do NOT complete it; just look at it and close the tab."
)


def wait_for_enter(message: str) -> None:
    """Block until the operator presses Enter."""
    click.prompt(message, default="", show_default=False, prompt_suffix=" ")


class PullRequestLauncher:
    """Open compare pages for a repository and wait for the operator."""

    def __init__(
        self,
        repository: RepositoryUrl,
        config: BrowserConfig | None = None,
        *,
        echo: Callable[..., None] = click.echo,
        prompt: Callable[[str], None] = wait_for_enter,
        launch: Callable[[str], object] = click.launch,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._repository = repository
        self._config = config or BrowserConfig()
        self._echo = echo
        self._prompt = prompt
        self._launch = launch
        self._sleep = sleep

    def launch(self, source: str, target: str, *, expect_conflict: bool = False) -> str:
        """Announce, open, and wait on the PR from *source* into *target*.

        Returns the compare URL that was opened.
        """
        url = self._repository.compare_url(source, target)
        template = CONFLICT_MESSAGE if expect_conflict else COMPLETE_MESSAGE
        self._echo(template.format(source=source, target=target))
        self._echo(url)

        if self._config.open_delay:
            self._sleep(self._config.open_delay)
        if self._config.enabled:
            logger.debug("opening %s", url)
            self._launch(url)

        if expect_conflict:
            self._prompt("Press Enter once you have seen the conflict...")
        else:
            self._prompt("Press Enter once the pull request is completed...")
        return url
