"""Hosted repository URLs and the PR compare links derived from them."""

from __future__ import annotations

import re

from pydantic import BaseModel

from prflow.errors import InvalidRepositoryUrlError

_HTTPS = r"^https://{domain}/(?P<org>[\w.-]+)/(?P<repo>[\w.-]+?)(?:\.git)?/?$"
_SSH = r"^git@{domain}:(?P<org>[\w.-]+)/(?P<repo>[\w.-]+?)(?:\.git)?$"


class RepositoryUrl(BaseModel):
    """A repository on the hosting service, identified by org and name."""

    model_config = {"frozen": True}

    raw: str
    domain: str
    org: str
    repo: str

    @classmethod
    def parse(cls, url: str, domain: str = "github.com") -> RepositoryUrl:
        """Validate *url* against *domain* and split out org and repo.

        Accepts ``https://<domain>/<org>/<repo>[.git]`` and
        ``git@<domain>:<org>/<repo>[.git]``.

        Raises:
            InvalidRepositoryUrlError: If the URL is not on *domain*.
        """
        escaped = re.escape(domain)
        for template in (_HTTPS, _SSH):
            match = re.match(template.format(domain=escaped), url.strip())
            if match:
                return cls(
                    raw=url.strip(),
                    domain=domain,
                    org=match.group("org"),
                    repo=match.group("repo"),
                )
        raise InvalidRepositoryUrlError(
            f"{url!r} is not a repository URL on {domain}",
            url=url,
            domain=domain,
        )

    @property
    def web_url(self) -> str:
        return f"https://{self.domain}/{self.org}/{self.repo}"

    def compare_url(self, source: str, target: str) -> str:
        """Return the new-PR page for merging *source* into *target*."""
        return f"{self.web_url}/compare/{target}...{source}?expand=1"
