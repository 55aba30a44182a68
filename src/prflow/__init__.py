"""prflow — drive a PR-based branching workflow demo against GitHub."""

__version__ = "0.1.0"
