"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, prflow.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RunnerConfig(BaseModel):
    """[runner] section."""

    model_config = {"frozen": True}

    git_executable: str = "git"
    settle_delay: float = Field(default=0.0, ge=0.0)
    lock_retries: int = Field(default=3, ge=0)
    backoff_base: float = Field(default=0.5, ge=0.0)
    backoff_max: float = Field(default=4.0, ge=0.0)
    fail_fast: bool = True


class BrowserConfig(BaseModel):
    """[browser] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    open_delay: float = Field(default=2.0, ge=0.0)


class HostingConfig(BaseModel):
    """[hosting] section."""

    model_config = {"frozen": True}

    domain: str = "github.com"
    remote_name: str = "origin"


class PrflowConfig(BaseModel):
    """Shape of prflow.toml.

    Top-level keys outside the sections (CLI flag defaults) are ignored here
    and validated by the settings object instead.
    """

    model_config = {"frozen": True}

    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    hosting: HostingConfig = Field(default_factory=HostingConfig)
