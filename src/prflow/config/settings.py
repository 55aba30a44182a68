"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PRFLOW_*`` prefix
  3. TOML file    — ``prflow.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from prflow.config.discovery import find_config
from prflow.config.models import BrowserConfig, HostingConfig, PrflowConfig, RunnerConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``prflow.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc
            try:
                PrflowConfig.model_validate(self._data)
            except ValidationError as exc:
                fields = ", ".join(".".join(map(str, err["loc"])) for err in exc.errors())
                msg = f"Invalid config in {toml_path}: {fields}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class PrflowSettings(BaseSettings):
    """Unified settings for the prflow CLI.

    Stored on the :class:`~prflow.commands._context.AppContext` created by
    the root group.

    Attributes:
        workdir: Directory the demo repository is built in.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PRFLOW_",
        "env_nested_delimiter": "__",
    }

    workdir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    hosting: HostingConfig = Field(default_factory=HostingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        workdir: Path | None = None,
        **cli_flags: Any,
    ) -> PrflowSettings:
        """Construct settings from a CLI invocation.

        Discovers ``prflow.toml`` via walk-up from *workdir* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(workdir)

        _tls.toml_path = toml_path
        try:
            return cls(
                workdir=workdir or Path.cwd(),
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
