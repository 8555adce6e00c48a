"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PUBKY_SPECS_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``pubky-specs.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`pubky_app_specs.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from pubky_app_specs.config.discovery import find_config
from pubky_app_specs.config.models import (
    BlobsConfig,
    FilesConfig,
    IdsConfig,
    PathsConfig,
    PostConfig,
    ProfileConfig,
    SpecsConfig,
    TagsConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``pubky-specs.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class SpecsSettings(BaseSettings):
    """Unified settings for the pubky-specs CLI.

    Merges CLI flags, environment variables, TOML config sections, and
    code-baked defaults into a single frozen object. Stored on the CLI
    context; the core only ever sees :attr:`config`.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PUBKY_SPECS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections (reuse the frozen protocol models) ---
    ids: IdsConfig = Field(default_factory=IdsConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    post: PostConfig = Field(default_factory=PostConfig)
    tags: TagsConfig = Field(default_factory=TagsConfig)
    files: FilesConfig = Field(default_factory=FilesConfig)
    blobs: BlobsConfig = Field(default_factory=BlobsConfig)

    @property
    def config(self) -> SpecsConfig:
        """Protocol limits injected into core operations."""
        return SpecsConfig(
            ids=self.ids,
            paths=self.paths,
            profile=self.profile,
            post=self.post,
            tags=self.tags,
            files=self.files,
            blobs=self.blobs,
        )

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
        start: Path | None = None,
        **cli_flags: Any,
    ) -> SpecsSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when it names a file, otherwise
        discovers ``pubky-specs.toml`` by walking up from *start*. CLI flags
        are merged as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
