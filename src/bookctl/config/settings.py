"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs (CLI flags passed by Click)
  2. Env vars with the ``BOOKCTL_`` prefix
  3. ``bookctl.toml`` discovered via walk-up
  4. Code defaults baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from bookctl.config.discovery import find_config
from bookctl.config.models import DatabaseConfig, RestockConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``bookctl.toml`` file discovered via walk-up."""

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
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class BookSettings(BaseSettings):
    """Settings for the bookctl CLI.

    Stored on the :class:`AppContext` at the CLI root level.

    Attributes:
        store_root: Parent of ``bookctl.toml``, or CWD if no config found.
            Relative database paths resolve against it.
        config_path: The config file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BOOKCTL_",
        "env_nested_delimiter": "__",
    }

    store_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    restock: RestockConfig = Field(default_factory=RestockConfig)

    @property
    def database_path(self) -> Path:
        """Absolute path of the SQLite file."""
        path = Path(self.database.path).expanduser()
        if not path.is_absolute():
            path = self.store_root / path
        return path

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
        store_root: Path | None = None,
        db_path: str | None = None,
        **cli_flags: Any,
    ) -> BookSettings:
        """Construct settings from a CLI invocation.

        Discovers ``bookctl.toml`` via walk-up (or explicit *config_path*),
        resolves *store_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides. *db_path*
        (``--db``) replaces the ``[database] path`` setting.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(store_root)

        resolved_root = store_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            settings = cls(
                store_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

        if db_path:
            database = settings.database.model_copy(update={"path": db_path})
            settings = settings.model_copy(update={"database": database})
        return settings
