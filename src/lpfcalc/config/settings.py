"""LpfSettings: global CLI flags plus the [design] and [analysis] defaults.

Later sources only fill what earlier ones leave unset:

1. keyword arguments (the root group's flags)
2. ``LPFCALC_*`` environment variables, ``__`` for nesting
   (``LPFCALC_DESIGN__SAMPLE_PERIOD=0.001``)
3. ``lpfcalc.toml`` (explicit ``--config``, ``LPFCALC_CONFIG``, or walk-up)
4. model defaults
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from lpfcalc.config.discovery import find_config
from lpfcalc.config.models import AnalysisConfig, DesignConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings values parsed from one ``lpfcalc.toml``.

    Top-level keys map to flag fields; ``[design]`` and ``[analysis]``
    tables map to the section models. No path means an empty source.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values = _read_toml(toml_path) if toml_path is not None else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return dict(self._values)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


# Set by from_cli() for the duration of one construction.
_pending = threading.local()


class LpfSettings(BaseSettings):
    """Settings for the lpfcalc CLI, frozen after construction.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        design: Defaults for ``--order`` and ``--ts``.
        analysis: Extra frequencies reported by ``analyze``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "LPFCALC_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    design: DesignConfig = Field(default_factory=DesignConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)

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
        toml_path = getattr(_pending, "toml_path", None)
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
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> LpfSettings:
        """Build settings for one CLI invocation.

        A ``--config`` path that is not a file is ignored rather than
        rejected, matching a walk-up search that finds nothing.
        """
        toml_path = _explicit_config(config_path) if config_path else find_config(start_dir)

        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None


def _explicit_config(config_path: str) -> Path | None:
    path = Path(config_path)
    return path if path.is_file() else None
