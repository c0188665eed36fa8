"""Configuration loader for the office document converter."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

from office_convert.core import config as core_config
from office_convert.core import workspace as workspace_mod

from .engines import DEFAULT_DELIMITER
from .models import ConversionOptions

CONFIG_FILENAME = "fileconverter.toml"
CONFIG_ENV = "OFFICE_CONVERT_FILECONVERTER_CONFIG"
ENV_PREFIX = "OFFICE_CONVERT_"

_DEFAULT_LOG_LEVEL = "INFO"


class FileConverterConfigError(RuntimeError):
    """Raised when configuration parsing or validation fails."""


@dataclass(frozen=True)
class FileConverterConfig:
    """Fully resolved configuration for a conversion run."""

    output_dir: Optional[Path]
    reference_doc: Optional[Path]
    recursive: bool
    delimiter: str
    log_level: str

    def options(self) -> ConversionOptions:
        return ConversionOptions(
            reference_doc=self.reference_doc,
            output_dir=self.output_dir,
            recursive=self.recursive,
        )


@dataclass(frozen=True)
class ConfigOverrides:
    """CLI-sourced overrides applied on top of file/env options."""

    output_dir: Optional[Path] = None
    reference_doc: Optional[Path] = None
    recursive: Optional[bool] = None
    delimiter: Optional[str] = None
    log_level: Optional[str] = None


@dataclass(frozen=True)
class LoadResult:
    """Result of loading configuration, including workspace context."""

    config: FileConverterConfig
    layout: workspace_mod.WorkspaceLayout
    config_path: Optional[Path]


def load_config(
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[ConfigOverrides] = None,
    env: Optional[Mapping[str, str]] = None,
    workspace_path: Optional[Path] = None,
) -> LoadResult:
    """Load configuration applying precedence CLI > env > TOML > defaults.

    A config file named explicitly (argument or environment variable) must
    exist; the workspace default is optional.
    """

    overrides = overrides or ConfigOverrides()
    env_map = os.environ if env is None else env

    try:
        layout = workspace_mod.ensure_workspace(
            env=env_map, path=workspace_path
        )
    except workspace_mod.WorkspaceError as exc:
        raise FileConverterConfigError(str(exc)) from exc

    requested_path, explicit = _resolve_config_path(
        config_path=config_path,
        env_map=env_map,
        default_path=layout.path_for("config") / CONFIG_FILENAME,
    )

    table = _default_table()
    loaded_path: Optional[Path] = None
    if requested_path.exists():
        loaded_path = requested_path
        try:
            core_config.merge_defaults(
                table, core_config.load_toml(requested_path)
            )
        except core_config.TomlConfigError as exc:
            raise FileConverterConfigError(str(exc)) from exc
    elif explicit:
        raise FileConverterConfigError(
            f"Config file not found: {requested_path}"
        )

    output_dir = _pick_first(
        overrides.output_dir,
        _parse_env_path(env_map, "OUTPUT_DIR"),
        _coerce_optional_path(table["paths"]["output_dir"], "output_dir"),
    )
    reference_doc = _pick_first(
        overrides.reference_doc,
        _parse_env_path(env_map, "REFERENCE_DOC"),
        _coerce_optional_path(
            table["paths"]["reference_doc"], "reference_doc"
        ),
    )
    recursive = _resolve_recursive(
        overrides.recursive,
        _parse_env_string(env_map, "RECURSIVE"),
        table["execution"]["recursive"],
    )
    delimiter = _resolve_delimiter(
        _pick_first(
            overrides.delimiter,
            _parse_env_string(env_map, "DELIMITER"),
            table["execution"]["delimiter"],
        )
    )
    log_level = _resolve_log_level(
        _pick_first(
            overrides.log_level,
            _parse_env_string(env_map, "LOG_LEVEL"),
            table["logging"]["level"],
        )
    )

    config = FileConverterConfig(
        output_dir=_absolute(output_dir),
        reference_doc=_absolute(reference_doc),
        recursive=recursive,
        delimiter=delimiter,
        log_level=log_level,
    )
    return LoadResult(config=config, layout=layout, config_path=loaded_path)


def _default_table() -> MutableMapping[str, MutableMapping[str, object]]:
    return {
        "paths": {"output_dir": None, "reference_doc": None},
        "execution": {"recursive": False, "delimiter": DEFAULT_DELIMITER},
        "logging": {"level": _DEFAULT_LOG_LEVEL},
    }


def _resolve_config_path(
    *,
    config_path: Optional[Path],
    env_map: Mapping[str, str],
    default_path: Path,
) -> tuple[Path, bool]:
    if config_path is not None:
        return config_path.expanduser(), True
    env_candidate = (env_map.get(CONFIG_ENV) or "").strip()
    if env_candidate:
        return Path(env_candidate).expanduser(), True
    return default_path, False


def _coerce_optional_path(value: object, key: str) -> Optional[Path]:
    if value is None:
        return None
    if isinstance(value, Path):
        return value
    if isinstance(value, str):
        raw = value.strip()
        return Path(raw) if raw else None
    raise FileConverterConfigError(
        f"paths.{key} must be a string when provided."
    )


def _absolute(path: object) -> Optional[Path]:
    if path is None:
        return None
    candidate = Path(path).expanduser()  # type: ignore[arg-type]
    if not candidate.is_absolute():
        candidate = Path.cwd() / candidate
    return candidate


def _resolve_recursive(
    override: Optional[bool],
    env_value: Optional[str],
    file_value: object,
) -> bool:
    if override is not None:
        return override
    candidate = env_value if env_value is not None else file_value
    try:
        return core_config.parse_bool(candidate, name="execution.recursive")
    except core_config.TomlConfigError as exc:
        raise FileConverterConfigError(str(exc)) from exc


def _resolve_delimiter(value: object) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise FileConverterConfigError(
            "execution.delimiter must be a single character."
        )
    return value


def _resolve_log_level(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise FileConverterConfigError(
            "logging.level must be a non-empty string."
        )
    return value.strip().upper()


def _parse_env_path(env_map: Mapping[str, str], key: str) -> Optional[Path]:
    raw = _parse_env_string(env_map, key)
    if raw is None:
        return None
    return Path(raw).expanduser()


def _parse_env_string(env_map: Mapping[str, str], key: str) -> Optional[str]:
    raw = env_map.get(f"{ENV_PREFIX}{key}")
    if raw is None:
        return None
    # Delimiters may legitimately be whitespace (tab).
    if key == "DELIMITER":
        return raw or None
    value = raw.strip()
    return value or None


def _pick_first(*candidates: object) -> object:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


__all__ = [
    "CONFIG_ENV",
    "CONFIG_FILENAME",
    "ENV_PREFIX",
    "ConfigOverrides",
    "FileConverterConfig",
    "FileConverterConfigError",
    "LoadResult",
    "load_config",
]
