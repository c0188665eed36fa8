"""TOML configuration helpers shared by office-convert commands."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Mapping, MutableMapping

__all__ = [
    "TomlConfigError",
    "load_toml",
    "merge_defaults",
    "parse_bool",
    "write_toml_template",
]

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


class TomlConfigError(RuntimeError):
    """Raised when TOML config IO or validation fails."""


def load_toml(path: Path) -> Mapping[str, Any]:
    """Parse the TOML document at ``path``.

    Missing files and syntax errors both surface as
    :class:`TomlConfigError` so command-level loaders can translate them
    into their own error type.
    """

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError as exc:
        raise TomlConfigError(f"Config file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise TomlConfigError(f"Failed to parse config TOML: {exc}") from exc


def merge_defaults(
    base: MutableMapping[str, Any],
    override: Mapping[str, Any],
    *,
    prefix: str = "",
) -> None:
    """Merge ``override`` into ``base`` in place, rejecting unknown keys."""

    for key, value in override.items():
        dotted = f"{prefix}{key}"
        if key not in base:
            raise TomlConfigError(f"Unknown configuration key '{dotted}'.")
        current = base[key]
        if isinstance(current, MutableMapping):
            if not isinstance(value, Mapping):
                raise TomlConfigError(
                    "Expected table for '{0}', found {1}.".format(
                        dotted, type(value).__name__
                    )
                )
            merge_defaults(current, value, prefix=f"{dotted}.")
        else:
            base[key] = value


def parse_bool(value: object, *, name: str) -> bool:
    """Coerce TOML/env flag values (``true``, ``"yes"``, ``0``...) to bool."""

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise TomlConfigError(f"{name} must be a boolean, got {value!r}.")


def write_toml_template(
    path: Path,
    *,
    template: str,
    overwrite: bool = False,
    mode: int = 0o600,
) -> Path:
    """Write ``template`` to ``path``, refusing to replace an existing file."""

    if path.exists() and not overwrite:
        raise TomlConfigError(f"Config already exists: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(template, encoding="utf-8")
    try:
        path.chmod(mode)
    except PermissionError:  # pragma: no cover - depends on filesystem
        pass
    return path
