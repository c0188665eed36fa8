"""Workspace bootstrap helpers for office-convert commands."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, MutableMapping


WORKSPACE_ENV = "OFFICE_CONVERT_HOME"
DEFAULT_WORKSPACE = Path.home() / ".office-convert"

# Logical directory names mapped to their folder under the workspace root.
_SUBDIRS = {
    "config": "config",
    "logs": "logs",
}


class WorkspaceError(RuntimeError):
    """Raised when the workspace layout cannot be prepared."""


@dataclass(frozen=True)
class WorkspaceLayout:
    """Resolved workspace paths and creation metadata."""

    home: Path
    directories: Mapping[str, Path]
    created: Mapping[str, bool]

    def path_for(self, key: str) -> Path:
        try:
            return self.directories[key]
        except KeyError as exc:
            raise KeyError(f"Unknown workspace directory '{key}'.") from exc

    def items(self) -> tuple[tuple[str, Path], ...]:
        return tuple(self.directories.items())


def ensure_workspace(
    *,
    env: Mapping[str, str] | None = None,
    path: Path | None = None,
    create: bool = True,
) -> WorkspaceLayout:
    """Ensure the workspace exists and return its layout.

    The root is picked from ``path``, then ``OFFICE_CONVERT_HOME``, then
    ``~/.office-convert``. When the default root is not writable the
    layout falls back to a folder under the system temp directory.
    """

    env_map = os.environ if env is None else env
    base, has_override = _resolve_base(env_map, override=path)

    candidates: list[Path] = [base]
    if create and not has_override:
        fallback = _fallback_base()
        if fallback != base:
            candidates.append(fallback)

    last_error: Exception | None = None
    for candidate in candidates:
        try:
            return _materialize_layout(base=candidate, create=create)
        except PermissionError as exc:
            last_error = exc

    raise WorkspaceError(
        "Unable to prepare workspace at {0}".format(base)
    ) from last_error


def _resolve_base(
    env: Mapping[str, str], *, override: Path | None
) -> tuple[Path, bool]:
    if override is not None:
        target = override
        provided = True
    else:
        custom = (env.get(WORKSPACE_ENV) or "").strip()
        if custom:
            target = Path(custom)
            provided = True
        else:
            target = DEFAULT_WORKSPACE
            provided = False
    try:
        return target.expanduser().resolve(), provided
    except FileNotFoundError:
        return target.expanduser().absolute(), provided


def _fallback_base() -> Path:
    return Path(tempfile.gettempdir()) / "office-convert"


def _materialize_layout(*, base: Path, create: bool) -> WorkspaceLayout:
    if base.exists() and not base.is_dir():
        raise WorkspaceError(
            "Configured workspace exists and is not a directory: {0}".format(
                base
            )
        )

    created: MutableMapping[str, bool] = {
        "home": _ensure_dir(base) if create else False,
    }
    directories: MutableMapping[str, Path] = {}
    for key, relative in _SUBDIRS.items():
        candidate = base / relative
        if create:
            created[key] = _ensure_dir(candidate)
        else:
            created[key] = False
            if candidate.exists() and not candidate.is_dir():
                raise WorkspaceError(
                    "Expected workspace directory for '{0}' but found a "
                    "file: {1}".format(key, candidate)
                )
        directories[key] = candidate

    return WorkspaceLayout(
        home=base,
        directories=MappingProxyType(dict(directories)),
        created=MappingProxyType(dict(created)),
    )


def _ensure_dir(path: Path) -> bool:
    existed = path.exists()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError as exc:
        raise WorkspaceError(
            f"Expected directory but found a non-directory entry: {path}"
        ) from exc
    try:
        path.chmod(0o700)
    except (PermissionError, NotImplementedError):
        pass
    return not existed


__all__ = [
    "WORKSPACE_ENV",
    "DEFAULT_WORKSPACE",
    "WorkspaceError",
    "WorkspaceLayout",
    "ensure_workspace",
]
