from __future__ import annotations

from pathlib import Path


def default_output_path(source: Path, target_ext: str) -> Path:
    """Return ``source`` with its extension replaced by ``target_ext``."""

    return source.with_name(f"{source.stem}{target_ext}")
