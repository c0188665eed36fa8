"""CLI entry point for workspace management."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Mapping, Sequence

from office_convert.core import workspace as workspace_mod


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="office-convert init",
        description=(
            "Create the office-convert workspace (config and log "
            "directories)."
        ),
    )
    parser.add_argument(
        "--path",
        type=Path,
        help=(
            f"Override the workspace root (defaults to "
            f"{workspace_mod.WORKSPACE_ENV} or ~/.office-convert)."
        ),
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress informational output on success.",
    )
    return parser


def _status(created: Mapping[str, bool], key: str) -> str:
    return "created" if created.get(key, False) else "exists"


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        layout = workspace_mod.ensure_workspace(path=args.path)
    except workspace_mod.WorkspaceError as exc:
        sys.stderr.write(str(exc) + "\n")
        return 1

    if args.quiet:
        return 0

    lines = [
        f"Workspace ready at {layout.home} "
        f"({_status(layout.created, 'home')})"
    ]
    width = max((len(name) for name in layout.directories), default=0)
    for name, directory in layout.items():
        lines.append(
            f"  {name.ljust(width)}  {directory} "
            f"({_status(layout.created, name)})"
        )
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
