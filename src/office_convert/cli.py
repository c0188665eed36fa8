"""Unified CLI entry point for office-convert."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from importlib import import_module, metadata
from typing import Callable, Mapping, Optional, Sequence


CommandHandler = Callable[[Sequence[str]], int]


@dataclass(frozen=True)
class CommandSpec:
    """An ``office-convert`` subcommand bound to a module-level ``main``."""

    name: str
    summary: str
    module: str
    func: str = "main"

    def run(self, argv: Sequence[str]) -> int:
        module = import_module(self.module)
        handler: CommandHandler = getattr(module, self.func)
        try:
            result = handler(list(argv))
        except SystemExit as exc:
            return _normalize_system_exit(exc)
        return result if isinstance(result, int) else 0


_COMMAND_SPECS: Sequence[CommandSpec] = (
    CommandSpec(
        name="init",
        summary="Create the office-convert workspace.",
        module="office_convert.workspace.cli",
    ),
    CommandSpec(
        name="convert-file",
        summary="Convert a single document.",
        module="office_convert.fileconverter.cli",
        func="main_file",
    ),
    CommandSpec(
        name="convert-dir",
        summary="Convert every matching document in a directory.",
        module="office_convert.fileconverter.cli",
        func="main_directory",
    ),
    CommandSpec(
        name="config",
        summary="Write the default configuration template.",
        module="office_convert.fileconverter.cli",
        func="main_config",
    ),
)

COMMANDS: Mapping[str, CommandSpec] = {
    spec.name: spec for spec in _COMMAND_SPECS
}


def format_command_table() -> str:
    """Return a formatted command table for help output."""

    width = max(len(spec.name) for spec in _COMMAND_SPECS)
    lines = ["Available commands:"]
    for spec in _COMMAND_SPECS:
        lines.append(f"  {spec.name.ljust(width)}  {spec.summary}")
    return "\n".join(lines)


def format_usage() -> str:
    parts = [
        "Usage: office-convert <command> [args...]",
        "Run `office-convert list` for commands or "
        "`office-convert help <name>` for details.",
        "",
        format_command_table(),
    ]
    return "\n".join(parts)


def _print(
    text: str, *, stream: Optional[Callable[[str], object]] = None
) -> None:
    target = stream if stream is not None else sys.stdout.write
    if text:
        target(text + "\n")


def _handle_version() -> int:
    try:
        version = metadata.version("office-convert")
    except metadata.PackageNotFoundError:
        version = "unknown"
    _print(version)
    return 0


def _handle_help(argv: Sequence[str]) -> int:
    if not argv:
        _print(format_usage())
        return 0

    spec = COMMANDS.get(argv[0])
    if spec is None:
        _print(f"Unknown command '{argv[0]}'.", stream=sys.stderr.write)
        _print(format_command_table(), stream=sys.stderr.write)
        return 2

    _print(f"{spec.name}: {spec.summary}")
    _print(f"Run `office-convert {spec.name} --help` for options.")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])

    if not args:
        _print(format_usage())
        return 2

    head, *tail = args

    if head in ("-h", "--help"):
        _print(format_usage())
        return 0
    if head in ("-V", "--version", "version"):
        return _handle_version()
    if head == "list":
        _print(format_command_table())
        return 0
    if head == "help":
        return _handle_help(tail)

    spec = COMMANDS.get(head)
    if spec is not None:
        return spec.run(tail)

    _print(f"Unknown command '{head}'.", stream=sys.stderr.write)
    _print(format_command_table(), stream=sys.stderr.write)
    return 2


def _normalize_system_exit(exc: SystemExit) -> int:
    code = exc.code
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    _print(str(code), stream=sys.stderr.write)
    return 1


if __name__ == "__main__":  # pragma: no cover - manual invocation guard
    raise SystemExit(main())
