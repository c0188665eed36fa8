"""CLI entry points for single-file and directory conversions."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from rich.console import Console

from office_convert.core import config_templates
from office_convert.core import workspace as workspace_mod
from office_convert.core.config_templates import ConfigTemplateError
from office_convert.core.logging import configure_logger
from office_convert.core.workspace import WorkspaceError

from .config import (
    CONFIG_FILENAME,
    ConfigOverrides,
    FileConverterConfigError,
    LoadResult,
    load_config,
)
from .converter import convert_file
from .directory import collect_directory
from .engines import build_converter_table
from .errors import ConversionError
from .models import MODE_CHOICES
from .output import format_report

LOGGER_NAME = "office_convert.fileconverter"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--mode",
        required=True,
        choices=MODE_CHOICES,
        help="Conversion direction.",
    )
    parser.add_argument(
        "--reference-doc",
        type=Path,
        help=(
            "Style template for md-to-docx and md-to-pptx (ignored by other "
            "modes)."
        ),
    )
    parser.add_argument(
        "--delimiter",
        help="CSV field delimiter for xlsx-to-csv and csv-to-xlsx.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=(
            "Path to a TOML config file (defaults to the workspace config "
            "directory)."
        ),
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        help="Override the workspace root used for config and log files.",
    )
    parser.add_argument(
        "--log-level",
        help="Set the log file level for the run (defaults to INFO).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Mirror log output to stderr.",
    )


def _build_file_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="office-convert convert-file",
        description="Convert a single office document.",
    )
    parser.add_argument("input", type=Path, help="File to convert.")
    parser.add_argument(
        "--output",
        type=Path,
        help=(
            "Output file (defaults to the input's directory with the target "
            "extension)."
        ),
    )
    _add_common_arguments(parser)
    return parser


def _build_directory_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="office-convert convert-dir",
        description=(
            "Convert every file in a directory whose extension matches the "
            "mode's source format."
        ),
        epilog=(
            "Run `office-convert config init` to scaffold the default "
            f"{CONFIG_FILENAME} template."
        ),
    )
    parser.add_argument("directory", type=Path, help="Directory to scan.")
    parser.add_argument(
        "--output-dir",
        type=Path,
        help=(
            "Root for converted files; the input tree's layout is mirrored "
            "underneath it."
        ),
    )
    parser.add_argument(
        "--recursive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Descend into subdirectories.",
    )
    _add_common_arguments(parser)
    return parser


def main_file(argv: Sequence[str] | None = None) -> int:
    parser = _build_file_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    load_result = _load(parser, args)
    config = load_result.config
    logger, _ = configure_logger(
        LOGGER_NAME,
        log_dir=load_result.layout.path_for("logs"),
        level=config.log_level,
        verbose=args.verbose,
    )

    try:
        written = convert_file(
            args.input,
            args.mode,
            args.output,
            config.reference_doc,
            converters=build_converter_table(delimiter=config.delimiter),
        )
    except ConversionError as exc:
        logger.error(
            "Failed to convert document",
            extra={"source": str(args.input), "reason": str(exc)},
        )
        _console(sys.stderr).print(str(exc))
        return 1

    logger.info(
        "Converted document",
        extra={"source": str(args.input), "output_path": str(written)},
    )
    _console(sys.stdout).print(str(written))
    return 0


def main_directory(argv: Sequence[str] | None = None) -> int:
    parser = _build_directory_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    load_result = _load(parser, args, output_dir=args.output_dir)
    config = load_result.config
    logger, log_path = configure_logger(
        LOGGER_NAME,
        log_dir=load_result.layout.path_for("logs"),
        level=config.log_level,
        verbose=args.verbose,
    )
    logger.debug("convert-dir CLI invoked", extra={"log_path": str(log_path)})

    try:
        result = collect_directory(
            args.directory,
            args.mode,
            config.options(),
            converters=build_converter_table(delimiter=config.delimiter),
            logger=logger,
        )
    except ConversionError as exc:
        logger.error(
            "Directory conversion aborted",
            extra={"directory": str(args.directory), "reason": str(exc)},
        )
        _console(sys.stderr).print(str(exc))
        return 1

    _console(sys.stdout).print(format_report(result), end="")
    return 1 if result.fail_count else 0


def _load(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    *,
    output_dir: Path | None = None,
) -> LoadResult:
    overrides = ConfigOverrides(
        output_dir=output_dir,
        reference_doc=args.reference_doc,
        recursive=getattr(args, "recursive", None),
        delimiter=args.delimiter,
        log_level=args.log_level,
    )
    try:
        return load_config(
            config_path=args.config,
            overrides=overrides,
            workspace_path=args.workspace,
        )
    except FileConverterConfigError as exc:
        parser.error(str(exc))
        raise  # pragma: no cover - parser.error exits


def _console(stream: TextIO) -> Console:
    return Console(
        file=stream,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def main_config(argv: Sequence[str] | None = None) -> int:
    parser = _build_config_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    return _handle_config_init(args)


def _build_config_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="office-convert config",
        description="Manage configuration files for office-convert.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser(
        "init",
        help=f"Write the default {CONFIG_FILENAME} template.",
    )
    init_parser.add_argument(
        "--path",
        type=Path,
        help=(
            "Destination for the config TOML (defaults to the workspace "
            "config directory)."
        ),
    )
    init_parser.add_argument(
        "--workspace",
        type=Path,
        help="Workspace root override used to resolve the default path.",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the destination if a config already exists.",
    )
    return parser


def _handle_config_init(args: argparse.Namespace) -> int:
    try:
        target = _resolve_config_target(args)
    except WorkspaceError as exc:
        sys.stderr.write(str(exc) + "\n")
        return 1

    template = config_templates.get_template("fileconverter")
    try:
        written = template.write(target, overwrite=args.force)
    except ConfigTemplateError as exc:
        sys.stderr.write(str(exc) + "\n")
        return 1

    sys.stdout.write(f"Wrote fileconverter config to {written}\n")
    return 0


def _resolve_config_target(args: argparse.Namespace) -> Path:
    if args.path is not None:
        candidate = args.path.expanduser()
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate

    layout = workspace_mod.ensure_workspace(path=args.workspace)
    return layout.path_for("config") / CONFIG_FILENAME


__all__ = ["main_config", "main_directory", "main_file"]
