"""Directory walker for batch conversions."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from .converter import convert_file
from .engines import Converter
from .errors import ConversionError, DirectoryAccessError
from .models import ConversionMode, ConversionOptions, ConversionResult
from .output import format_report

_LOGGER = logging.getLogger(__name__)


def convert_directory(
    dir_path: Path | str,
    mode: ConversionMode | str,
    options: Optional[ConversionOptions] = None,
    *,
    converters: Optional[Mapping[ConversionMode, Converter]] = None,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Convert every matching file under ``dir_path`` and return a report."""

    result = collect_directory(
        dir_path,
        mode,
        options,
        converters=converters,
        logger=logger,
    )
    return format_report(result)


def collect_directory(
    dir_path: Path | str,
    mode: ConversionMode | str,
    options: Optional[ConversionOptions] = None,
    *,
    converters: Optional[Mapping[ConversionMode, Converter]] = None,
    logger: Optional[logging.Logger] = None,
) -> ConversionResult:
    """Convert matching files under ``dir_path`` and return the raw result.

    Files are matched on the mode's source extension, case-insensitively.
    Each file is converted inside its own failure boundary, so one bad file
    is recorded in ``failed_files`` and the walk carries on. Only a
    directory that cannot be listed aborts the run, with
    :class:`DirectoryAccessError`.
    """

    resolved_mode = ConversionMode.from_value(mode)
    opts = options or ConversionOptions()
    log = logger or _LOGGER
    root = Path(dir_path)
    _check_directory(root)

    log.info(
        "Starting directory conversion",
        extra={
            "directory": str(root),
            "mode": resolved_mode.value,
            "recursive": opts.recursive,
            "output_dir": str(opts.output_dir) if opts.output_dir else None,
        },
    )

    result = ConversionResult()
    _walk(
        root,
        root=root,
        mode=resolved_mode,
        options=opts,
        result=result,
        converters=converters,
        logger=log,
    )

    log.info(
        "Completed directory conversion",
        extra={
            "directory": str(root),
            "success_count": result.success_count,
            "fail_count": result.fail_count,
        },
    )
    return result


def _check_directory(path: Path) -> None:
    if not path.exists():
        reason = "Directory not found"
    elif not path.is_dir():
        reason = "Not a directory"
    elif not os.access(path, os.R_OK | os.X_OK):
        reason = "Directory is not readable"
    else:
        return
    raise DirectoryAccessError(f"Error converting directory: {reason}: {path}")


def _walk(
    directory: Path,
    *,
    root: Path,
    mode: ConversionMode,
    options: ConversionOptions,
    result: ConversionResult,
    converters: Optional[Mapping[ConversionMode, Converter]],
    logger: logging.Logger,
) -> None:
    for entry in _list_entries(directory):
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            if options.recursive:
                _walk(
                    path,
                    root=root,
                    mode=mode,
                    options=options,
                    result=result,
                    converters=converters,
                    logger=logger,
                )
            continue
        if not entry.is_file(follow_symlinks=False):
            continue
        if path.suffix.lower() != mode.source_ext:
            continue
        _convert_candidate(
            path,
            root=root,
            mode=mode,
            options=options,
            result=result,
            converters=converters,
            logger=logger,
        )


def _list_entries(directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as iterator:
            return sorted(iterator, key=lambda entry: entry.name)
    except OSError as exc:
        raise DirectoryAccessError(
            f"Error converting directory: {exc}"
        ) from exc


def _convert_candidate(
    source: Path,
    *,
    root: Path,
    mode: ConversionMode,
    options: ConversionOptions,
    result: ConversionResult,
    converters: Optional[Mapping[ConversionMode, Converter]],
    logger: logging.Logger,
) -> None:
    try:
        target = _output_path_for(
            source, root=root, mode=mode, options=options
        )
        if target is not None:
            target.parent.mkdir(parents=True, exist_ok=True)
        written = convert_file(
            source,
            mode,
            target,
            options.reference_doc,
            converters=converters,
        )
    except (ConversionError, OSError) as exc:
        result.record_failure(source, str(exc))
        logger.error(
            "Failed to convert document",
            extra={"source": str(source), "reason": str(exc)},
        )
        return

    result.record_success(written)
    logger.info(
        "Converted document",
        extra={"source": str(source), "output_path": str(written)},
    )


def _output_path_for(
    source: Path,
    *,
    root: Path,
    mode: ConversionMode,
    options: ConversionOptions,
) -> Optional[Path]:
    if options.output_dir is None:
        return None
    relative = source.relative_to(root)
    return Path(options.output_dir) / relative.parent / (
        relative.stem + mode.target_ext
    )


__all__ = [
    "collect_directory",
    "convert_directory",
]
