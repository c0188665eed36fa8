"""Single-file dispatch onto the per-mode converter table."""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Mapping, Optional

from .engines import Converter, build_converter_table
from .errors import (
    ConversionEngineError,
    ConversionError,
    FileAccessError,
)
from .models import ConversionMode

_ACCESS_ERRNOS = frozenset({errno.ENOENT, errno.EACCES, errno.EPERM})


def convert_file(
    input_path: Path | str,
    mode: ConversionMode | str,
    output_path: Optional[Path | str] = None,
    reference_doc: Optional[Path | str] = None,
    *,
    converters: Optional[Mapping[ConversionMode, Converter]] = None,
) -> Path:
    """Convert ``input_path`` according to ``mode`` and return the output path.

    ``reference_doc`` is only forwarded to the Markdown -> DOCX/PPTX modes.
    ``output_path`` is passed through untouched, so ``None`` lets the
    converter write next to the input. The input (and reference document,
    when used) is checked before any converter runs; converter failures are
    re-raised as :class:`FileAccessError` or :class:`ConversionEngineError`
    with an ``Error converting <direction>:`` prefix.
    """

    resolved_mode = ConversionMode.from_value(mode)
    source = Path(input_path)
    _check_readable(source, resolved_mode, "Input file")

    keywords: dict[str, Path] = {}
    if resolved_mode.accepts_reference_doc and reference_doc is not None:
        reference = Path(reference_doc)
        _check_readable(reference, resolved_mode, "Reference document")
        keywords["reference_doc"] = reference

    table = converters if converters is not None else build_converter_table()
    converter = table[resolved_mode]
    target = Path(output_path) if output_path is not None else None

    try:
        return converter(source, target, **keywords)
    except ConversionError as exc:
        raise type(exc)(_prefixed(resolved_mode, exc)) from exc
    except OSError as exc:
        error_type = (
            FileAccessError
            if exc.errno in _ACCESS_ERRNOS
            else ConversionEngineError
        )
        raise error_type(_prefixed(resolved_mode, exc)) from exc
    except Exception as exc:
        raise ConversionEngineError(_prefixed(resolved_mode, exc)) from exc


def _check_readable(path: Path, mode: ConversionMode, what: str) -> None:
    if not path.exists():
        reason = f"{what} not found: {path}"
    elif not path.is_file():
        reason = f"{what} is not a file: {path}"
    elif not os.access(path, os.R_OK):
        reason = f"{what} is not readable: {path}"
    else:
        return
    raise FileAccessError(f"Error converting {mode.label}: {reason}")


def _prefixed(mode: ConversionMode, exc: BaseException) -> str:
    message = str(exc) or type(exc).__name__
    return f"Error converting {mode.label}: {message}"


__all__ = ["convert_file"]
