"""Word/PowerPoint <-> Markdown converters.

Office documents are read with ``markitdown``; Markdown is rendered into
DOCX/PPTX by pandoc through ``pypandoc`` so reference documents can style
the output.
"""

from __future__ import annotations

import importlib
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from ..errors import DependencyError
from ._paths import default_output_path


def convert_docx_to_md(
    input_path: Path, output_path: Optional[Path] = None
) -> Path:
    return _office_to_markdown(Path(input_path), output_path)


def convert_pptx_to_md(
    input_path: Path, output_path: Optional[Path] = None
) -> Path:
    return _office_to_markdown(Path(input_path), output_path)


def convert_md_to_docx(
    input_path: Path,
    output_path: Optional[Path] = None,
    *,
    reference_doc: Optional[Path] = None,
) -> Path:
    return _markdown_to_office(
        Path(input_path), output_path, "docx", reference_doc
    )


def convert_md_to_pptx(
    input_path: Path,
    output_path: Optional[Path] = None,
    *,
    reference_doc: Optional[Path] = None,
) -> Path:
    return _markdown_to_office(
        Path(input_path), output_path, "pptx", reference_doc
    )


def _office_to_markdown(source: Path, output_path: Optional[Path]) -> Path:
    target = (
        Path(output_path)
        if output_path is not None
        else default_output_path(source, ".md")
    )
    result = _markitdown_engine().convert(str(source))
    markdown = _coerce_markdown_result(result)
    if markdown is None:
        raise DependencyError(
            "markitdown returned an unsupported response; "
            "expected Markdown text."
        )
    target.write_text(markdown, encoding="utf-8")
    return target


def _markdown_to_office(
    source: Path,
    output_path: Optional[Path],
    to_format: str,
    reference_doc: Optional[Path],
) -> Path:
    target = (
        Path(output_path)
        if output_path is not None
        else default_output_path(source, f".{to_format}")
    )
    extra_args: list[str] = []
    if reference_doc is not None:
        extra_args.append(f"--reference-doc={reference_doc}")

    pypandoc = _load_pypandoc()
    pypandoc.convert_file(
        str(source),
        to_format,
        format="markdown",
        outputfile=str(target),
        extra_args=extra_args,
    )
    return target


@lru_cache(maxsize=1)
def _markitdown_engine() -> Any:
    module = _import_module("markitdown", "MarkItDown")
    return module.MarkItDown()


def _load_pypandoc() -> Any:
    return _import_module("pypandoc", "convert_file")


def _import_module(module: str, required_attribute: str) -> Any:
    try:
        imported = importlib.import_module(module)
    except ImportError as exc:
        raise DependencyError(_missing_dependency_message(module)) from exc

    if not hasattr(imported, required_attribute):
        raise DependencyError(
            f"Dependency '{module}' is installed but missing the "
            f"'{required_attribute}' attribute. Upgrade or reinstall the "
            "package."
        )
    return imported


def _coerce_markdown_result(result: Any) -> str | None:
    for attribute in ("markdown", "text_content"):
        value = getattr(result, attribute, None)
        if isinstance(value, str):
            return value
    if isinstance(result, str):
        return result
    return None


def _missing_dependency_message(package: str) -> str:
    return (
        f"Dependency '{package}' is required for this conversion. "
        "Reinstall office-convert or run `pip install markitdown pypandoc`."
    )


__all__ = [
    "convert_docx_to_md",
    "convert_md_to_docx",
    "convert_md_to_pptx",
    "convert_pptx_to_md",
]
