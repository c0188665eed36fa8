"""Converter functions for each supported direction.

Every converter follows the same shape::

    converter(input_path, output_path=None, **keywords) -> Path

where ``output_path`` defaults to the input's directory and stem with the
target extension, and the returned path is the file actually written.
"""

from __future__ import annotations

from functools import partial
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping

from ..models import ConversionMode
from .markup import (
    convert_docx_to_md,
    convert_md_to_docx,
    convert_md_to_pptx,
    convert_pptx_to_md,
)
from .tabular import (
    DEFAULT_DELIMITER,
    SHEET_SPLIT_THRESHOLD,
    convert_csv_to_xlsx,
    convert_xlsx_to_csv,
)

Converter = Callable[..., Path]


def build_converter_table(
    *, delimiter: str = DEFAULT_DELIMITER
) -> Mapping[ConversionMode, Converter]:
    """Return the read-only ``mode -> converter`` table.

    ``delimiter`` is bound into the two tabular converters so the table
    exposes one calling convention for every mode.
    """

    return MappingProxyType(
        {
            ConversionMode.XLSX_TO_CSV: partial(
                convert_xlsx_to_csv, delimiter=delimiter
            ),
            ConversionMode.CSV_TO_XLSX: partial(
                convert_csv_to_xlsx, delimiter=delimiter
            ),
            ConversionMode.DOCX_TO_MD: convert_docx_to_md,
            ConversionMode.MD_TO_DOCX: convert_md_to_docx,
            ConversionMode.PPTX_TO_MD: convert_pptx_to_md,
            ConversionMode.MD_TO_PPTX: convert_md_to_pptx,
        }
    )


__all__ = [
    "Converter",
    "DEFAULT_DELIMITER",
    "SHEET_SPLIT_THRESHOLD",
    "build_converter_table",
    "convert_csv_to_xlsx",
    "convert_docx_to_md",
    "convert_md_to_docx",
    "convert_md_to_pptx",
    "convert_pptx_to_md",
    "convert_xlsx_to_csv",
]
