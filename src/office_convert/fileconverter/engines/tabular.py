"""Spreadsheet <-> CSV converters backed by openpyxl."""

from __future__ import annotations

import csv
import re
from pathlib import Path
from typing import Iterable, Optional

from openpyxl import Workbook, load_workbook

from ._paths import default_output_path

# Workbooks with more sheets than this are split into one CSV per sheet.
SHEET_SPLIT_THRESHOLD = 2
DEFAULT_DELIMITER = ","

# Values with leading zeros such as "007" are kept as text.
_INT_PATTERN = re.compile(r"^[+-]?(0|[1-9]\d*)$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(0|[1-9]\d*)\.\d+$")


def convert_xlsx_to_csv(
    input_path: Path,
    output_path: Optional[Path] = None,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> Path:
    """Write the workbook at ``input_path`` as CSV and return the file written.

    Workbooks with more than :data:`SHEET_SPLIT_THRESHOLD` sheets produce
    ``{stem}_sheet{N}.csv`` files next to the resolved output path, and the
    first of those is returned. Smaller workbooks write their active sheet
    to the output path itself.
    """

    source = Path(input_path)
    target = (
        Path(output_path)
        if output_path is not None
        else default_output_path(source, ".csv")
    )

    workbook = load_workbook(source, read_only=True, data_only=True)
    try:
        sheets = [workbook[name] for name in workbook.sheetnames]
        if len(sheets) <= SHEET_SPLIT_THRESHOLD:
            active = workbook.active
            _write_rows(active.iter_rows(values_only=True), target, delimiter)
            return target

        written: list[Path] = []
        for index, sheet in enumerate(sheets, start=1):
            sheet_path = target.with_name(f"{target.stem}_sheet{index}.csv")
            _write_rows(
                sheet.iter_rows(values_only=True), sheet_path, delimiter
            )
            written.append(sheet_path)
        return written[0]
    finally:
        workbook.close()


def convert_csv_to_xlsx(
    input_path: Path,
    output_path: Optional[Path] = None,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> Path:
    """Load a delimited text file into a single ``sheet1`` worksheet."""

    source = Path(input_path)
    target = (
        Path(output_path)
        if output_path is not None
        else default_output_path(source, ".xlsx")
    )

    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "sheet1"
    with source.open("r", encoding="utf-8-sig", newline="") as handle:
        for row in csv.reader(handle, delimiter=delimiter):
            worksheet.append([_coerce_cell(value) for value in row])
    workbook.save(target)
    return target


def _write_rows(
    rows: Iterable[tuple[object, ...]], target: Path, delimiter: str
) -> None:
    with target.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, delimiter=delimiter, lineterminator="\n")
        for row in rows:
            writer.writerow(["" if value is None else value for value in row])


def _coerce_cell(value: str) -> object:
    stripped = value.strip()
    if _INT_PATTERN.match(stripped):
        return int(stripped)
    if _FLOAT_PATTERN.match(stripped):
        return float(stripped)
    return value


__all__ = [
    "DEFAULT_DELIMITER",
    "SHEET_SPLIT_THRESHOLD",
    "convert_csv_to_xlsx",
    "convert_xlsx_to_csv",
]
