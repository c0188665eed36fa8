"""Conversion modes, options and the per-run result accumulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import UnsupportedModeError


@dataclass(frozen=True)
class _ModeSpec:
    label: str
    source_ext: str
    target_ext: str
    accepts_reference_doc: bool = False


class ConversionMode(Enum):
    """Supported conversion directions."""

    XLSX_TO_CSV = "xlsx-to-csv"
    CSV_TO_XLSX = "csv-to-xlsx"
    DOCX_TO_MD = "docx-to-md"
    MD_TO_DOCX = "md-to-docx"
    PPTX_TO_MD = "pptx-to-md"
    MD_TO_PPTX = "md-to-pptx"

    @classmethod
    def from_value(cls, value: "ConversionMode | str") -> "ConversionMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise UnsupportedModeError(f"Unsupported conversion mode: {value}")

    @property
    def label(self) -> str:
        return _MODE_SPECS[self].label

    @property
    def source_ext(self) -> str:
        return _MODE_SPECS[self].source_ext

    @property
    def target_ext(self) -> str:
        return _MODE_SPECS[self].target_ext

    @property
    def accepts_reference_doc(self) -> bool:
        return _MODE_SPECS[self].accepts_reference_doc


_MODE_SPECS: dict[ConversionMode, _ModeSpec] = {
    ConversionMode.XLSX_TO_CSV: _ModeSpec("XLSX to CSV", ".xlsx", ".csv"),
    ConversionMode.CSV_TO_XLSX: _ModeSpec("CSV to XLSX", ".csv", ".xlsx"),
    ConversionMode.DOCX_TO_MD: _ModeSpec("DOCX to Markdown", ".docx", ".md"),
    ConversionMode.MD_TO_DOCX: _ModeSpec(
        "Markdown to DOCX", ".md", ".docx", accepts_reference_doc=True
    ),
    ConversionMode.PPTX_TO_MD: _ModeSpec("PPTX to Markdown", ".pptx", ".md"),
    ConversionMode.MD_TO_PPTX: _ModeSpec(
        "Markdown to PPTX", ".md", ".pptx", accepts_reference_doc=True
    ),
}

MODE_CHOICES: tuple[str, ...] = tuple(mode.value for mode in ConversionMode)


@dataclass(frozen=True)
class ConversionOptions:
    """Options for a directory conversion run."""

    reference_doc: Optional[Path] = None
    output_dir: Optional[Path] = None
    recursive: bool = False


@dataclass
class ConversionResult:
    """Accumulator for a single directory conversion.

    One instance belongs to one top-level call; the traversal passes it down
    explicitly and only mutates it through ``record_success`` and
    ``record_failure``, which keep the counters in step with the collections.
    """

    success_count: int = 0
    fail_count: int = 0
    converted_files: list[Path] = field(default_factory=list)
    failed_files: dict[Path, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.success_count + self.fail_count

    def record_success(self, output_path: Path) -> None:
        self.converted_files.append(output_path)
        self.success_count += 1

    def record_failure(self, source: Path, message: str) -> None:
        if source not in self.failed_files:
            self.fail_count += 1
        self.failed_files[source] = message


__all__ = [
    "ConversionMode",
    "ConversionOptions",
    "ConversionResult",
    "MODE_CHOICES",
]
