"""Public APIs for converting office documents between formats."""

from __future__ import annotations

from .config import (
    ConfigOverrides,
    FileConverterConfig,
    FileConverterConfigError,
    LoadResult,
    load_config,
)
from .converter import convert_file
from .directory import collect_directory, convert_directory
from .engines import (
    Converter,
    build_converter_table,
    convert_csv_to_xlsx,
    convert_docx_to_md,
    convert_md_to_docx,
    convert_md_to_pptx,
    convert_pptx_to_md,
    convert_xlsx_to_csv,
)
from .errors import (
    ConversionEngineError,
    ConversionError,
    DependencyError,
    DirectoryAccessError,
    FileAccessError,
    UnsupportedModeError,
)
from .models import (
    MODE_CHOICES,
    ConversionMode,
    ConversionOptions,
    ConversionResult,
)
from .output import format_report

__all__ = [
    "ConfigOverrides",
    "FileConverterConfig",
    "FileConverterConfigError",
    "LoadResult",
    "load_config",
    "convert_file",
    "collect_directory",
    "convert_directory",
    "Converter",
    "build_converter_table",
    "convert_csv_to_xlsx",
    "convert_docx_to_md",
    "convert_md_to_docx",
    "convert_md_to_pptx",
    "convert_pptx_to_md",
    "convert_xlsx_to_csv",
    "ConversionEngineError",
    "ConversionError",
    "DependencyError",
    "DirectoryAccessError",
    "FileAccessError",
    "UnsupportedModeError",
    "MODE_CHOICES",
    "ConversionMode",
    "ConversionOptions",
    "ConversionResult",
    "format_report",
]
