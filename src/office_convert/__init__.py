"""Batch conversion of office documents between formats."""

from __future__ import annotations

from .fileconverter import (
    ConversionError,
    ConversionMode,
    ConversionOptions,
    ConversionResult,
    convert_directory,
    convert_file,
)

__all__ = [
    "ConversionError",
    "ConversionMode",
    "ConversionOptions",
    "ConversionResult",
    "convert_directory",
    "convert_file",
]
