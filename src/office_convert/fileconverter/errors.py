"""Exception hierarchy for office document conversion."""

from __future__ import annotations


class ConversionError(RuntimeError):
    """Base class for every conversion failure."""


class UnsupportedModeError(ConversionError):
    """Raised when a conversion mode is not one of the supported directions."""


class FileAccessError(ConversionError):
    """Raised when an input or reference document is missing or unreadable."""


class ConversionEngineError(ConversionError):
    """Raised when the underlying conversion engine fails."""


class DependencyError(ConversionEngineError):
    """Raised when an optional conversion engine is not installed."""


class DirectoryAccessError(ConversionError):
    """Raised when the directory to convert cannot be read."""


__all__ = [
    "ConversionError",
    "UnsupportedModeError",
    "FileAccessError",
    "ConversionEngineError",
    "DependencyError",
    "DirectoryAccessError",
]
