"""Shared testing fixtures for the office_convert test suite."""

from .converters import ConverterRecorder  # noqa: F401
from .workspace import WorkspaceBuilder, build_tree  # noqa: F401

__all__ = [
    "ConverterRecorder",
    "WorkspaceBuilder",
    "build_tree",
]
