from __future__ import annotations

import sys
from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

ROOT = TESTS_DIR.parent
SRC = str(ROOT / "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from fixtures import ConverterRecorder, WorkspaceBuilder  # noqa: E402
from office_convert.core import workspace as workspace_mod  # noqa: E402


@pytest.fixture
def workspace(tmp_path: Path) -> WorkspaceBuilder:
    """Provide a helper bound to pytest's per-test tmp directory."""

    return WorkspaceBuilder(tmp_path)


@pytest.fixture
def recorder() -> ConverterRecorder:
    """Fake converter table that writes placeholder outputs."""

    return ConverterRecorder()


@pytest.fixture(autouse=True)
def _isolated_workspace(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(workspace_mod.WORKSPACE_ENV, str(tmp_path / ".ws"))
    for key in (
        "OFFICE_CONVERT_FILECONVERTER_CONFIG",
        "OFFICE_CONVERT_OUTPUT_DIR",
        "OFFICE_CONVERT_REFERENCE_DOC",
        "OFFICE_CONVERT_RECURSIVE",
        "OFFICE_CONVERT_DELIMITER",
        "OFFICE_CONVERT_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
