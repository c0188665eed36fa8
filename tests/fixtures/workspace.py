"""Filesystem helpers shared by tests."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, Sequence, Union

from openpyxl import Workbook

TreeValue = Union[str, bytes, "Tree", None]
Tree = Mapping[str, TreeValue]


def build_tree(base: Path, tree: Tree) -> None:
    """Create files/directories under ``base`` from a nested mapping.

    Strings/bytes become file contents, ``None`` an empty directory and
    nested mappings subdirectories.
    """

    for name, value in tree.items():
        path = base / name
        if isinstance(value, bytes):
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(value)
        elif isinstance(value, str):
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(value, encoding="utf-8")
        elif isinstance(value, Mapping):
            path.mkdir(parents=True, exist_ok=True)
            build_tree(path, value)  # type: ignore[arg-type]
        elif value is None:
            path.mkdir(parents=True, exist_ok=True)
        else:
            raise TypeError(
                f"Unsupported tree value for {path}: {type(value)!r}"
            )


@dataclass
class WorkspaceBuilder:
    """Helper bound to a tmp directory for concise tree creation."""

    root: Path

    def create(self, tree: Tree) -> Path:
        build_tree(self.root, tree)
        return self.root

    def workbook(
        self,
        relative: Union[str, Path],
        sheets: Mapping[str, Sequence[Sequence[object]]],
    ) -> Path:
        """Write a real ``.xlsx`` with one worksheet per ``sheets`` entry."""

        path = self.root / Path(relative)
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, rows in sheets.items():
            worksheet = workbook.create_sheet(title)
            for row in rows:
                worksheet.append(list(row))
        workbook.save(path)
        return path

    def files(self, pattern: str = "**/*") -> Iterator[Path]:
        return (p for p in self.root.glob(pattern) if p.is_file())
