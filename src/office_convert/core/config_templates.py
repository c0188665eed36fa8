"""Packaged configuration templates for office-convert commands."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Iterable

from .config import TomlConfigError, write_toml_template

__all__ = [
    "ConfigTemplate",
    "ConfigTemplateError",
    "get_template",
    "iter_templates",
]


class ConfigTemplateError(RuntimeError):
    """Raised when a requested configuration template is not available."""


@dataclass(frozen=True)
class ConfigTemplate:
    """A TOML template shipped as package data."""

    name: str
    filename: str
    description: str
    package: str

    def read_text(self) -> str:
        try:
            resource = resources.files(self.package).joinpath(self.filename)
            return resource.read_text(encoding="utf-8")
        except (FileNotFoundError, ModuleNotFoundError) as exc:
            raise ConfigTemplateError(
                f"Template '{self.name}' is missing from {self.package}."
            ) from exc

    def write(
        self, path: Path, *, overwrite: bool = False, mode: int = 0o600
    ) -> Path:
        """Copy the template to ``path``, honouring ``overwrite``."""

        try:
            return write_toml_template(
                path,
                template=self.read_text(),
                overwrite=overwrite,
                mode=mode,
            )
        except TomlConfigError as exc:
            raise ConfigTemplateError(str(exc)) from exc


_TEMPLATES: dict[str, ConfigTemplate] = {
    "fileconverter": ConfigTemplate(
        name="fileconverter",
        filename="template.toml",
        description="Defaults for the office document converter.",
        package="office_convert.fileconverter",
    ),
}


def get_template(name: str) -> ConfigTemplate:
    """Return the template named ``name`` or raise an error."""

    try:
        return _TEMPLATES[name]
    except KeyError as exc:
        raise ConfigTemplateError(
            f"Unknown config template '{name}'."
        ) from exc


def iter_templates() -> Iterable[ConfigTemplate]:
    return tuple(_TEMPLATES.values())
