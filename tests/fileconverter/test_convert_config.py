from __future__ import annotations

from pathlib import Path

import pytest

from office_convert.fileconverter import config as cfg
from office_convert.fileconverter.models import ConversionOptions


def test_load_config_defaults(tmp_path):
    workspace_root = tmp_path / "workspace"

    result = cfg.load_config(env={}, workspace_path=workspace_root)

    assert result.layout.home == workspace_root.resolve()
    assert result.config_path is None
    assert result.config == cfg.FileConverterConfig(
        output_dir=None,
        reference_doc=None,
        recursive=False,
        delimiter=",",
        log_level="INFO",
    )
    assert result.config.options() == ConversionOptions()


def test_load_config_reads_workspace_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    workspace_root = tmp_path / "ws"
    config_dir = workspace_root / "config"
    config_dir.mkdir(parents=True)
    config_file = config_dir / cfg.CONFIG_FILENAME
    config_file.write_text(
        """
        [paths]
        output_dir = "converted"
        reference_doc = "/styles/ref.docx"

        [execution]
        recursive = true
        delimiter = ";"

        [logging]
        level = "warning"
        """.strip()
        + "\n",
        encoding="utf-8",
    )

    result = cfg.load_config(env={}, workspace_path=workspace_root)

    assert result.config_path == config_file
    assert result.config.output_dir == tmp_path / "converted"
    assert result.config.reference_doc == Path("/styles/ref.docx")
    assert result.config.recursive is True
    assert result.config.delimiter == ";"
    assert result.config.log_level == "WARNING"
    assert result.config.options() == ConversionOptions(
        reference_doc=Path("/styles/ref.docx"),
        output_dir=tmp_path / "converted",
        recursive=True,
    )


def test_env_overrides_file(tmp_path):
    config_file = tmp_path / "custom.toml"
    config_file.write_text(
        '[execution]\nrecursive = true\ndelimiter = ","\n', encoding="utf-8"
    )
    env_map = {
        cfg.CONFIG_ENV: str(config_file),
        f"{cfg.ENV_PREFIX}OUTPUT_DIR": str(tmp_path / "env-out"),
        f"{cfg.ENV_PREFIX}RECURSIVE": "no",
        f"{cfg.ENV_PREFIX}DELIMITER": "\t",
        f"{cfg.ENV_PREFIX}LOG_LEVEL": "error",
    }

    result = cfg.load_config(env=env_map, workspace_path=tmp_path / "ws")

    assert result.config_path == config_file
    assert result.config.output_dir == tmp_path / "env-out"
    assert result.config.recursive is False
    assert result.config.delimiter == "\t"
    assert result.config.log_level == "ERROR"


def test_cli_overrides_env(tmp_path):
    env_map = {
        f"{cfg.ENV_PREFIX}OUTPUT_DIR": str(tmp_path / "env-out"),
        f"{cfg.ENV_PREFIX}REFERENCE_DOC": str(tmp_path / "env-ref.docx"),
        f"{cfg.ENV_PREFIX}RECURSIVE": "true",
    }
    overrides = cfg.ConfigOverrides(
        output_dir=tmp_path / "cli-out",
        reference_doc=tmp_path / "cli-ref.docx",
        recursive=False,
        delimiter="|",
        log_level="debug",
    )

    result = cfg.load_config(
        env=env_map, overrides=overrides, workspace_path=tmp_path / "ws"
    )

    assert result.config.output_dir == tmp_path / "cli-out"
    assert result.config.reference_doc == tmp_path / "cli-ref.docx"
    assert result.config.recursive is False
    assert result.config.delimiter == "|"
    assert result.config.log_level == "DEBUG"


def test_explicit_missing_config_raises(tmp_path):
    with pytest.raises(cfg.FileConverterConfigError) as exc_info:
        cfg.load_config(
            config_path=tmp_path / "missing.toml",
            env={},
            workspace_path=tmp_path / "ws",
        )

    assert "Config file not found" in str(exc_info.value)


def test_env_config_missing_raises(tmp_path):
    with pytest.raises(cfg.FileConverterConfigError):
        cfg.load_config(
            env={cfg.CONFIG_ENV: str(tmp_path / "nope.toml")},
            workspace_path=tmp_path / "ws",
        )


def test_unknown_keys_are_rejected(tmp_path):
    config_file = tmp_path / "bad.toml"
    config_file.write_text("[execution]\nparallel = 4\n", encoding="utf-8")

    with pytest.raises(cfg.FileConverterConfigError) as exc_info:
        cfg.load_config(
            config_path=config_file, env={}, workspace_path=tmp_path / "ws"
        )

    assert "execution.parallel" in str(exc_info.value)


def test_invalid_toml_is_reported(tmp_path):
    config_file = tmp_path / "broken.toml"
    config_file.write_text("[paths\n", encoding="utf-8")

    with pytest.raises(cfg.FileConverterConfigError) as exc_info:
        cfg.load_config(
            config_path=config_file, env={}, workspace_path=tmp_path / "ws"
        )

    assert "Failed to parse config TOML" in str(exc_info.value)


@pytest.mark.parametrize("delimiter", ["", ";;"])
def test_delimiter_must_be_single_character(tmp_path, delimiter):
    with pytest.raises(cfg.FileConverterConfigError):
        cfg.load_config(
            overrides=cfg.ConfigOverrides(delimiter=delimiter),
            env={},
            workspace_path=tmp_path / "ws",
        )


def test_invalid_recursive_value(tmp_path):
    with pytest.raises(cfg.FileConverterConfigError) as exc_info:
        cfg.load_config(
            env={f"{cfg.ENV_PREFIX}RECURSIVE": "sometimes"},
            workspace_path=tmp_path / "ws",
        )

    assert "execution.recursive" in str(exc_info.value)


def test_non_string_path_is_rejected(tmp_path):
    config_file = tmp_path / "typed.toml"
    config_file.write_text("[paths]\noutput_dir = 3\n", encoding="utf-8")

    with pytest.raises(cfg.FileConverterConfigError):
        cfg.load_config(
            config_path=config_file, env={}, workspace_path=tmp_path / "ws"
        )
