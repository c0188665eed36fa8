from __future__ import annotations

import tempfile

import pytest

from office_convert.core import workspace


def test_env_root_is_created_with_subdirectories(tmp_path, monkeypatch):
    root = tmp_path / "home"
    monkeypatch.setenv(workspace.WORKSPACE_ENV, str(root))

    layout = workspace.ensure_workspace()

    assert layout.home == root.resolve()
    assert set(layout.directories) == {"config", "logs"}
    assert layout.path_for("logs") == root.resolve() / "logs"
    assert all(path.is_dir() for _, path in layout.items())
    assert all(layout.created.values())


def test_second_call_reports_existing(tmp_path):
    root = tmp_path / "again"

    workspace.ensure_workspace(path=root)
    layout = workspace.ensure_workspace(path=root)

    assert not any(layout.created.values())


def test_explicit_path_beats_env(tmp_path, monkeypatch):
    monkeypatch.setenv(workspace.WORKSPACE_ENV, str(tmp_path / "from-env"))

    layout = workspace.ensure_workspace(path=tmp_path / "explicit")

    assert layout.home == (tmp_path / "explicit").resolve()
    assert not (tmp_path / "from-env").exists()


def test_env_mapping_is_used_when_given(tmp_path):
    env = {workspace.WORKSPACE_ENV: str(tmp_path / "mapped")}

    layout = workspace.ensure_workspace(env=env)

    assert layout.home == (tmp_path / "mapped").resolve()


def test_create_false_leaves_disk_untouched(tmp_path):
    root = tmp_path / "lazy"

    layout = workspace.ensure_workspace(path=root, create=False)

    assert not root.exists()
    assert layout.path_for("config") == root.resolve() / "config"
    assert not any(layout.created.values())


def test_file_in_place_of_root_errors(tmp_path):
    root = tmp_path / "occupied"
    root.write_text("file", encoding="utf-8")

    with pytest.raises(workspace.WorkspaceError):
        workspace.ensure_workspace(path=root)


def test_unknown_directory_key(tmp_path):
    layout = workspace.ensure_workspace(path=tmp_path / "ws", create=False)

    with pytest.raises(KeyError):
        layout.path_for("cache")


def test_default_root_falls_back_to_tempdir(tmp_path, monkeypatch):
    blocked = tmp_path / "blocked-home"
    monkeypatch.setattr(workspace, "DEFAULT_WORKSPACE", blocked)
    monkeypatch.setattr(tempfile, "gettempdir", lambda: str(tmp_path / "tmp"))
    original = workspace._ensure_dir

    def fake_ensure_dir(path):  # noqa: ANN001
        if path == blocked.resolve():
            raise PermissionError("denied")
        return original(path)

    monkeypatch.setattr(workspace, "_ensure_dir", fake_ensure_dir)

    layout = workspace.ensure_workspace(env={})

    assert layout.home == tmp_path / "tmp" / "office-convert"
    assert layout.path_for("logs").is_dir()


def test_explicit_root_does_not_fall_back(tmp_path, monkeypatch):
    target = tmp_path / "explicit"

    def deny(path):  # noqa: ANN001
        raise PermissionError("denied")

    monkeypatch.setattr(workspace, "_ensure_dir", deny)

    with pytest.raises(workspace.WorkspaceError):
        workspace.ensure_workspace(path=target)
