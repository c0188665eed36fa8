from __future__ import annotations

from office_convert.core import workspace as workspace_mod
from office_convert.workspace import cli


def test_init_creates_workspace_from_env(tmp_path, capsys, monkeypatch):
    target = tmp_path / "workspace"
    monkeypatch.setenv(workspace_mod.WORKSPACE_ENV, str(target))

    code = cli.main([])

    captured = capsys.readouterr()
    assert code == 0
    assert f"Workspace ready at {target.resolve()} (created)" in captured.out
    assert "config" in captured.out
    assert (target / "logs").is_dir()


def test_init_reports_existing_workspace(tmp_path, capsys):
    target = tmp_path / "twice"
    cli.main(["--path", str(target)])
    capsys.readouterr()

    code = cli.main(["--path", str(target)])

    captured = capsys.readouterr()
    assert code == 0
    assert "(exists)" in captured.out
    assert "(created)" not in captured.out


def test_init_quiet_mode(tmp_path, capsys):
    code = cli.main(["--path", str(tmp_path / "quiet"), "--quiet"])

    assert code == 0
    assert capsys.readouterr().out == ""


def test_init_reports_workspace_errors(tmp_path, capsys):
    target = tmp_path / "occupied"
    target.write_text("file", encoding="utf-8")

    code = cli.main(["--path", str(target)])

    captured = capsys.readouterr()
    assert code == 1
    assert "not a directory" in captured.err
