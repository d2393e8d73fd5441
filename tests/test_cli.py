"""Tests for cli.py."""

import pytest

from concatenate import cli
from concatenate.domain.errors import RunFailedError


class TestMain:
    def test_init_writes_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["init", "--format", "json"]) == 0
        assert (tmp_path / ".concatenate" / "check.json").exists()
        assert (tmp_path / ".concatenate" / "fix.json").exists()

    def test_run_success(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".concatenate").mkdir()
        (tmp_path / ".concatenate" / "ok.yaml").write_text(
            "type: series\nactions:\n  - {id: t, label: Always, command: 'true'}\n"
        )
        assert cli.main(["ok", "--id", "t"]) == 0

    def test_run_failure_exit_code(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".concatenate").mkdir()
        (tmp_path / ".concatenate" / "bad.yaml").write_text(
            "type: series\nactions:\n  - {label: Fails, command: 'exit 1'}\n"
        )
        assert cli.main(["bad"]) == 1

    def test_missing_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(cli.AppConfig, "from_env", classmethod(lambda c: c(config_dirname="no-such-dir-xyz")))
        assert cli.main([]) == 1

    def test_passes_ids_to_runner(self, monkeypatch):
        captured = {}

        async def fake_run(self, name=None, ids=None):
            captured["name"] = name
            captured["ids"] = ids
            raise RunFailedError()

        monkeypatch.setattr(cli.CommandRunner, "run", fake_run)
        assert cli.main(["check", "-i", "lint", "-i", "a,b"]) == 1
        assert captured == {"name": "check", "ids": ["lint", "a,b"]}

    def test_id_with_comma_is_selectable(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".concatenate").mkdir()
        (tmp_path / ".concatenate" / "ok.yaml").write_text(
            "type: series\nactions:\n"
            "  - {id: 'a,b', label: Comma, command: 'touch comma.txt'}\n"
            "  - {id: c, label: Other, command: 'exit 1'}\n"
        )
        assert cli.main(["ok", "-i", "a,b"]) == 0
        assert (tmp_path / "comma.txt").exists()

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == 0
        assert "concatenate" in capsys.readouterr().out


class TestListOption:
    def test_prints_names(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        directory = tmp_path / ".concatenate"
        directory.mkdir()
        (directory / "fix.yaml").write_text("type: series\nactions: []\n")
        (directory / "check.json").write_text("{}")

        assert cli.main(["--list"]) == 0
        assert capsys.readouterr().out.split() == ["check", "fix"]

    def test_runs_nothing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".concatenate").mkdir()

        async def fail_run(self, name=None, ids=None):
            raise AssertionError("should not run")

        monkeypatch.setattr(cli.CommandRunner, "run", fail_run)
        assert cli.main(["-l"]) == 0

    def test_missing_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(cli.AppConfig, "from_env", classmethod(lambda c: c(config_dirname="no-such-dir-xyz")))
        assert cli.main(["--list"]) == 1
