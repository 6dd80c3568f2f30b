import json

from typer.testing import CliRunner

from savereminder.cli import app

runner = CliRunner()


def test_preview_prints_warning():
    result = runner.invoke(app, ["preview", "90065"])
    assert result.exit_code == 0
    assert "1d 1h 1m 5s" in result.output


def test_settings_reset_and_show(tmp_path, monkeypatch):
    monkeypatch.setenv("SAVE_REMINDER_HOME", str(tmp_path))
    monkeypatch.setenv("SAVE_REMINDER_BACKEND", "json")

    assert runner.invoke(app, ["reset"]).exit_code == 0
    assert (tmp_path / "config" / "preferences.json").exists()

    result = runner.invoke(app, ["settings", "warning_time_seconds"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"warning_time_seconds": 600}


def test_unknown_setting_fails(tmp_path, monkeypatch):
    monkeypatch.setenv("SAVE_REMINDER_HOME", str(tmp_path))
    monkeypatch.setenv("SAVE_REMINDER_BACKEND", "memory")
    result = runner.invoke(app, ["settings", "nope"])
    assert result.exit_code == 1
