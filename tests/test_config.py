from __future__ import annotations

from ei_core import config


def test_load_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SAVE_RESULTS_ENABLED", raising=False)
    monkeypatch.setattr(config, "SAVE_RESULTS_ENABLED", True, raising=False)

    assert config.load_config()["SAVE_RESULTS_ENABLED"] is True


def test_load_config_reads_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SAVE_RESULTS_ENABLED", raising=False)
    (tmp_path / "config.json").write_text('{"SAVE_RESULTS_ENABLED": false}', encoding="utf-8")

    assert config.load_config()["SAVE_RESULTS_ENABLED"] is False


def test_env_overrides_file_for_save_flag(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text('{"SAVE_RESULTS_ENABLED": true}', encoding="utf-8")

    monkeypatch.setenv("SAVE_RESULTS_ENABLED", "off")
    assert config.load_config()["SAVE_RESULTS_ENABLED"] is False

    monkeypatch.setenv("SAVE_RESULTS_ENABLED", " Yes ")
    assert config.load_config()["SAVE_RESULTS_ENABLED"] is True


def test_unreadable_config_file_falls_back(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SAVE_RESULTS_ENABLED", raising=False)
    monkeypatch.setattr(config, "SAVE_RESULTS_ENABLED", True, raising=False)
    (tmp_path / "config.json").write_text("{oops", encoding="utf-8")

    assert config.load_config()["SAVE_RESULTS_ENABLED"] is True
