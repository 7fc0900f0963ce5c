"""
Tests for environment and .env configuration.
"""

import importlib

import conference_data.config as config


def test_dotenv_in_working_directory_is_loaded(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("DEFAULT_TRACK=General\nSCHEDULE_TIMEOUT=3\n", encoding="utf-8")
    monkeypatch.setenv("DEFAULT_TRACK", "Overridden")
    monkeypatch.setenv("SCHEDULE_TIMEOUT", "99")
    monkeypatch.chdir(tmp_path)
    try:
        importlib.reload(config)
        assert config.DEFAULT_TRACK == "General"
        assert config.SCHEDULE_TIMEOUT == 3.0
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_entry_point_sees_dotenv_values(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("FAVORITES_DIR=from-dotenv\n", encoding="utf-8")
    monkeypatch.setenv("FAVORITES_DIR", "overridden")
    monkeypatch.chdir(tmp_path)
    main_module = importlib.import_module("conference_data.__main__")
    try:
        importlib.reload(config)
        importlib.reload(main_module)
        assert main_module.FAVORITES_DIR == "from-dotenv"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
        importlib.reload(main_module)
