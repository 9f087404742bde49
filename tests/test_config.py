"""Tests for settings loading."""

import json
import os

import pytest

from please.config import Settings, config_path

ENV_VARS = ("PLEASE_SCRIPT_KIND", "PLEASE_LOG_LEVEL", "PLEASE_CONFIRM_PHRASE", "PLEASE_HEURISTICS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


class TestSettings:
    """Tests for Settings.load and Settings.save."""

    def test_defaults_without_file(self, tmp_path):
        s = Settings.load(tmp_path / "missing.json")
        assert s.script_kind == "auto"
        assert s.log_level == "warning"
        assert s.confirm_phrase == "EXECUTE"
        assert s.heuristics is True

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "script_kind": "powershell",
            "log_level": "debug",
            "heuristics": False,
        }), encoding="utf-8")
        s = Settings.load(path)
        assert s.script_kind == "powershell"
        assert s.log_level == "debug"
        assert s.heuristics is False
        assert s.confirm_phrase == "EXECUTE"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"script_kind": "powershell"}), encoding="utf-8")
        monkeypatch.setenv("PLEASE_SCRIPT_KIND", "bash")
        monkeypatch.setenv("PLEASE_HEURISTICS", "off")
        s = Settings.load(path)
        assert s.script_kind == "bash"
        assert s.heuristics is False

    def test_invalid_json_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        s = Settings.load(path)
        assert s.script_kind == "auto"

    def test_non_object_json_is_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert Settings.load(path).log_level == "warning"

    def test_null_values_use_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "script_kind": None,
            "log_level": None,
            "confirm_phrase": None,
            "heuristics": None,
        }), encoding="utf-8")
        s = Settings.load(path)
        assert s.script_kind == "auto"
        assert s.log_level == "warning"
        assert s.confirm_phrase == "EXECUTE"
        assert s.heuristics is True

    def test_blank_confirm_phrase_is_replaced(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PLEASE_CONFIRM_PHRASE", "   ")
        assert Settings.load(tmp_path / "missing.json").confirm_phrase == "EXECUTE"

    def test_save_writes_json(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        Settings(script_kind="bash", confirm_phrase="RUN IT").save(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["script_kind"] == "bash"
        assert data["confirm_phrase"] == "RUN IT"
        assert Settings.load(path).confirm_phrase == "RUN IT"

    @pytest.mark.skipif(os.name == "nt", reason="Windows uses APPDATA")
    def test_default_path_uses_xdg(self, tmp_path):
        assert config_path() == tmp_path / "xdg" / "please" / "config.json"
