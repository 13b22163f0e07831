"""Tests for configuration loading."""

import yaml

from sovereignty_scorer import config as config_module
from sovereignty_scorer.config import (
    AppConfig,
    find_config_file,
    get_config,
    load_config,
    reset_config,
    save_default_config,
)
from sovereignty_scorer.schema import Language


class TestDefaults:

    def test_advisor_defaults(self):
        config = AppConfig()
        assert config.advisor.provider == "google-gla"
        assert config.advisor.heavy_model == "gemini-3-pro-preview"
        assert config.advisor.light_model == "gemini-2.5-flash"
        assert config.advisor.api_key_env == "GEMINI_API_KEY"
        assert config.advisor.timeout_seconds == 60.0

    def test_ui_and_report_defaults(self):
        config = AppConfig()
        assert config.ui.default_language == Language.ES
        assert config.report.empty_note_placeholder == "---"


class TestLoadConfig:

    def test_save_and_load_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "sovereignty-config.yaml"
        save_default_config(path)

        content = path.read_text(encoding="utf-8")
        assert content.startswith("# EU Cloud Sovereignty Assessment Configuration")
        assert load_config(path) == AppConfig()

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({
            "ui": {"default_language": "en"},
            "advisor": {"light_model": "gemini-2.5-flash-lite"},
        }), encoding="utf-8")

        config = load_config(path)
        assert config.ui.default_language == Language.EN
        assert config.advisor.light_model == "gemini-2.5-flash-lite"
        assert config.advisor.heavy_model == "gemini-3-pro-preview"

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == AppConfig()

    def test_load_replaces_global_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"report": {"file_stem": "audit"}}), encoding="utf-8")
        load_config(path)
        assert get_config().report.file_stem == "audit"
        reset_config()
        assert get_config().report.file_stem == "sovereignty_assessment"


class TestFindConfigFile:

    def test_environment_variable_wins(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("{}", encoding="utf-8")
        monkeypatch.setenv("SOVEREIGNTY_CONFIG", str(path))
        assert find_config_file() == path

    def test_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        (tmp_path / "sovereignty-config.yml").write_text("{}", encoding="utf-8")
        assert find_config_file().name == "sovereignty-config.yml"

    def test_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        assert find_config_file() is None

    def test_get_config_loads_found_file(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump({"logging": {"level": "DEBUG"}}), encoding="utf-8")
        monkeypatch.setenv("SOVEREIGNTY_CONFIG", str(path))
        monkeypatch.setattr(config_module, "_config", None)
        assert get_config().logging.level == "DEBUG"
