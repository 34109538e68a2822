"""Tests for config loading and validation."""

from pathlib import Path

import pytest
import yaml

from cli.config import load_config, write_default_config
from cli.config_models import JournalConfig


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config.sentiment.provider == "lexicon"
        assert config.forecast.lookback_days == 30
        assert config.paths.journal_dir == Path("~/moodjournal/journal").expanduser()

    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "paths": {"journal_dir": str(tmp_path / "j")},
                    "forecast": {"lookback_days": 14},
                    "logging": {"level": "debug"},
                }
            )
        )
        config = load_config(path)
        assert config.paths.journal_dir == tmp_path / "j"
        assert config.forecast.lookback_days == 14
        assert config.logging.level == "DEBUG"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("paths: [unclosed")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    @pytest.mark.parametrize(
        "data",
        [
            {"sentiment": {"provider": "magic"}},
            {"sentiment": {"score_scale": "percent"}},
            {"forecast": {"lookback_days": 0}},
            {"logging": {"level": "LOUD"}},
        ],
    )
    def test_validation_errors(self, tmp_path, data):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(data))
        with pytest.raises(ValueError, match="Config validation failed"):
            load_config(path)


class TestJournalConfig:
    def test_env_var_api_key(self, monkeypatch):
        monkeypatch.setenv("HF_TOKEN_FOR_TEST", "hf_secret")
        config = JournalConfig.from_dict({"sentiment": {"api_key": "${HF_TOKEN_FOR_TEST}"}})
        assert config.sentiment.api_key == "hf_secret"

    def test_literal_api_key_kept(self):
        config = JournalConfig.from_dict({"sentiment": {"api_key": "hf_literal"}})
        assert config.sentiment.api_key == "hf_literal"


class TestWriteDefaultConfig:
    def test_writes_loadable_yaml(self, tmp_path):
        path = write_default_config(tmp_path / "sub" / "config.yaml")
        assert path.exists()
        config = load_config(path)
        assert config.sentiment.provider == "lexicon"

    def test_does_not_overwrite(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("forecast:\n  lookback_days: 7\n")
        write_default_config(path)
        assert load_config(path).forecast.lookback_days == 7
