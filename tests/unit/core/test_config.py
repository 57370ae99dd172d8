"""
Tests for the persistent configuration.
"""
import pytest
from pathlib import Path

import yaml

from genee.core.config import (
    DEFAULT_GRAPH_DAYS,
    Config,
    load_config,
    save_config,
    set_config_value,
)
from genee.core.exceptions import ConfigError
from genee.core.paths import DEFAULT_DATAFILE_PATH


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_file_gives_defaults(self, tmp_dir):
        config = load_config(tmp_dir / "config.yaml")

        assert config == Config()
        assert config.graph_days == DEFAULT_GRAPH_DAYS == 30
        assert config.past_periods == 2
        assert config.max_displayed_cols == 70
        assert config.list_previous_days == 0
        assert config.list_most_frequent_days == 5
        assert config.datafile_path == DEFAULT_DATAFILE_PATH

    def test_partial_file_keeps_other_defaults(self, tmp_dir):
        path = tmp_dir / "config.yaml"
        path.write_text("graph_days: 14\ndatafile_path: /data/habits.csv\n", encoding="utf-8")

        config = load_config(path)

        assert config.graph_days == 14
        assert config.datafile_path == Path("/data/habits.csv")
        assert config.past_periods == 2

    def test_empty_file(self, tmp_dir):
        path = tmp_dir / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == Config()

    @pytest.mark.parametrize(
        "content",
        [
            "graph_days: [1, 2\n",
            "- just\n- a list\n",
            "colour: blue\n",
            "graph_days: 0\n",
            "past_periods: many\n",
            "max_displayed_cols: true\n",
            "list_previous_days: -1\n",
        ],
    )
    def test_invalid_content(self, tmp_dir, content):
        path = tmp_dir / "config.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_list_previous_days_may_be_zero(self, tmp_dir):
        path = tmp_dir / "config.yaml"
        path.write_text("list_previous_days: 0\n", encoding="utf-8")
        assert load_config(path).list_previous_days == 0


class TestSaveConfig:
    """Tests for save_config() and Config.to_yaml()."""

    def test_round_trip(self, tmp_dir):
        path = tmp_dir / "nested" / "config.yaml"
        config = Config(datafile_path=Path("/data/habits.db"), graph_days=7)

        assert save_config(config, path) == path
        assert load_config(path) == config

    def test_writes_every_key(self, tmp_dir):
        path = save_config(Config(), tmp_dir / "config.yaml")
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert set(data) == {
            "datafile_path",
            "graph_days",
            "past_periods",
            "max_displayed_cols",
            "list_previous_days",
            "list_most_frequent_days",
        }


class TestSetConfigValue:
    """Tests for set_config_value()."""

    def test_parses_integers(self):
        config = set_config_value(Config(), "past_periods", "4")
        assert config.past_periods == 4

    def test_sets_path(self):
        config = set_config_value(Config(), "datafile_path", "/tmp/x.csv")
        assert config.datafile_path == Path("/tmp/x.csv")

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown configuration key"):
            set_config_value(Config(), "colour", "blue")

    def test_invalid_value(self):
        with pytest.raises(ConfigError):
            set_config_value(Config(), "graph_days", "zero")
