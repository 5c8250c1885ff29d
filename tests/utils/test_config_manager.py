"""Tests for configuration loading."""

from pathlib import Path

import pytest

from ciprobe.core.constants import DEFAULT_CONFIG_FILE
from ciprobe.core.task_state_store import TaskStateStore
from ciprobe.models.task import GenericTask, GitVersionTask
from ciprobe.services.exceptions import ConfigNotFound, ConfigParseError
from ciprobe.utils.config_manager import ConfigManager, load_config


class TestConfigManager:
    """Test suite for ConfigManager."""

    def test_default_path(self):
        assert ConfigManager().config_path == Path(DEFAULT_CONFIG_FILE)

    def test_load_store(self, config_file):
        store = ConfigManager(config_file).load_store()

        assert isinstance(store, TaskStateStore)
        assert store.get_all_tasks() == [
            GitVersionTask(),
            GenericTask("dotnetcorecli"),
            GenericTask("nugetcommand"),
        ]
        assert store.is_valid_version("gitversion", "3.0.3")

    def test_load_default_file_from_working_directory(self, config_file, monkeypatch):
        monkeypatch.chdir(config_file.parent)

        store = load_config()

        assert store.is_valid_version("nugetcommand", "2.222.0")

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.yml"

        with pytest.raises(ConfigNotFound, match="Config file not found"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("task_states: [unclosed\n")

        with pytest.raises(ConfigParseError, match="Failed to parse config file"):
            load_config(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "shape.yml"
        path.write_text("task_states:\n  gitversion: []\n")

        with pytest.raises(ConfigParseError) as exc_info:
            load_config(path)

        assert "other_tasks" in str(exc_info.value)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_unquoted_versions_keep_source_text(self, tmp_path):
        """Test unquoted numeric versions are read as written."""
        path = tmp_path / "numbers.yml"
        path.write_text(
            "task_states:\n"
            "  gitversion:\n"
            "    - setup_version: 5.0\n"
            "      execute_version: 5.10\n"
            "  other_tasks:\n"
            "    build: [2]\n"
            "    DotNetCoreCLI: [2, 2.210.0, 3.10]\n"
        )

        store = load_config(path)

        assert store.other_tasks["build"] == ("2",)
        assert store.other_tasks["dotnetcorecli"] == ("2", "2.210.0", "3.10")
        assert store.is_valid_version("dotnetcorecli", "3.10")
        assert not store.is_valid_version("dotnetcorecli", "3.1")
        assert store.is_valid_version("gitversion", "5.10")

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "binary.yml"
        path.write_bytes(b"task_states:\n  gitversion: []\n  other_tasks:\n    T\xff: ['1']\n")

        with pytest.raises(ConfigParseError, match="Failed to parse config file"):
            load_config(path)

    def test_unreadable_path(self, tmp_path):
        """Test a path that exists but cannot be read as a file."""
        path = tmp_path / "config_dir.yml"
        path.mkdir()

        with pytest.raises(ConfigParseError, match="Failed to parse config file"):
            load_config(path)
