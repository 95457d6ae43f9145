"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from cobolassist.config.loader import (
    PROJECT_CONFIG_DIR,
    _deep_merge,
    _load_yaml,
    load_config,
)
from cobolassist.core.errors import ConfigError, ErrorCode


@pytest.fixture
def no_global_config(tmp_path: Path):
    """Point the global config at a file that does not exist."""
    with patch("cobolassist.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield


def _write_project_config(root: Path, content: str) -> None:
    config_dir = root / PROJECT_CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.yaml").write_text(content)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("completion:\n  cache_capacity: 3\n")

        assert _load_yaml(yaml_file) == {"completion": {"cache_capacity": 3}}

    def test_returns_empty_for_yaml_null(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "null.yaml"
        yaml_file.write_text("null\n")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- one\n- two\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_nested_dicts_merge(self) -> None:
        base = {"expansion": {"timeout_sec": 10, "encoding": "latin-1"}}
        override = {"expansion": {"timeout_sec": 20}}

        assert _deep_merge(base, override) == {
            "expansion": {"timeout_sec": 20, "encoding": "latin-1"}
        }

    def test_inputs_not_mutated(self) -> None:
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})

        assert base == {"a": {"b": 1}}


@pytest.mark.usefixtures("no_global_config")
class TestLoadConfig:
    """load_config precedence tests."""

    def test_given_no_files_when_load_then_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)

        assert config.completion.cache_capacity == 1
        assert config.expansion.command == []

    def test_given_project_yaml_when_load_then_applied(self, tmp_path: Path) -> None:
        _write_project_config(
            tmp_path,
            "expansion:\n  command: [preproc, '{source}', '{target}']\n  timeout_sec: 5\n",
        )

        config = load_config(tmp_path)

        assert config.expansion.command == ["preproc", "{source}", "{target}"]
        assert config.expansion.timeout_sec == 5

    def test_given_global_and_project_when_load_then_project_wins(self, tmp_path: Path) -> None:
        global_file = tmp_path / "global.yaml"
        global_file.write_text("completion:\n  cache_capacity: 2\n  max_candidates: 50\n")
        _write_project_config(tmp_path, "completion:\n  cache_capacity: 4\n")

        with patch("cobolassist.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(tmp_path)

        assert config.completion.cache_capacity == 4
        assert config.completion.max_candidates == 50

    def test_given_env_var_when_load_then_overrides_yaml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_project_config(tmp_path, "expansion:\n  timeout_sec: 5\n")
        monkeypatch.setenv("COBOLASSIST__EXPANSION__TIMEOUT_SEC", "60")

        config = load_config(tmp_path)

        assert config.expansion.timeout_sec == 60

    def test_given_invalid_value_when_load_then_config_error(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, "completion:\n  cache_capacity: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "completion" in exc_info.value.details["field"]
