"""Unit tests for the layered TOML configuration loader."""

from collections.abc import Callable
from pathlib import Path

import pytest

from revisionist.config.loader import (
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    read_layer,
)
from revisionist.errors import ConfigFileError, InvalidEntityDefinitionError


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_flat_dicts(self) -> None:
        assert deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_tables(self) -> None:
        base = {"display": {"null_display": "nothing", "unknown_display": "unknown"}}
        override = {"display": {"null_display": "-"}}
        assert deep_merge(base, override) == {
            "display": {"null_display": "-", "unknown_display": "unknown"}
        }

    def test_override_replaces_non_table(self) -> None:
        assert deep_merge({"a": {"x": 1}}, {"a": "replaced"}) == {"a": "replaced"}

    def test_base_unmodified(self) -> None:
        base = {"a": {"x": 1}}
        deep_merge(base, {"a": {"y": 2}})
        assert base == {"a": {"x": 1}}


class TestReadLayer:
    """Tests for read_layer function."""

    def test_reads_valid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "test.toml"
        path.write_text('[display]\nnull_display = "none"')

        layer = read_layer(path)
        assert layer.path == path
        assert layer.data == {"display": {"null_display": "none"}}

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_layer(tmp_path / "nonexistent.toml")

    def test_invalid_toml_names_the_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("[display\nnull_display = ")

        with pytest.raises(ConfigFileError) as exc_info:
            read_layer(path)
        assert exc_info.value.path == str(path)
        assert "broken.toml" in exc_info.value.message


class TestEnvironment:
    """Tests for environment and directory discovery."""

    def test_default_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REVISIONIST_ENV", raising=False)
        assert get_environment() == "development"

    def test_environment_from_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REVISIONIST_ENV", "production")
        assert get_environment() == "production"

    def test_config_dir_from_env_var(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("REVISIONIST_CONFIG_DIR", str(test_config_dir))
        assert get_config_dir().resolve() == test_config_dir.resolve()

    def test_missing_config_dir_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("REVISIONIST_CONFIG_DIR", str(tmp_path / "missing"))
        with pytest.raises(FileNotFoundError):
            get_config_dir()

    def test_walks_up_to_directory_with_default_file(
        self,
        tmp_path: Path,
        test_config_dir: Path,
        mock_toml_files: Callable[[dict[str, str]], None],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({"default.toml": ""})
        nested = tmp_path / "app" / "module"
        nested.mkdir(parents=True)
        (nested / "config").mkdir()
        monkeypatch.delenv("REVISIONIST_CONFIG_DIR", raising=False)
        monkeypatch.chdir(nested)

        assert get_config_dir().resolve() == test_config_dir.resolve()


class TestLoadConfig:
    """Tests for load_config function."""

    def test_environment_file_overrides_default(
        self,
        test_config_dir: Path,
        mock_toml_files: Callable[[dict[str, str]], None],
    ) -> None:
        mock_toml_files({
            "default.toml": '[display]\nnull_display = "nothing"\nunknown_display = "unknown"',
            "staging.toml": '[display]\nnull_display = "n/a"',
        })

        config = load_config(environment="staging", config_dir=test_config_dir)
        assert config["display"] == {"null_display": "n/a", "unknown_display": "unknown"}

    def test_environment_file_is_optional(
        self,
        test_config_dir: Path,
        mock_toml_files: Callable[[dict[str, str]], None],
    ) -> None:
        mock_toml_files({"default.toml": '[storage]\nbackend = "inmemory"'})

        config = load_config(environment="production", config_dir=test_config_dir)
        assert config == {"storage": {"backend": "inmemory"}}

    def test_reads_env_vars_when_not_given(
        self,
        test_config_dir: Path,
        mock_toml_files: Callable[[dict[str, str]], None],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({
            "default.toml": '[actors]\nuser_entity_type = "users"',
            "staging.toml": '[actors]\nuser_entity_type = "members"',
        })
        monkeypatch.setenv("REVISIONIST_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("REVISIONIST_ENV", "staging")

        assert load_config()["actors"]["user_entity_type"] == "members"

    def test_missing_default_raises(self, test_config_dir: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(config_dir=test_config_dir)

    def test_entity_tables_merge_across_layers(
        self,
        test_config_dir: Path,
        mock_toml_files: Callable[[dict[str, str]], None],
    ) -> None:
        mock_toml_files({
            "default.toml": '[entities.posts]\nrelations = { author = "users" }',
            "staging.toml": '[entities.posts]\nsoft_deletes = true',
        })

        config = load_config(environment="staging", config_dir=test_config_dir)
        assert config["entities"]["posts"] == {
            "relations": {"author": "users"},
            "soft_deletes": True,
        }

    def test_unknown_entity_key_names_entity_and_file(
        self,
        test_config_dir: Path,
        mock_toml_files: Callable[[dict[str, str]], None],
    ) -> None:
        mock_toml_files({
            "default.toml": '[entities.posts]\nrelation = { author = "users" }',
        })

        with pytest.raises(InvalidEntityDefinitionError) as exc_info:
            load_config(environment="test", config_dir=test_config_dir)

        error = exc_info.value
        assert error.entity_type == "posts"
        assert error.sources == [str(test_config_dir / "default.toml")]
        assert "relation" in error.details

    def test_malformed_format_rule_is_rejected(
        self,
        test_config_dir: Path,
        mock_toml_files: Callable[[dict[str, str]], None],
    ) -> None:
        mock_toml_files({
            "default.toml": "",
            "staging.toml": '[entities.posts.format_rules]\npublic = "boolean"',
        })

        with pytest.raises(InvalidEntityDefinitionError) as exc_info:
            load_config(environment="staging", config_dir=test_config_dir)
        assert exc_info.value.sources == [str(test_config_dir / "staging.toml")]

    def test_entities_must_be_a_table(
        self,
        test_config_dir: Path,
        mock_toml_files: Callable[[dict[str, str]], None],
    ) -> None:
        mock_toml_files({"default.toml": 'entities = "posts"'})

        with pytest.raises(InvalidEntityDefinitionError):
            load_config(environment="test", config_dir=test_config_dir)
