"""Tests for configuration loading and validation."""

from pathlib import Path

import yaml

from tsdoc_readme.utils.config import (
    AppConfig,
    ExtractionConfig,
    LoggingConfig,
    ReadmeConfig,
    load_config,
)


class TestExtractionConfig:
    """Tests for ExtractionConfig defaults."""

    def test_defaults(self) -> None:
        config = ExtractionConfig()
        assert config.glob == "packages/**/*"
        assert config.include_pattern == r"\.ts$"
        assert config.exclude_paths == ["node_modules"]
        assert config.include_declarations is True


class TestReadmeConfig:
    """Tests for ReadmeConfig defaults."""

    def test_defaults(self) -> None:
        config = ReadmeConfig()
        assert config.packages_dir == "packages"
        assert config.file_name == "README.md"
        assert config.component_prefix == "mdc-"
        assert config.allow_list == ["mdc-drawer"]
        assert config.template == "api_table.j2"
        assert config.templates_dir is None

    def test_allow_lists_not_shared(self) -> None:
        first = ReadmeConfig()
        first.allow_list.append("mdc-list")
        assert ReadmeConfig().allow_list == ["mdc-drawer"]


class TestAppConfigDefaults:
    """Tests for AppConfig with all defaults."""

    def test_default_construction(self) -> None:
        config = AppConfig()
        assert isinstance(config.extraction, ExtractionConfig)
        assert isinstance(config.readme, ReadmeConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_default_logging_level(self) -> None:
        config = AppConfig()
        assert config.logging.level == "INFO"
        assert config.logging.file is None


class TestLoadConfig:
    """Tests for the load_config function."""

    def test_load_default_config(self) -> None:
        config = load_config()
        assert isinstance(config, AppConfig)
        assert config.readme.allow_list == ["mdc-drawer"]

    def test_default_config_matches_defaults(self) -> None:
        config = load_config()
        assert config.extraction == ExtractionConfig()
        assert config.readme == ReadmeConfig()

    def test_load_from_explicit_path(self, tmp_path: Path) -> None:
        config_data = {
            "extraction": {"include_declarations": False, "exclude_paths": ["dist"]},
            "readme": {"allow_list": ["mdc-drawer", "mdc-textfield"]},
            "logging": {"level": "DEBUG"},
        }
        config_file = tmp_path / "test_config.yaml"
        with open(config_file, "w") as f:
            yaml.dump(config_data, f)

        config = load_config(str(config_file))
        assert config.extraction.include_declarations is False
        assert config.extraction.exclude_paths == ["dist"]
        assert config.extraction.glob == "packages/**/*"
        assert config.readme.allow_list == ["mdc-drawer", "mdc-textfield"]
        assert config.readme.file_name == "README.md"
        assert config.logging.level == "DEBUG"

    def test_load_nonexistent_returns_defaults(self, tmp_path: Path) -> None:
        config = load_config(str(tmp_path / "nonexistent.yaml"))
        assert isinstance(config, AppConfig)
        assert config.readme.component_prefix == "mdc-"

    def test_load_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        config = load_config(str(config_file))
        assert isinstance(config, AppConfig)
        assert config.extraction.include_pattern == r"\.ts$"
