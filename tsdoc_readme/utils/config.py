"""Configuration loader for the TSDoc README generator.

Loads settings from configs/config.yaml and provides typed access
to all configuration sections via dataclasses.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"


@dataclass
class ExtractionConfig:
    """Configuration for collecting and parsing source files."""

    glob: str = "packages/**/*"
    include_pattern: str = r"\.ts$"
    exclude_paths: list[str] = field(default_factory=lambda: ["node_modules"])
    include_declarations: bool = True


@dataclass
class ReadmeConfig:
    """Configuration for locating, rendering and rewriting READMEs."""

    packages_dir: str = "packages"
    file_name: str = "README.md"
    component_prefix: str = "mdc-"
    allow_list: list[str] = field(default_factory=lambda: ["mdc-drawer"])
    template: str = "api_table.j2"
    templates_dir: Optional[str] = None


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    readme: ReadmeConfig = field(default_factory=ReadmeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _build_extraction_config(data: dict) -> ExtractionConfig:
    """Build an ExtractionConfig from a dictionary.

    Args:
        data: Dictionary with extraction settings.

    Returns:
        A configured ExtractionConfig instance.
    """
    defaults = ExtractionConfig()
    return ExtractionConfig(
        glob=data.get("glob", defaults.glob),
        include_pattern=data.get("include_pattern", defaults.include_pattern),
        exclude_paths=data.get("exclude_paths", defaults.exclude_paths),
        include_declarations=data.get(
            "include_declarations", defaults.include_declarations
        ),
    )


def _build_readme_config(data: dict) -> ReadmeConfig:
    """Build a ReadmeConfig from a dictionary.

    Args:
        data: Dictionary with README settings.

    Returns:
        A configured ReadmeConfig instance.
    """
    defaults = ReadmeConfig()
    return ReadmeConfig(
        packages_dir=data.get("packages_dir", defaults.packages_dir),
        file_name=data.get("file_name", defaults.file_name),
        component_prefix=data.get("component_prefix", defaults.component_prefix),
        allow_list=data.get("allow_list", defaults.allow_list),
        template=data.get("template", defaults.template),
        templates_dir=data.get("templates_dir"),
    )


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Reads the YAML config file and constructs a fully typed AppConfig
    object. Falls back to defaults for any missing values.

    Args:
        config_path: Path to the YAML config file. If None, uses the
            default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.warning("Config file not found at %s, using defaults", path)
        return AppConfig()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    logger.info("Loaded configuration from %s", path)

    logging_data = raw.get("logging", {})
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        format=logging_data.get(
            "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ),
        file=logging_data.get("file"),
    )

    return AppConfig(
        extraction=_build_extraction_config(raw.get("extraction", {})),
        readme=_build_readme_config(raw.get("readme", {})),
        logging=logging_config,
    )
