"""Configuration management for the query compiler."""

import os
from pathlib import Path
from typing import Any

import msgspec
import yaml


class Settings(msgspec.Struct, frozen=True, kw_only=True):
    """Compiler settings.

    The defaults match the layout the indexing service writes, so most
    deployments never need a config file.
    """

    declaration_namespace: str = "declaration"
    fullname_subfield: str = "__fullname"
    fuzziness: str = "AUTO"
    cache_name_fields: bool = True


ENV_OVERRIDES = {
    "EVENTQUERY_DECLARATION_NAMESPACE": "declaration_namespace",
    "EVENTQUERY_FULLNAME_SUBFIELD": "fullname_subfield",
    "EVENTQUERY_FUZZINESS": "fuzziness",
    "EVENTQUERY_CACHE_NAME_FIELDS": "cache_name_fields",
}


class Config:
    """Configuration loading from YAML files and the environment."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the configuration file paths to check, lowest precedence first."""
        paths = []

        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "eventquery" / "config.yaml")

        paths.append(Path(".eventquery.yaml"))
        paths.append(Path("eventquery.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def load_config(paths: list[Path] | None = None) -> dict[str, Any]:
    """Load raw configuration from files and environment variables."""
    config = {}

    for path in paths if paths is not None else Config.get_config_paths():
        if path.exists():
            config = Config.merge_configs(config, Config.from_file(path))

    env_overrides = {}
    for env_name, key in ENV_OVERRIDES.items():
        if (value := os.environ.get(env_name)) is not None:
            env_overrides[key] = value

    return Config.merge_configs(config, env_overrides)


def load_settings(paths: list[Path] | None = None) -> Settings:
    """Load compiler settings.

    Raises:
        ValueError: If a config file or value is invalid
    """
    config = load_config(paths)
    try:
        # strict=False lets environment strings such as "false" become bools
        return msgspec.convert(config, Settings, strict=False)
    except msgspec.ValidationError as e:
        raise ValueError(f"Invalid compiler settings: {e}")


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
