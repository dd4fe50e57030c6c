"""Loads the optional pkgbump.yaml from the search root."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from pkgbump.errors import ConfigError
from pkgbump.models import BumpConfig

CONFIG_KEYS: set[str] = {"manifest_name", "exclude_dir"}


def load_config(root_path: Path) -> BumpConfig:
    """Build the run configuration for root_path.

    Defaults apply when pkgbump.yaml is absent. Only manifest_name and
    exclude_dir may be set in the file.
    """
    config = BumpConfig(root_path=root_path)
    if not config.config_path.exists():
        return config

    try:
        content = config.config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read {config.config_path}: {e}") from e

    if data is None:
        return config

    if not isinstance(data, dict):
        raise ConfigError(f"{config.config_path} must contain a mapping")

    unknown = set(data) - CONFIG_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in {config.config_path}: {', '.join(sorted(map(str, unknown)))}"
        )

    try:
        return BumpConfig(root_path=root_path, **data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {config.config_path}: {e}") from e
