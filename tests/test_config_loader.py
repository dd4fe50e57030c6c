"""Tests for pkgbump.yaml loading."""

from pathlib import Path

import pytest

from pkgbump.core.config_loader import load_config
from pkgbump.errors import ConfigError


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self, temp_workspace: Path) -> None:
        """Test that package.json and node_modules are the defaults."""
        config = load_config(temp_workspace)

        assert config.root_path == temp_workspace
        assert config.manifest_name == "package.json"
        assert config.exclude_dir == "node_modules"

    def test_overrides(self, temp_workspace: Path) -> None:
        """Test that values from pkgbump.yaml are applied."""
        (temp_workspace / "pkgbump.yaml").write_text(
            "manifest_name: composer.json\nexclude_dir: vendor\n"
        )

        config = load_config(temp_workspace)

        assert config.manifest_name == "composer.json"
        assert config.exclude_dir == "vendor"

    def test_empty_file(self, temp_workspace: Path) -> None:
        """Test that an empty file means defaults."""
        (temp_workspace / "pkgbump.yaml").write_text("")

        assert load_config(temp_workspace).manifest_name == "package.json"

    def test_unknown_key(self, temp_workspace: Path) -> None:
        """Test that unknown keys are rejected."""
        (temp_workspace / "pkgbump.yaml").write_text("exclude_dirs: [vendor]\n")

        with pytest.raises(ConfigError, match="exclude_dirs"):
            load_config(temp_workspace)

    def test_not_a_mapping(self, temp_workspace: Path) -> None:
        """Test that a list document is rejected."""
        (temp_workspace / "pkgbump.yaml").write_text("- package.json\n")

        with pytest.raises(ConfigError):
            load_config(temp_workspace)

    def test_malformed_yaml(self, temp_workspace: Path) -> None:
        """Test that broken YAML is a ConfigError."""
        (temp_workspace / "pkgbump.yaml").write_text("manifest_name: [unclosed\n")

        with pytest.raises(ConfigError):
            load_config(temp_workspace)

    def test_wrong_type(self, temp_workspace: Path) -> None:
        """Test that a non-string value is rejected."""
        (temp_workspace / "pkgbump.yaml").write_text("exclude_dir: [a, b]\n")

        with pytest.raises(ConfigError):
            load_config(temp_workspace)
