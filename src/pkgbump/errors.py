"""Error types raised by pkgbump."""

from pathlib import Path
from typing import Optional


class PkgBumpError(Exception):
    """Base class for all pkgbump errors."""


class ConfigError(PkgBumpError):
    """pkgbump.yaml could not be read or has an invalid shape."""


class ManifestParseError(PkgBumpError):
    """A manifest is not valid JSON."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidVersionError(ManifestParseError):
    """A version string is not three dot-separated non-negative integers."""


class ManifestSchemaError(PkgBumpError):
    """A manifest is missing a required field or has the wrong type."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class NoManifestsError(PkgBumpError):
    """No manifest file was found under the search root."""


class OperatorCancelled(PkgBumpError):
    """The operator aborted the interactive prompt."""
