"""Pydantic models for pkgbump."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pkgbump.errors import InvalidVersionError


class IncrementKind(str, Enum):
    """Which component of the version to bump."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class Version(BaseModel):
    """A major.minor.patch version. Pre-release and build metadata are not modeled."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse "1.2.3" into a Version.

        Raises InvalidVersionError unless there are exactly three segments
        made only of decimal digits.
        """
        parts = text.split(".")
        if len(parts) != 3 or not all(part.isdigit() and part.isascii() for part in parts):
            raise InvalidVersionError(f"Invalid version format: {text!r}")

        major, minor, patch = (int(part) for part in parts)
        return cls(major=major, minor=minor, patch=patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class PackageManifest(BaseModel):
    """Schema of a package.json: name and version are required, the rest is kept as-is."""

    model_config = ConfigDict(extra="allow")

    name: str
    version: str


class ManifestRef(BaseModel):
    """A manifest found during the scan."""

    model_config = ConfigDict(frozen=True)

    path: Path
    name: str
    version: str


class BumpConfig(BaseModel):
    """Configuration for a pkgbump run."""

    root_path: Path
    manifest_name: str = "package.json"
    exclude_dir: str = "node_modules"

    @property
    def config_path(self) -> Path:
        """Get the path to the optional pkgbump.yaml."""
        return self.root_path / "pkgbump.yaml"
