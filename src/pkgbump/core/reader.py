"""Version reader - loads manifests and checks they agree on a version."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pkgbump.errors import ManifestParseError, ManifestSchemaError, NoManifestsError
from pkgbump.models import ManifestRef, PackageManifest


@dataclass
class VersionCheck:
    """Result of comparing the versions of all manifests."""

    success: bool
    version: Optional[str] = None
    manifests: list[ManifestRef] = field(default_factory=list)
    mismatched: list[ManifestRef] = field(default_factory=list)


def read_manifest(path: Path) -> ManifestRef:
    """Load a single manifest and pull out its name and version."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestParseError(f"{path} is not valid JSON: {e}", path) from e

    if not isinstance(data, dict):
        raise ManifestSchemaError(f"{path} must contain a JSON object", path)

    try:
        manifest = PackageManifest.model_validate(data)
    except ValidationError as e:
        missing = ", ".join(".".join(map(str, err["loc"])) for err in e.errors())
        raise ManifestSchemaError(f"{path} has a missing or invalid field: {missing}", path) from e

    return ManifestRef(path=path, name=manifest.name, version=manifest.version)


class VersionReader:
    """Reads every located manifest and validates their versions."""

    def read_all(self, paths: list[Path]) -> list[ManifestRef]:
        """Read manifests in order. Parse and schema errors propagate."""
        return [read_manifest(path) for path in paths]

    def check(self, paths: list[Path]) -> VersionCheck:
        """Read the manifests and compare their versions against the first one.

        Never exits the process: a mismatch is reported through the result so
        the caller decides how to present it.
        """
        if not paths:
            raise NoManifestsError("No manifest files found")

        return check_versions(self.read_all(paths))


def check_versions(manifests: list[ManifestRef]) -> VersionCheck:
    """Compare all versions to the first manifest's version by exact string equality."""
    if not manifests:
        raise NoManifestsError("No manifest files found")

    expected = manifests[0].version
    mismatched = [ref for ref in manifests if ref.version != expected]

    if mismatched:
        return VersionCheck(success=False, manifests=manifests, mismatched=mismatched)

    return VersionCheck(success=True, version=expected, manifests=manifests)
