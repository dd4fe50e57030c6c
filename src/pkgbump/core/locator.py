"""Manifest locator - finds manifest files in the project tree."""

from pathlib import Path

from pkgbump.models import BumpConfig


class ManifestLocator:
    """Walks the project tree looking for manifest files."""

    def __init__(self, config: BumpConfig) -> None:
        self.config = config

    def locate(self) -> list[Path]:
        """Return every file named config.manifest_name under the root.

        Directories named config.exclude_dir are never entered. Symlinked
        directories are not followed. Raises OSError if the root (or any
        directory below it) cannot be listed.
        """
        found: list[Path] = []
        pending: list[Path] = [self.config.root_path]

        while pending:
            directory = pending.pop()
            subdirs: list[Path] = []

            for entry in sorted(directory.iterdir()):
                if entry.is_dir() and not entry.is_symlink():
                    if entry.name != self.config.exclude_dir:
                        subdirs.append(entry)
                elif entry.name == self.config.manifest_name and entry.is_file():
                    found.append(entry)

            # Reversed so the stack pops subdirectories in name order
            pending.extend(reversed(subdirs))

        return found
