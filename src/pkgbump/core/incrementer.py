"""Version arithmetic."""

from pkgbump.models import IncrementKind, Version


def increment(base: Version, kind: IncrementKind) -> Version:
    """Bump one component of base.

    Lower components are carried over unchanged: 1.2.3 bumped by major gives
    2.2.3, and by minor gives 1.3.3.
    """
    if kind == IncrementKind.MAJOR:
        return Version(major=base.major + 1, minor=base.minor, patch=base.patch)
    if kind == IncrementKind.MINOR:
        return Version(major=base.major, minor=base.minor + 1, patch=base.patch)
    return Version(major=base.major, minor=base.minor, patch=base.patch + 1)


def next_version(current: str, kind: IncrementKind) -> str:
    """Parse current, bump it and serialize the result."""
    return str(increment(Version.parse(current), kind))
