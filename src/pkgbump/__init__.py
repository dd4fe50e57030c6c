"""pkgbump - bump the shared version of every package.json in a project tree."""

__version__ = "0.1.0"
