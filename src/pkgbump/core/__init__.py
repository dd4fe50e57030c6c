"""Core modules for pkgbump."""
