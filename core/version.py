"""Installed package version, shown in the top bar."""
from importlib import metadata

DIST_NAME = "homecalc"

try:
    __version__ = metadata.version(DIST_NAME)
except metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
    __version__ = "0.1.0"
